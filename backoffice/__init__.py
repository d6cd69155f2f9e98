# -*- coding: utf-8 -*-
"""
backend/backoffice/__init__.py

Backoffice de Eaton Academic: webhooks de Stripe, endpoints para n8n
y scripts de conciliación.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

__version__ = "1.0.0"

# Fin del archivo backend/backoffice/__init__.py
