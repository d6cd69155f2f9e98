# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/__init__.py

Infraestructura compartida: configuración, base de datos, errores y utilidades.
"""
