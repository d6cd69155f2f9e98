# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/__init__.py

Captura de leads desde formularios del sitio (exit intent, waitlist).
"""
