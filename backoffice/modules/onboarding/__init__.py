# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/__init__.py

Formularios y documentos que una familia completa tras inscribirse.
"""
