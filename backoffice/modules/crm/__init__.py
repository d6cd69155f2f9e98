# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/__init__.py

Familias, alumnos, servicios e inscripciones (tablas compartidas por
leads, onboarding y conciliación).
"""
