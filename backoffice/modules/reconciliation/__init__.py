# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/reconciliation/__init__.py

Lógica de los scripts de conciliación que corre un operador a mano
(ver scripts/find_missing_enrollments.py y scripts/migrate_lead_families.py).
"""
