# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/__init__.py

Facturación: invoices, pagos, órdenes de eventos y el webhook de Stripe
con su ledger de idempotencia.
"""
