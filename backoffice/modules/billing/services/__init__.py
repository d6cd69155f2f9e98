# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/services/__init__.py
"""

from .idempotency_ledger import LedgerBeginResult, WebhookLedger
from .settlement_service import InvoiceSettlementService, SettlementResult, compute_settlement
from .invoice_view_service import InvoiceViewService
from .checkout_service import CheckoutSessionService, to_cents

__all__ = [
    "LedgerBeginResult",
    "WebhookLedger",
    "InvoiceSettlementService",
    "SettlementResult",
    "compute_settlement",
    "InvoiceViewService",
    "CheckoutSessionService",
    "to_cents",
]
