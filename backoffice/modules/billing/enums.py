# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/enums.py

Estados de facturación y del ledger de webhooks.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from enum import StrEnum


class InvoiceStatus(StrEnum):
    DRAFT = "draft"
    SENT = "sent"
    PARTIAL = "partial"
    PAID = "paid"
    OVERDUE = "overdue"
    VOID = "void"


class WebhookProcessingStatus(StrEnum):
    """
    Estado de un evento en el ledger.

    (none) -> processing -> processed (terminal)
                         -> failed (reintentable: vuelve a processing)
    """
    PROCESSING = "processing"
    PROCESSED = "processed"
    FAILED = "failed"


class OrderPaymentStatus(StrEnum):
    PENDING = "pending"
    PAID = "paid"


class PaymentMethod(StrEnum):
    STRIPE = "stripe"
    CASH = "cash"
    CHECK = "check"
    ZELLE = "zelle"
    OTHER = "other"


__all__ = [
    "InvoiceStatus",
    "WebhookProcessingStatus",
    "OrderPaymentStatus",
    "PaymentMethod",
]
# Fin del archivo backend/backoffice/modules/billing/enums.py
