# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/repositories/__init__.py
"""

from .invoice_repository import InvoiceRepository
from .payment_repository import PaymentRepository
from .event_order_repository import EventOrderRepository
from .webhook_event_repository import WebhookEventRepository

__all__ = [
    "InvoiceRepository",
    "PaymentRepository",
    "EventOrderRepository",
    "WebhookEventRepository",
]
