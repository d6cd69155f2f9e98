# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/models/__init__.py
"""

from .invoice import Invoice
from .payment import Payment
from .event_order import EventOrder
from .stripe_webhook_event import StripeWebhookEvent

__all__ = ["Invoice", "Payment", "EventOrder", "StripeWebhookEvent"]
