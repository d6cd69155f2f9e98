# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/webhooks/__init__.py
"""

from .verifier import VerifiedStripeEvent, verify_stripe_event
from .stripe_handler import CHECKOUT_SESSION_COMPLETED, StripeWebhookHandler, WebhookResult

__all__ = [
    "VerifiedStripeEvent",
    "verify_stripe_event",
    "CHECKOUT_SESSION_COMPLETED",
    "StripeWebhookHandler",
    "WebhookResult",
]
