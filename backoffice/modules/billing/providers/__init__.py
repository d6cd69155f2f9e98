# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/providers/__init__.py
"""

from .stripe_provider import StripeCheckoutProvider, StripeSessionResult

__all__ = ["StripeCheckoutProvider", "StripeSessionResult"]
