# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/repositories/__init__.py
"""

from .onboarding_repository import OnboardingRepository

__all__ = ["OnboardingRepository"]
