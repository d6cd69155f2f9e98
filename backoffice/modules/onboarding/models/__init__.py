# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/models/__init__.py
"""

from .enrollment_onboarding import EnrollmentOnboarding

__all__ = ["EnrollmentOnboarding"]
