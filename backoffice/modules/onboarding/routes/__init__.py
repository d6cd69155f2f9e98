# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/routes/__init__.py
"""

from .onboarding_routes import router

__all__ = ["router"]
