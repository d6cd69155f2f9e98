# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/enums.py

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from enum import StrEnum


class OnboardingItemType(StrEnum):
    FORM = "form"
    DOCUMENT = "document"


class OnboardingItemStatus(StrEnum):
    PENDING = "pending"
    SENT = "sent"
    COMPLETED = "completed"


__all__ = ["OnboardingItemType", "OnboardingItemStatus"]
# Fin del archivo backend/backoffice/modules/onboarding/enums.py
