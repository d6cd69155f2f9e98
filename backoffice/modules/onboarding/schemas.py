# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/schemas.py

Requests de los endpoints de onboarding que invoca n8n / Apps Script.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class EnrollmentRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    enrollment_id: UUID


class SendOnboardingRequest(BaseModel):
    """Items del catálogo del servicio a enviar a la familia."""
    model_config = ConfigDict(extra="ignore")

    enrollment_id: UUID
    item_keys: list[str] = Field(..., min_length=1)
    merge_data: Optional[dict[str, Any]] = None


class FormSubmittedRequest(BaseModel):
    """Notificación del Apps Script de Google Forms al recibir una respuesta."""
    model_config = ConfigDict(extra="ignore")

    form_id: str = Field(..., min_length=1)
    respondent_email: Optional[str] = None
    response_id: Optional[str] = None
    submitted_at: Optional[str] = None
    answers: Optional[dict[str, Any]] = None


__all__ = ["EnrollmentRequest", "SendOnboardingRequest", "FormSubmittedRequest"]
# Fin del archivo backend/backoffice/modules/onboarding/schemas.py
