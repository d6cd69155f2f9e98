# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/schemas.py

Variantes de request para POST /leads/ingest.

El cuerpo es una unión discriminada por lead_type:
- ExitIntentLead: popup de salida (solo email y nombre)
- WaitlistLead:   lista de espera del learning pod (con datos de la familia)

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, RootModel, field_validator


class _LeadBase(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    email: EmailStr
    name: Optional[str] = None
    source_url: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("name", "source_url", mode="after")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class ExitIntentLead(_LeadBase):
    lead_type: Literal["exit_intent"]


class WaitlistLead(_LeadBase):
    lead_type: Literal["waitlist"]

    num_children: Optional[int] = Field(default=None, ge=0)
    children_ages: Optional[str] = None
    preferred_days: Optional[str] = None
    preferred_time: Optional[str] = None
    service_interest: Optional[str] = None
    notes: Optional[str] = None


LeadSubmission = Annotated[
    Union[ExitIntentLead, WaitlistLead],
    Field(discriminator="lead_type"),
]


class LeadSubmissionBody(RootModel[LeadSubmission]):
    """Cuerpo de POST /leads/ingest; .root es la variante concreta."""


__all__ = ["ExitIntentLead", "WaitlistLead", "LeadSubmission", "LeadSubmissionBody"]
# Fin del archivo backend/backoffice/modules/leads/schemas.py
