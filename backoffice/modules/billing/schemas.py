# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/schemas.py

Schemas de entrada del módulo de facturación.

- CheckoutSessionObject: data.object de checkout.session.completed, validado
  después de verificar la firma.
- MarkInvoiceViewedRequest: cuerpo de POST /invoices/viewed.
- CheckoutSessionRequest: cuerpo de POST /invoices/checkout-session.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckoutSessionObject(BaseModel):
    """Campos de la Checkout Session que usa el settlement."""
    model_config = ConfigDict(extra="ignore")

    id: str
    amount_total: Optional[int] = Field(default=None, description="Monto en centavos")
    payment_intent: Optional[str] = None
    metadata: dict[str, Optional[str]] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or {}

    @field_validator("payment_intent", mode="before")
    @classmethod
    def _expanded_intent_id(cls, v):
        # Con expand[]=payment_intent Stripe manda el objeto completo
        if isinstance(v, dict):
            return v.get("id")
        return v

    @property
    def invoice_id_raw(self) -> Optional[str]:
        value = self.metadata.get("invoice_id")
        return value.strip() if value and value.strip() else None

    @property
    def invoice_id(self) -> Optional[UUID]:
        """UUID de metadata.invoice_id, o None si falta o no es un UUID."""
        raw = self.invoice_id_raw
        if raw is None:
            return None
        try:
            return UUID(raw)
        except ValueError:
            return None

    @property
    def amount(self) -> Optional[Decimal]:
        """amount_total convertido de centavos a unidades."""
        if self.amount_total is None:
            return None
        return Decimal(self.amount_total) / Decimal(100)


class MarkInvoiceViewedRequest(BaseModel):
    public_id: str = Field(..., min_length=1)


class CheckoutSessionRequest(BaseModel):
    invoice_public_id: str = Field(..., min_length=1)


__all__ = ["CheckoutSessionObject", "MarkInvoiceViewedRequest", "CheckoutSessionRequest"]
# Fin del archivo backend/backoffice/modules/billing/schemas.py
