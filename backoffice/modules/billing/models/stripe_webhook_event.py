# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/models/stripe_webhook_event.py

Ledger de idempotencia de webhooks de Stripe (tabla stripe_invoice_webhooks).

Un registro por stripe_event_id (UNIQUE). La restricción única es el único
punto de serialización entre entregas concurrentes del mismo evento.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Integer, Numeric, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base, JSONType
from backoffice.modules.billing.enums import WebhookProcessingStatus


class StripeWebhookEvent(Base):
    __tablename__ = "stripe_invoice_webhooks"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    stripe_event_id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        doc="ID del evento en Stripe (evt_...). Clave de idempotencia.",
    )

    event_type: Mapped[str] = mapped_column(Text, nullable=False)

    invoice_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        nullable=True,
        doc="Factura afectada (desde metadata.invoice_id). Sin FK: puede no existir.",
    )

    amount_paid: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    processing_status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=WebhookProcessingStatus.PROCESSING.value,
        doc="processing, processed, failed.",
    )

    error_message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    raw_payload: Mapped[Optional[dict[str, Any]]] = mapped_column(JSONType, nullable=True)

    attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        doc="Número de veces que el evento entró en processing.",
    )

    started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        doc="Inicio del intento actual; define si un 'processing' está atascado.",
    )

    processed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return (
            f"<StripeWebhookEvent event={self.stripe_event_id} "
            f"status={self.processing_status} attempts={self.attempts}>"
        )


__all__ = ["StripeWebhookEvent"]
# Fin del archivo backend/backoffice/modules/billing/models/stripe_webhook_event.py
