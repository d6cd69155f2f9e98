# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/models/event_order.py

Modelo ORM para la tabla event_orders (compras de eventos ligadas a una factura).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base
from backoffice.modules.billing.enums import OrderPaymentStatus


class EventOrder(Base):
    __tablename__ = "event_orders"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    invoice_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("invoices.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    payment_status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=OrderPaymentStatus.PENDING.value,
    )

    paid_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<EventOrder id={self.id} invoice={self.invoice_id} status={self.payment_status}>"


__all__ = ["EventOrder"]
# Fin del archivo backend/backoffice/modules/billing/models/event_order.py
