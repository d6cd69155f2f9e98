# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/models/payment.py

Modelo ORM para la tabla payments (asientos inmutables de dinero aplicado).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Date, DateTime, ForeignKey, Numeric, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base


class Payment(Base):
    __tablename__ = "payments"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    invoice_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("invoices.id"),
        nullable=False,
        index=True,
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_date: Mapped[date] = mapped_column(Date, nullable=False)

    payment_method: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="stripe, cash, check, zelle, other.",
    )

    reference: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Referencia externa (payment_intent de Stripe).",
    )

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Payment id={self.id} invoice={self.invoice_id} amount={self.amount}>"


__all__ = ["Payment"]
# Fin del archivo backend/backoffice/modules/billing/models/payment.py
