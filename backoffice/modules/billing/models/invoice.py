# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/models/invoice.py

Modelo ORM para la tabla invoices.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Numeric, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base
from backoffice.modules.billing.enums import InvoiceStatus


class Invoice(Base):
    """
    Factura de una familia.

    balance_due siempre se recalcula como total_amount - amount_paid al
    aplicar un pago (ver services/settlement_service.py); nunca se escribe
    de forma independiente.
    """

    __tablename__ = "invoices"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    family_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("families.id"),
        nullable=True,
        index=True,
    )

    public_id: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        unique=True,
        doc="Identificador público usado en el enlace de la factura.",
    )

    invoice_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True, unique=True)

    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    amount_paid: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))
    balance_due: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=InvoiceStatus.DRAFT.value,
        doc="draft, sent, partial, paid, overdue, void.",
    )

    viewed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        doc="Primera vez que la familia abrió la factura.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return (
            f"<Invoice id={self.id} public_id={self.public_id} status={self.status} "
            f"paid={self.amount_paid}/{self.total_amount}>"
        )


__all__ = ["Invoice"]
# Fin del archivo backend/backoffice/modules/billing/models/invoice.py
