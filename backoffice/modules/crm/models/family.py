# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/models/family.py

Modelo ORM para la tabla families.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base
from backoffice.modules.crm.enums import FamilyStatus


class Family(Base):
    """
    Familia cliente (o prospecto, con status 'lead').

    display_name sigue la convención "Apellido, Nombre".
    """

    __tablename__ = "families"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    display_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Nombre mostrado, normalmente 'Apellido, Nombre'.",
    )

    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=FamilyStatus.LEAD.value,
        doc="lead, trial, active, paused, churned.",
    )

    primary_email: Mapped[Optional[str]] = mapped_column(Text, nullable=True, index=True)
    primary_phone: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    primary_contact_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Family id={self.id} name={self.display_name!r} status={self.status}>"


__all__ = ["Family"]
# Fin del archivo backend/backoffice/modules/crm/models/family.py
