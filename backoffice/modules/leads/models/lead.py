# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/models/lead.py

Modelo ORM para la tabla leads.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Integer, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base
from backoffice.modules.leads.enums import LeadStatus


class Lead(Base):
    """
    Prospecto capturado por un formulario externo.

    Los campos num_children .. service_interest solo aplican a leads de waitlist.
    """

    __tablename__ = "leads"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    email: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        index=True,
        doc="Email normalizado (minúsculas, sin espacios).",
    )

    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    lead_type: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="exit_intent, waitlist, calendly_call, event.",
    )

    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=LeadStatus.NEW.value,
        doc="new, contacted, converted, closed.",
    )

    source_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    family_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("families.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    converted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    num_children: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    children_ages: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    preferred_days: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    preferred_time: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    service_interest: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

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
        return f"<Lead id={self.id} email={self.email} type={self.lead_type} status={self.status}>"


__all__ = ["Lead"]
# Fin del archivo backend/backoffice/modules/leads/models/lead.py
