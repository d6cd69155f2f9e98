# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/models/lead_activity.py

Historial de contactos de un lead (tabla lead_activities).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base


class LeadActivity(Base):
    __tablename__ = "lead_activities"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    lead_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("leads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    contact_type: Mapped[str] = mapped_column(Text, nullable=False, doc="call, email, text, other.")
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    contacted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<LeadActivity lead={self.lead_id} type={self.contact_type}>"


__all__ = ["LeadActivity"]
# Fin del archivo backend/backoffice/modules/leads/models/lead_activity.py
