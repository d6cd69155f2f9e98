# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/models/enrollment_onboarding.py

Modelo ORM para la tabla enrollment_onboarding.

Cada fila es un formulario (Google Forms) o documento (firma) que n8n envía
a la familia; form_id permite cruzar la respuesta del formulario.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Index, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base, JSONType
from backoffice.modules.onboarding.enums import OnboardingItemStatus


class EnrollmentOnboarding(Base):
    __tablename__ = "enrollment_onboarding"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    enrollment_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("enrollments.id", ondelete="CASCADE"),
        nullable=False,
    )

    item_type: Mapped[str] = mapped_column(Text, nullable=False, doc="form, document.")
    item_key: Mapped[str] = mapped_column(Text, nullable=False, doc="Clave estable (p.ej. 'medical_form').")
    item_name: Mapped[str] = mapped_column(Text, nullable=False)

    form_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    form_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True, index=True)
    document_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    document_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    merge_data: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSONType,
        nullable=True,
        doc="Valores usados para rellenar la plantilla del documento.",
    )

    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=OnboardingItemStatus.PENDING.value,
        doc="pending, sent, completed.",
    )

    sent_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    sent_to: Mapped[Optional[str]] = mapped_column(Text, nullable=True, doc="Email al que se envió.")
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("ix_enrollment_onboarding_enrollment_status", "enrollment_id", "status"),
    )

    @property
    def link(self) -> Optional[str]:
        """URL a mostrar: la del formulario o, si no hay, la del documento."""
        return self.form_url or self.document_url

    def __repr__(self) -> str:
        return f"<EnrollmentOnboarding id={self.id} key={self.item_key} status={self.status}>"


__all__ = ["EnrollmentOnboarding"]
# Fin del archivo backend/backoffice/modules/onboarding/models/enrollment_onboarding.py
