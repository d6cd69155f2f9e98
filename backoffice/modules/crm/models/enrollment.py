# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/models/enrollment.py

Modelo ORM para la tabla enrollments (alumno inscrito en un servicio).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Date, DateTime, ForeignKey, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base
from backoffice.modules.crm.enums import EnrollmentStatus


class Enrollment(Base):
    __tablename__ = "enrollments"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    family_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("families.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    student_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("students.id", ondelete="SET NULL"),
        nullable=True,
    )

    service_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("services.id"),
        nullable=True,
    )

    status: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=EnrollmentStatus.TRIAL.value,
        doc="trial, active, paused, ended.",
    )

    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Enrollment id={self.id} family={self.family_id} status={self.status}>"


__all__ = ["Enrollment"]
# Fin del archivo backend/backoffice/modules/crm/models/enrollment.py
