# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/models/student.py

Modelo ORM para la tabla students.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base


class Student(Base):
    __tablename__ = "students"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    family_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("families.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    full_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Nombre completo; en el roster histórico aparece como 'Apellido, Nombre'.",
    )

    dob: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    age_group: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.full_name!r}>"


__all__ = ["Student"]
# Fin del archivo backend/backoffice/modules/crm/models/student.py
