# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/models/service.py

Catálogo de servicios (learning_pod, tutoring, ...).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from uuid import UUID, uuid4

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from backoffice.shared.database.base import Base


class Service(Base):
    __tablename__ = "services"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    code: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Service code={self.code}>"


__all__ = ["Service"]
# Fin del archivo backend/backoffice/modules/crm/models/service.py
