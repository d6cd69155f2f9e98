# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/repositories/family_repository.py

Repositorio para la tabla families.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.crm.models import Family


class FamilyRepository(BaseRepository[Family]):
    def __init__(self) -> None:
        super().__init__(Family)

    async def find_by_email(
        self,
        session: AsyncSession,
        email: str,
    ) -> Optional[Family]:
        """Coincidencia case-insensitive sobre primary_email (la más antigua primero)."""
        stmt = (
            select(Family)
            .where(func.lower(Family.primary_email) == email.strip().lower())
            .order_by(Family.created_at.asc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def list_by_status(
        self,
        session: AsyncSession,
        status: str,
    ) -> Sequence[Family]:
        stmt = select(Family).where(Family.status == status).order_by(Family.created_at.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

# Fin del archivo backend/backoffice/modules/crm/repositories/family_repository.py
