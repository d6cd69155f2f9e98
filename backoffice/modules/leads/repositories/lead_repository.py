# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/repositories/lead_repository.py

Repositorio para las tablas leads y lead_activities.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.leads.enums import OPEN_LEAD_STATUSES
from backoffice.modules.leads.models import Lead, LeadActivity


class LeadRepository(BaseRepository[Lead]):
    def __init__(self) -> None:
        super().__init__(Lead)

    async def find_open_lead(
        self,
        session: AsyncSession,
        email: str,
        lead_type: str,
    ) -> Optional[Lead]:
        """Lead más reciente en status new/contacted para (email, lead_type)."""
        stmt = (
            select(Lead)
            .where(
                func.lower(Lead.email) == email.lower(),
                Lead.lead_type == lead_type,
                Lead.status.in_([s.value for s in OPEN_LEAD_STATUSES]),
            )
            .order_by(Lead.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def email_exists(self, session: AsyncSession, email: str) -> bool:
        """True si existe cualquier lead con ese email (sin importar tipo o status)."""
        stmt = select(Lead.id).where(func.lower(Lead.email) == email.lower()).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add_activity(
        self,
        session: AsyncSession,
        lead_id: UUID,
        contact_type: str,
        notes: Optional[str] = None,
    ) -> LeadActivity:
        activity = LeadActivity(lead_id=lead_id, contact_type=contact_type, notes=notes)
        session.add(activity)
        await session.flush()
        return activity

# Fin del archivo backend/backoffice/modules/leads/repositories/lead_repository.py
