# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/repositories/onboarding_repository.py

Repositorio para la tabla enrollment_onboarding.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Set
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.onboarding.enums import OnboardingItemStatus
from backoffice.modules.onboarding.models import EnrollmentOnboarding


class OnboardingRepository(BaseRepository[EnrollmentOnboarding]):
    def __init__(self) -> None:
        super().__init__(EnrollmentOnboarding)

    async def list_item_keys(self, session: AsyncSession, enrollment_id: UUID) -> Set[str]:
        """Claves ya registradas para la inscripción, en cualquier status."""
        stmt = select(EnrollmentOnboarding.item_key).where(EnrollmentOnboarding.enrollment_id == enrollment_id)
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def add_items(
        self,
        session: AsyncSession,
        items: List[EnrollmentOnboarding],
    ) -> List[EnrollmentOnboarding]:
        session.add_all(items)
        await session.flush()
        return items

    async def list_incomplete(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
    ) -> Sequence[EnrollmentOnboarding]:
        stmt = (
            select(EnrollmentOnboarding)
            .where(
                EnrollmentOnboarding.enrollment_id == enrollment_id,
                EnrollmentOnboarding.status != OnboardingItemStatus.COMPLETED.value,
            )
            .order_by(EnrollmentOnboarding.created_at.asc(), EnrollmentOnboarding.item_key.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_sent_forms(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
    ) -> Sequence[EnrollmentOnboarding]:
        """Items 'sent' con form_id: los únicos que n8n puede verificar."""
        stmt = (
            select(EnrollmentOnboarding)
            .where(
                EnrollmentOnboarding.enrollment_id == enrollment_id,
                EnrollmentOnboarding.status == OnboardingItemStatus.SENT.value,
                EnrollmentOnboarding.form_id.is_not(None),
            )
            .order_by(EnrollmentOnboarding.sent_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_sent_by_form(
        self,
        session: AsyncSession,
        form_id: str,
        sent_to: Optional[str] = None,
    ) -> Sequence[EnrollmentOnboarding]:
        stmt = select(EnrollmentOnboarding).where(
            EnrollmentOnboarding.form_id == form_id,
            EnrollmentOnboarding.status == OnboardingItemStatus.SENT.value,
        )
        if sent_to:
            stmt = stmt.where(func.lower(EnrollmentOnboarding.sent_to) == sent_to.lower())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def mark_completed(
        self,
        session: AsyncSession,
        item_ids: Iterable[UUID],
        completed_at: datetime,
    ) -> int:
        ids = list(item_ids)
        if not ids:
            return 0
        stmt = (
            update(EnrollmentOnboarding)
            .where(
                EnrollmentOnboarding.id.in_(ids),
                EnrollmentOnboarding.status != OnboardingItemStatus.COMPLETED.value,
            )
            .values(status=OnboardingItemStatus.COMPLETED.value, completed_at=completed_at)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount or 0

# Fin del archivo backend/backoffice/modules/onboarding/repositories/onboarding_repository.py
