# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/repositories/invoice_repository.py

Repositorio para la tabla invoices.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.billing.models import Invoice


class InvoiceRepository(BaseRepository[Invoice]):
    def __init__(self) -> None:
        super().__init__(Invoice)

    async def get_by_public_id(self, session: AsyncSession, public_id: str) -> Optional[Invoice]:
        result = await session.execute(select(Invoice).where(Invoice.public_id == public_id))
        return result.scalars().first()

    async def mark_viewed_if_unseen(
        self,
        session: AsyncSession,
        public_id: str,
        viewed_at: datetime,
    ) -> int:
        """
        Sella viewed_at solo si sigue en NULL (primera apertura).

        Returns:
            Número de filas actualizadas (0 o 1).
        """
        stmt = (
            update(Invoice)
            .where(Invoice.public_id == public_id, Invoice.viewed_at.is_(None))
            .values(viewed_at=viewed_at)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount or 0

# Fin del archivo backend/backoffice/modules/billing/repositories/invoice_repository.py
