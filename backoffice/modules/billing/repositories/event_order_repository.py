# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/repositories/event_order_repository.py

Repositorio para la tabla event_orders.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.billing.enums import OrderPaymentStatus
from backoffice.modules.billing.models import EventOrder


class EventOrderRepository(BaseRepository[EventOrder]):
    def __init__(self) -> None:
        super().__init__(EventOrder)

    async def mark_paid_for_invoice(
        self,
        session: AsyncSession,
        invoice_id: UUID,
        paid_at: datetime,
    ) -> int:
        """Marca como pagadas todas las órdenes ligadas a la factura."""
        stmt = (
            update(EventOrder)
            .where(EventOrder.invoice_id == invoice_id)
            .values(payment_status=OrderPaymentStatus.PAID.value, paid_at=paid_at)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount or 0

# Fin del archivo backend/backoffice/modules/billing/repositories/event_order_repository.py
