# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/repositories/webhook_event_repository.py

Repositorio para el ledger stripe_invoice_webhooks.

Responsabilidades:
- Lectura por stripe_event_id
- INSERT del primer intento (la UNIQUE decide quién gana la carrera)
- UPDATE condicional para reclamar un evento failed o atascado
- Transiciones terminales processed / failed

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import and_, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.billing.enums import WebhookProcessingStatus
from backoffice.modules.billing.models import StripeWebhookEvent


class WebhookEventRepository(BaseRepository[StripeWebhookEvent]):
    def __init__(self) -> None:
        super().__init__(StripeWebhookEvent)

    async def get_by_event_id(
        self,
        session: AsyncSession,
        stripe_event_id: str,
    ) -> Optional[StripeWebhookEvent]:
        stmt = (
            select(StripeWebhookEvent)
            .where(StripeWebhookEvent.stripe_event_id == stripe_event_id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def insert_processing(
        self,
        session: AsyncSession,
        *,
        stripe_event_id: str,
        event_type: str,
        raw_payload: dict[str, Any],
        started_at: datetime,
        invoice_id: Optional[UUID] = None,
    ) -> StripeWebhookEvent:
        """
        Inserta el registro 'processing'. Lanza IntegrityError si otro
        request ya insertó el mismo stripe_event_id.
        """
        return await self.create(
            session,
            stripe_event_id=stripe_event_id,
            event_type=event_type,
            invoice_id=invoice_id,
            raw_payload=raw_payload,
            processing_status=WebhookProcessingStatus.PROCESSING.value,
            attempts=1,
            started_at=started_at,
        )

    async def claim_for_retry(
        self,
        session: AsyncSession,
        *,
        stripe_event_id: str,
        event_type: str,
        raw_payload: dict[str, Any],
        started_at: datetime,
        stale_before: datetime,
        invoice_id: Optional[UUID] = None,
    ) -> bool:
        """
        Pasa a 'processing' un registro failed, o processing con
        started_at anterior a stale_before, en un solo UPDATE condicional.

        Returns:
            True si este request se quedó con el evento.
        """
        stmt = (
            update(StripeWebhookEvent)
            .where(
                StripeWebhookEvent.stripe_event_id == stripe_event_id,
                or_(
                    StripeWebhookEvent.processing_status == WebhookProcessingStatus.FAILED.value,
                    and_(
                        StripeWebhookEvent.processing_status == WebhookProcessingStatus.PROCESSING.value,
                        StripeWebhookEvent.started_at < stale_before,
                    ),
                ),
            )
            .values(
                processing_status=WebhookProcessingStatus.PROCESSING.value,
                event_type=event_type,
                invoice_id=invoice_id,
                raw_payload=raw_payload,
                amount_paid=None,
                error_message=None,
                processed_at=None,
                started_at=started_at,
                attempts=StripeWebhookEvent.attempts + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return (result.rowcount or 0) == 1

    async def mark_processed(
        self,
        session: AsyncSession,
        stripe_event_id: str,
        *,
        amount_paid: Optional[Decimal],
        invoice_id: Optional[UUID],
        processed_at: datetime,
    ) -> int:
        stmt = (
            update(StripeWebhookEvent)
            .where(StripeWebhookEvent.stripe_event_id == stripe_event_id)
            .values(
                processing_status=WebhookProcessingStatus.PROCESSED.value,
                amount_paid=amount_paid,
                invoice_id=invoice_id,
                error_message=None,
                processed_at=processed_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount or 0

    async def mark_failed(
        self,
        session: AsyncSession,
        stripe_event_id: str,
        *,
        error_message: str,
        invoice_id: Optional[UUID],
        processed_at: datetime,
    ) -> int:
        stmt = (
            update(StripeWebhookEvent)
            .where(StripeWebhookEvent.stripe_event_id == stripe_event_id)
            .values(
                processing_status=WebhookProcessingStatus.FAILED.value,
                error_message=error_message,
                invoice_id=invoice_id,
                processed_at=processed_at,
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount or 0

# Fin del archivo backend/backoffice/modules/billing/repositories/webhook_event_repository.py
