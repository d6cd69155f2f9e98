# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/services/idempotency_ledger.py

Ledger de idempotencia para webhooks de Stripe.

Garantiza efectos at-most-once bajo entrega at-least-once:

- Sin registro: INSERT 'processing' -> se procesa.
- 'processed': se omite todo efecto y se reporta éxito.
- 'failed' o 'processing' atascado: UPDATE condicional de vuelta a
  'processing' (el registro nunca desaparece) -> se reintenta.
- 'processing' reciente: otra entrega lo tiene -> ConflictError (409),
  Stripe reintentará más tarde.

Cada transición se confirma en su propia transacción para que una entrega
concurrente la vea de inmediato.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import ConflictError
from backoffice.shared.utils.datetime_helpers import utcnow
from backoffice.modules.billing.enums import WebhookProcessingStatus
from backoffice.modules.billing.repositories import WebhookEventRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerBeginResult:
    already_processed: bool
    attempt: int = 0


class WebhookLedger:
    """
    Registro durable de eventos procesados, indexado por stripe_event_id.
    """

    def __init__(
        self,
        stale_after_seconds: int = 120,
        repo: Optional[WebhookEventRepository] = None,
    ) -> None:
        self.stale_after = timedelta(seconds=stale_after_seconds)
        self.repo = repo or WebhookEventRepository()

    async def begin_processing(
        self,
        session: AsyncSession,
        event_id: str,
        event_type: str,
        payload: dict[str, Any],
        invoice_id: Optional[UUID] = None,
    ) -> LedgerBeginResult:
        """
        Registra el inicio de procesamiento del evento.

        Returns:
            LedgerBeginResult(already_processed=True) si el evento ya se aplicó.

        Raises:
            ConflictError: otra entrega del mismo evento está en curso.
        """
        now = utcnow()

        existing = await self.repo.get_by_event_id(session, event_id)
        if existing is None:
            try:
                await self.repo.insert_processing(
                    session,
                    stripe_event_id=event_id,
                    event_type=event_type,
                    raw_payload=payload,
                    started_at=now,
                    invoice_id=invoice_id,
                )
                await session.commit()
                logger.info("ledger_begin event=%s type=%s attempt=1", event_id, event_type)
                return LedgerBeginResult(already_processed=False, attempt=1)
            except IntegrityError:
                # Otra entrega insertó primero
                await session.rollback()
                logger.info("ledger_insert_conflict event=%s", event_id)
                existing = await self.repo.get_by_event_id(session, event_id)
                if existing is None:
                    raise

        if existing.processing_status == WebhookProcessingStatus.PROCESSED.value:
            logger.info("ledger_already_processed event=%s", event_id)
            return LedgerBeginResult(already_processed=True, attempt=existing.attempts)

        previous_status = existing.processing_status
        claimed = await self.repo.claim_for_retry(
            session,
            stripe_event_id=event_id,
            event_type=event_type,
            raw_payload=payload,
            started_at=now,
            stale_before=now - self.stale_after,
            invoice_id=invoice_id,
        )
        await session.commit()

        current = await self.repo.get_by_event_id(session, event_id)
        if claimed:
            attempt = current.attempts if current is not None else 0
            logger.info(
                "ledger_retry event=%s previous_status=%s attempt=%s",
                event_id,
                previous_status,
                attempt,
            )
            return LedgerBeginResult(already_processed=False, attempt=attempt)

        if current is not None and current.processing_status == WebhookProcessingStatus.PROCESSED.value:
            logger.info("ledger_already_processed event=%s", event_id)
            return LedgerBeginResult(already_processed=True, attempt=current.attempts)

        logger.warning("ledger_in_progress event=%s", event_id)
        raise ConflictError("Event is already being processed")

    async def mark_processed(
        self,
        session: AsyncSession,
        event_id: str,
        amount_paid: Optional[Decimal],
        invoice_id: Optional[UUID],
    ) -> bool:
        """
        Transición a 'processed'. Best-effort: si falla, el pago ya quedó
        aplicado y no se revierte; se registra el error y se devuelve False.
        """
        try:
            await self.repo.mark_processed(
                session,
                event_id,
                amount_paid=amount_paid,
                invoice_id=invoice_id,
                processed_at=utcnow(),
            )
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("ledger_finish_failed event=%s status=processed", event_id)
            return False
        logger.info("ledger_processed event=%s amount=%s", event_id, amount_paid)
        return True

    async def mark_failed(
        self,
        session: AsyncSession,
        event_id: str,
        error_message: str,
        invoice_id: Optional[UUID] = None,
    ) -> bool:
        """Transición a 'failed' (reintentable). Best-effort, igual que mark_processed."""
        try:
            await self.repo.mark_failed(
                session,
                event_id,
                error_message=error_message,
                invoice_id=invoice_id,
                processed_at=utcnow(),
            )
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("ledger_finish_failed event=%s status=failed", event_id)
            return False
        logger.warning("ledger_failed event=%s error=%s", event_id, error_message)
        return True


__all__ = ["WebhookLedger", "LedgerBeginResult"]
# Fin del archivo backend/backoffice/modules/billing/services/idempotency_ledger.py
