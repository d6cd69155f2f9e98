# -*- coding: utf-8 -*-
"""
backend/tests/modules/billing/test_idempotency_ledger.py

Tests del ledger de idempotencia de webhooks (stripe_invoice_webhooks).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from backoffice.shared.errors import ConflictError
from backoffice.shared.utils.datetime_helpers import utcnow
from backoffice.modules.billing.enums import WebhookProcessingStatus
from backoffice.modules.billing.models import StripeWebhookEvent
from backoffice.modules.billing.repositories import WebhookEventRepository
from backoffice.modules.billing.services import WebhookLedger

EVENT_TYPE = "checkout.session.completed"
PAYLOAD = {"id": "evt_ledger", "type": EVENT_TYPE}


class _LateReadRepository(WebhookEventRepository):
    """La primera lectura no ve el registro: otra entrega lo inserta justo después."""

    def __init__(self) -> None:
        super().__init__()
        self.reads = 0

    async def get_by_event_id(self, session, event_id):
        self.reads += 1
        if self.reads == 1:
            return None
        return await super().get_by_event_id(session, event_id)


async def _seed(db_session, event_id: str, status: str, started_ago: timedelta = timedelta(0), attempts: int = 1):
    row = StripeWebhookEvent(
        stripe_event_id=event_id,
        event_type=EVENT_TYPE,
        processing_status=status,
        attempts=attempts,
        started_at=utcnow() - started_ago,
        raw_payload=PAYLOAD,
    )
    db_session.add(row)
    await db_session.commit()
    return row


class TestBeginProcessing:
    @pytest.mark.asyncio
    async def test_new_event_is_inserted_as_processing(self, db_session, reader):
        ledger = WebhookLedger()
        result = await ledger.begin_processing(db_session, "evt_new", EVENT_TYPE, PAYLOAD)

        assert result.already_processed is False
        assert result.attempt == 1
        row = await reader.webhook("evt_new")
        assert row.processing_status == WebhookProcessingStatus.PROCESSING.value
        assert row.raw_payload == PAYLOAD

    @pytest.mark.asyncio
    async def test_processed_event_is_reported_as_duplicate(self, db_session, reader):
        await _seed(db_session, "evt_done", WebhookProcessingStatus.PROCESSED.value)

        result = await WebhookLedger().begin_processing(db_session, "evt_done", EVENT_TYPE, PAYLOAD)

        assert result.already_processed is True
        row = await reader.webhook("evt_done")
        assert row.processing_status == WebhookProcessingStatus.PROCESSED.value
        assert row.attempts == 1

    @pytest.mark.asyncio
    async def test_failed_event_is_reclaimed_for_retry(self, db_session, reader):
        await _seed(db_session, "evt_failed", WebhookProcessingStatus.FAILED.value)

        result = await WebhookLedger().begin_processing(db_session, "evt_failed", EVENT_TYPE, PAYLOAD)

        assert result.already_processed is False
        assert result.attempt == 2
        row = await reader.webhook("evt_failed")
        assert row.processing_status == WebhookProcessingStatus.PROCESSING.value
        assert row.error_message is None

    @pytest.mark.asyncio
    async def test_recent_processing_event_raises_conflict(self, db_session, reader):
        await _seed(db_session, "evt_busy", WebhookProcessingStatus.PROCESSING.value)

        with pytest.raises(ConflictError) as exc:
            await WebhookLedger(stale_after_seconds=120).begin_processing(
                db_session, "evt_busy", EVENT_TYPE, PAYLOAD
            )
        assert exc.value.status_code == 409
        assert (await reader.webhook("evt_busy")).attempts == 1

    @pytest.mark.asyncio
    async def test_stale_processing_event_is_reclaimed(self, db_session, reader):
        await _seed(
            db_session,
            "evt_stuck",
            WebhookProcessingStatus.PROCESSING.value,
            started_ago=timedelta(minutes=10),
        )

        result = await WebhookLedger(stale_after_seconds=120).begin_processing(
            db_session, "evt_stuck", EVENT_TYPE, PAYLOAD
        )

        assert result.already_processed is False
        assert result.attempt == 2


class TestConcurrentInsert:
    """La entrega que pierde el INSERT relee el registro ganador."""

    @pytest.mark.asyncio
    async def test_losing_insert_while_winner_processing_raises_conflict(
        self, db_session, session_factory, reader
    ):
        async with session_factory() as other:
            await _seed(other, "evt_race", WebhookProcessingStatus.PROCESSING.value)
        repo = _LateReadRepository()

        with pytest.raises(ConflictError):
            await WebhookLedger(repo=repo).begin_processing(db_session, "evt_race", EVENT_TYPE, PAYLOAD)

        assert repo.reads >= 2
        assert await reader.webhook_count() == 1
        row = await reader.webhook("evt_race")
        assert row.processing_status == WebhookProcessingStatus.PROCESSING.value
        assert row.attempts == 1

    @pytest.mark.asyncio
    async def test_losing_insert_after_winner_processed_is_duplicate(
        self, db_session, session_factory, reader
    ):
        async with session_factory() as other:
            await _seed(other, "evt_race_done", WebhookProcessingStatus.PROCESSED.value)

        result = await WebhookLedger(repo=_LateReadRepository()).begin_processing(
            db_session, "evt_race_done", EVENT_TYPE, PAYLOAD
        )

        assert result.already_processed is True
        assert await reader.webhook_count() == 1
        assert (await reader.webhook("evt_race_done")).attempts == 1


class TestFinish:
    @pytest.mark.asyncio
    async def test_mark_processed_records_amount(self, db_session, reader):
        ledger = WebhookLedger()
        await ledger.begin_processing(db_session, "evt_fin", EVENT_TYPE, PAYLOAD)

        assert await ledger.mark_processed(db_session, "evt_fin", Decimal("40.00"), None) is True

        row = await reader.webhook("evt_fin")
        assert row.processing_status == WebhookProcessingStatus.PROCESSED.value
        assert row.amount_paid == Decimal("40.00")
        assert row.processed_at is not None

    @pytest.mark.asyncio
    async def test_mark_failed_keeps_error_message(self, db_session, reader):
        ledger = WebhookLedger()
        await ledger.begin_processing(db_session, "evt_err", EVENT_TYPE, PAYLOAD)

        assert await ledger.mark_failed(db_session, "evt_err", "No invoice_id in metadata") is True

        row = await reader.webhook("evt_err")
        assert row.processing_status == WebhookProcessingStatus.FAILED.value
        assert row.error_message == "No invoice_id in metadata"

# Fin del archivo backend/tests/modules/billing/test_idempotency_ledger.py
