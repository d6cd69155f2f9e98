# -*- coding: utf-8 -*-
"""
backend/tests/modules/billing/conftest.py

Fixtures de facturación: facturas, órdenes y lectura fresca de la DB.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import select

from backoffice.modules.billing.enums import InvoiceStatus, OrderPaymentStatus
from backoffice.modules.billing.models import (
    EventOrder,
    Invoice,
    Payment,
    StripeWebhookEvent,
)


@pytest.fixture
def make_invoice(db_session):
    async def _make(
        total: str = "100.00",
        paid: str = "0.00",
        status: str = InvoiceStatus.SENT.value,
        public_id: str | None = None,
    ) -> Invoice:
        invoice = Invoice(
            public_id=public_id or f"inv-{uuid4().hex[:10]}",
            total_amount=Decimal(total),
            amount_paid=Decimal(paid),
            balance_due=Decimal(total) - Decimal(paid),
            status=status,
        )
        db_session.add(invoice)
        await db_session.commit()
        return invoice

    return _make


@pytest.fixture
def make_order(db_session):
    async def _make(invoice: Invoice) -> EventOrder:
        order = EventOrder(invoice_id=invoice.id, payment_status=OrderPaymentStatus.PENDING.value)
        db_session.add(order)
        await db_session.commit()
        return order

    return _make


class BillingReader:
    """Consultas en una sesión nueva para ver lo que otra sesión confirmó."""

    def __init__(self, session_factory):
        self._factory = session_factory

    async def invoice(self, invoice_id) -> Invoice:
        async with self._factory() as session:
            return await session.get(Invoice, invoice_id)

    async def payments(self, invoice_id) -> list[Payment]:
        async with self._factory() as session:
            result = await session.execute(select(Payment).where(Payment.invoice_id == invoice_id))
            return list(result.scalars().all())

    async def orders(self, invoice_id) -> list[EventOrder]:
        async with self._factory() as session:
            result = await session.execute(select(EventOrder).where(EventOrder.invoice_id == invoice_id))
            return list(result.scalars().all())

    async def webhook(self, event_id) -> StripeWebhookEvent | None:
        async with self._factory() as session:
            result = await session.execute(
                select(StripeWebhookEvent).where(StripeWebhookEvent.stripe_event_id == event_id)
            )
            return result.scalars().first()

    async def webhook_count(self) -> int:
        async with self._factory() as session:
            result = await session.execute(select(StripeWebhookEvent))
            return len(result.scalars().all())


@pytest.fixture
def reader(session_factory) -> BillingReader:
    return BillingReader(session_factory)

# Fin del archivo backend/tests/modules/billing/conftest.py
