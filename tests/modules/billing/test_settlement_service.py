# -*- coding: utf-8 -*-
"""
backend/tests/modules/billing/test_settlement_service.py

Tests de InvoiceSettlementService: pagos parciales, liquidación total y
propagación a event_orders.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from backoffice.shared.errors import InvoiceNotFound, ValidationError
from backoffice.modules.billing.enums import InvoiceStatus, OrderPaymentStatus, PaymentMethod
from backoffice.modules.billing.repositories import EventOrderRepository
from backoffice.modules.billing.services import InvoiceSettlementService, compute_settlement


class TestComputeSettlement:
    def test_partial_payment(self):
        assert compute_settlement(Decimal("100"), Decimal("0"), Decimal("40")) == (
            Decimal("40"),
            Decimal("60"),
            InvoiceStatus.PARTIAL.value,
        )

    def test_exact_payment_settles_invoice(self):
        paid, balance, status = compute_settlement(Decimal("100"), Decimal("40"), Decimal("60"))
        assert (paid, balance, status) == (Decimal("100"), Decimal("0"), "paid")

    def test_overpayment_leaves_negative_balance(self):
        paid, balance, status = compute_settlement(Decimal("100"), Decimal("0"), Decimal("120"))
        assert balance == Decimal("-20")
        assert status == "paid"


class _FailingOrders(EventOrderRepository):
    async def mark_paid_for_invoice(self, session, invoice_id, paid_at):
        raise OperationalError("UPDATE event_orders", {}, Exception("connection lost"))


class TestApplyPayment:
    @pytest.mark.asyncio
    async def test_two_payments_settle_invoice_and_orders(self, db_session, make_invoice, make_order, reader):
        invoice = await make_invoice(total="100.00")
        await make_order(invoice)
        await make_order(invoice)
        service = InvoiceSettlementService()

        first = await service.apply_payment(db_session, invoice.id, Decimal("40.00"))
        assert first.new_status == InvoiceStatus.PARTIAL.value
        assert first.balance_due == Decimal("60.00")
        assert first.orders_marked_paid == 0
        assert all(o.payment_status == OrderPaymentStatus.PENDING.value for o in await reader.orders(invoice.id))

        second = await service.apply_payment(db_session, invoice.id, Decimal("60.00"))
        assert second.new_status == InvoiceStatus.PAID.value
        assert second.new_amount_paid == Decimal("100.00")
        assert second.orders_marked_paid == 2
        assert second.cascade_failed is False

        stored = await reader.invoice(invoice.id)
        assert stored.amount_paid == Decimal("100.00")
        assert stored.balance_due == Decimal("0.00")
        assert stored.status == InvoiceStatus.PAID.value

        payments = await reader.payments(invoice.id)
        assert sorted(p.amount for p in payments) == [Decimal("40.00"), Decimal("60.00")]
        assert all(p.payment_method == PaymentMethod.STRIPE.value for p in payments)

        orders = await reader.orders(invoice.id)
        assert all(o.payment_status == OrderPaymentStatus.PAID.value for o in orders)
        assert all(o.paid_at is not None for o in orders)

    @pytest.mark.asyncio
    async def test_payment_fields_are_recorded(self, db_session, make_invoice, reader):
        invoice = await make_invoice(total="80.00")

        result = await InvoiceSettlementService().apply_payment(
            db_session,
            invoice.id,
            Decimal("80.00"),
            reference="pi_123",
            notes="Stripe checkout session cs_123",
        )

        (payment,) = await reader.payments(invoice.id)
        assert payment.id == result.payment_id
        assert payment.reference == "pi_123"
        assert payment.notes == "Stripe checkout session cs_123"

    @pytest.mark.asyncio
    async def test_unknown_invoice_raises_not_found(self, db_session):
        with pytest.raises(InvoiceNotFound) as exc:
            await InvoiceSettlementService().apply_payment(db_session, uuid4(), Decimal("10"))
        assert exc.value.status_code == 404

    @pytest.mark.asyncio
    async def test_negative_amount_is_rejected(self, db_session, make_invoice, reader):
        invoice = await make_invoice()
        with pytest.raises(ValidationError):
            await InvoiceSettlementService().apply_payment(db_session, invoice.id, Decimal("-1"))
        assert await reader.payments(invoice.id) == []

    @pytest.mark.asyncio
    async def test_cascade_failure_keeps_invoice_paid(self, db_session, make_invoice, make_order, reader):
        invoice = await make_invoice(total="50.00")
        await make_order(invoice)

        result = await InvoiceSettlementService(orders=_FailingOrders()).apply_payment(
            db_session, invoice.id, Decimal("50.00")
        )

        assert result.cascade_failed is True
        assert result.new_status == InvoiceStatus.PAID.value
        assert (await reader.invoice(invoice.id)).status == InvoiceStatus.PAID.value
        (order,) = await reader.orders(invoice.id)
        assert order.payment_status == OrderPaymentStatus.PENDING.value

# Fin del archivo backend/tests/modules/billing/test_settlement_service.py
