# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/services/settlement_service.py

Aplicación de pagos a facturas (settlement).

apply_payment():
1. Bloquea la factura (FOR UPDATE); InvoiceNotFound si no existe.
2. Inserta el Payment inmutable.
3. Recalcula amount_paid / balance_due / status y actualiza la factura.
   Pasos 2 y 3 se confirman juntos: si algo falla no queda ni el pago ni
   el saldo, y el reintento del webhook vuelve a aplicar limpio.
4. Si la factura quedó 'paid', marca sus event_orders como pagadas en una
   transacción aparte. Un fallo aquí se registra (ERROR) para conciliación
   manual; no se reintenta ni revierte el pago.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import InvoiceNotFound, ValidationError
from backoffice.shared.utils.datetime_helpers import utcnow, utctoday
from backoffice.modules.billing.enums import InvoiceStatus, PaymentMethod
from backoffice.modules.billing.repositories import (
    EventOrderRepository,
    InvoiceRepository,
    PaymentRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettlementResult:
    invoice_id: UUID
    payment_id: UUID
    new_status: str
    new_amount_paid: Decimal
    balance_due: Decimal
    orders_marked_paid: int = 0
    cascade_failed: bool = False


def compute_settlement(
    total_amount: Decimal,
    current_amount_paid: Decimal,
    amount: Decimal,
) -> tuple[Decimal, Decimal, str]:
    """
    Devuelve (nuevo amount_paid, nuevo balance_due, nuevo status).

    Examples:
        >>> compute_settlement(Decimal("100"), Decimal("0"), Decimal("40"))
        (Decimal('40'), Decimal('60'), 'partial')
        >>> compute_settlement(Decimal("100"), Decimal("40"), Decimal("60"))
        (Decimal('100'), Decimal('0'), 'paid')
    """
    new_amount_paid = current_amount_paid + amount
    new_balance = total_amount - new_amount_paid
    new_status = InvoiceStatus.PAID if new_balance <= 0 else InvoiceStatus.PARTIAL
    return new_amount_paid, new_balance, new_status.value


class InvoiceSettlementService:
    def __init__(
        self,
        invoices: Optional[InvoiceRepository] = None,
        payments: Optional[PaymentRepository] = None,
        orders: Optional[EventOrderRepository] = None,
    ) -> None:
        self.invoices = invoices or InvoiceRepository()
        self.payments = payments or PaymentRepository()
        self.orders = orders or EventOrderRepository()

    async def apply_payment(
        self,
        session: AsyncSession,
        invoice_id: UUID,
        amount_paid: Decimal,
        *,
        method: str = PaymentMethod.STRIPE.value,
        reference: Optional[str] = None,
        notes: Optional[str] = None,
        payment_date: Optional[date] = None,
    ) -> SettlementResult:
        if amount_paid < 0:
            raise ValidationError("Payment amount must not be negative")

        invoice = await self.invoices.get_for_update(session, invoice_id)
        if invoice is None:
            raise InvoiceNotFound(invoice_id)

        payment = await self.payments.create(
            session,
            invoice_id=invoice.id,
            amount=amount_paid,
            payment_date=payment_date or utctoday(),
            payment_method=method,
            reference=reference,
            notes=notes,
        )

        new_amount_paid, new_balance, new_status = compute_settlement(
            Decimal(invoice.total_amount or 0),
            Decimal(invoice.amount_paid or 0),
            amount_paid,
        )
        invoice.amount_paid = new_amount_paid
        invoice.balance_due = new_balance
        invoice.status = new_status
        await session.flush()
        # Un rollback posterior expira las instancias
        settled_invoice_id = invoice.id
        payment_id = payment.id
        await session.commit()

        logger.info(
            "invoice_settled invoice=%s amount=%s amount_paid=%s balance=%s status=%s",
            invoice_id,
            amount_paid,
            new_amount_paid,
            new_balance,
            new_status,
        )

        orders_marked = 0
        cascade_failed = False
        if new_status == InvoiceStatus.PAID:
            try:
                orders_marked = await self.orders.mark_paid_for_invoice(session, settled_invoice_id, utcnow())
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                cascade_failed = True
                logger.exception(
                    "order_cascade_failed invoice=%s (requires manual reconciliation)",
                    invoice_id,
                )
            else:
                if orders_marked:
                    logger.info("orders_marked_paid invoice=%s count=%s", invoice_id, orders_marked)

        return SettlementResult(
            invoice_id=settled_invoice_id,
            payment_id=payment_id,
            new_status=new_status,
            new_amount_paid=new_amount_paid,
            balance_due=new_balance,
            orders_marked_paid=orders_marked,
            cascade_failed=cascade_failed,
        )


__all__ = ["InvoiceSettlementService", "SettlementResult", "compute_settlement"]
# Fin del archivo backend/backoffice/modules/billing/services/settlement_service.py
