# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/services/checkout_service.py

Checkout con tarjeta desde la página pública de la factura.

Valida que la factura se pueda cobrar (no pagada, no anulada, saldo > 0) y
crea la Checkout Session por el saldo pendiente. El pago se aplica después,
cuando llega checkout.session.completed al webhook.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import NotFound, ValidationError
from backoffice.modules.billing.enums import InvoiceStatus
from backoffice.modules.billing.providers import StripeCheckoutProvider
from backoffice.modules.billing.repositories import InvoiceRepository
from backoffice.modules.crm.models import Family

logger = logging.getLogger(__name__)


def to_cents(amount: Decimal) -> int:
    """
    Examples:
        >>> to_cents(Decimal("45.505"))
        4551
    """
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CheckoutSessionService:
    def __init__(
        self,
        provider: StripeCheckoutProvider,
        portal_url: str,
        invoices: Optional[InvoiceRepository] = None,
    ) -> None:
        self.provider = provider
        self.portal_url = portal_url.rstrip("/")
        self.invoices = invoices or InvoiceRepository()

    async def create_for_invoice(self, session: AsyncSession, public_id: str) -> Dict[str, Any]:
        public_id = (public_id or "").strip()
        if not public_id:
            raise ValidationError("invoice_public_id is required")

        invoice = await self.invoices.get_by_public_id(session, public_id)
        if invoice is None:
            raise NotFound("Invoice not found")

        if invoice.status == InvoiceStatus.PAID.value:
            raise ValidationError("This invoice has already been paid")
        if invoice.status == InvoiceStatus.VOID.value:
            raise ValidationError("This invoice has been voided")

        balance_due = invoice.balance_due or Decimal("0")
        if balance_due <= 0:
            raise ValidationError("No balance due on this invoice")

        family = await session.get(Family, invoice.family_id) if invoice.family_id else None
        invoice_url = f"{self.portal_url}/invoice/{invoice.public_id}"

        result = await self.provider.create_checkout_session(
            invoice_id=str(invoice.id),
            invoice_public_id=invoice.public_id,
            invoice_label=invoice.invoice_number or f"INV-{invoice.public_id}",
            amount_cents=to_cents(balance_due),
            success_url=f"{invoice_url}?payment=success",
            cancel_url=f"{invoice_url}?payment=cancelled",
            invoice_number=invoice.invoice_number or "",
            family_id=str(family.id) if family is not None else "",
            customer_email=family.primary_email if family is not None else None,
        )

        logger.info("checkout_session_created invoice=%s session=%s", public_id, result.session_id)
        return {
            "success": True,
            "checkout_url": result.checkout_url,
            "session_id": result.session_id,
        }


__all__ = ["CheckoutSessionService", "to_cents"]
# Fin del archivo backend/backoffice/modules/billing/services/checkout_service.py
