# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/webhooks/stripe_handler.py

Handler de eventos de Stripe ya verificados.

Eventos procesados:
- checkout.session.completed: aplica el pago a la factura de metadata.invoice_id

Cualquier otro tipo se acepta y se ignora (sin registro en el ledger).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import BackofficeError
from backoffice.modules.billing.enums import PaymentMethod
from backoffice.modules.billing.schemas import CheckoutSessionObject
from backoffice.modules.billing.services import InvoiceSettlementService, WebhookLedger
from .verifier import VerifiedStripeEvent

logger = logging.getLogger(__name__)

CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"


@dataclass(frozen=True)
class WebhookResult:
    status_code: int
    body: Dict[str, Any]


class StripeWebhookHandler:
    def __init__(
        self,
        ledger: WebhookLedger,
        settlement: Optional[InvoiceSettlementService] = None,
    ) -> None:
        self.ledger = ledger
        self.settlement = settlement or InvoiceSettlementService()

    async def handle(self, session: AsyncSession, event: VerifiedStripeEvent) -> WebhookResult:
        logger.info(
            "stripe_webhook_received event=%s type=%s livemode=%s",
            event.id,
            event.type,
            event.livemode,
        )

        if event.type != CHECKOUT_SESSION_COMPLETED:
            logger.info("stripe_webhook_ignored event=%s type=%s", event.id, event.type)
            return WebhookResult(200, {"received": True, "status": "ignored"})

        return await self._handle_checkout_completed(session, event)

    async def _handle_checkout_completed(
        self,
        session: AsyncSession,
        event: VerifiedStripeEvent,
    ) -> WebhookResult:
        checkout: Optional[CheckoutSessionObject]
        try:
            checkout = CheckoutSessionObject.model_validate(event.data_object)
        except PydanticValidationError:
            checkout = None

        invoice_id = checkout.invoice_id if checkout is not None else None

        begin = await self.ledger.begin_processing(
            session,
            event.id,
            event.type,
            event.payload,
            invoice_id=invoice_id,
        )
        if begin.already_processed:
            logger.info("stripe_webhook_duplicate event=%s", event.id)
            return WebhookResult(200, {"received": True, "status": "already_processed"})

        logger.info("stripe_webhook_processing event=%s attempt=%s", event.id, begin.attempt)

        rejection = self._validate_checkout(checkout)
        if rejection is not None:
            await self.ledger.mark_failed(session, event.id, rejection, invoice_id=invoice_id)
            return WebhookResult(400, {"success": False, "error": rejection})

        amount = checkout.amount

        try:
            result = await self.settlement.apply_payment(
                session,
                invoice_id,
                amount,
                method=PaymentMethod.STRIPE.value,
                reference=checkout.payment_intent,
                notes=f"Stripe checkout session {checkout.id}",
            )
        except (BackofficeError, SQLAlchemyError) as exc:
            await session.rollback()
            message = exc.message if isinstance(exc, BackofficeError) else "Database error while applying payment"
            logger.error(
                "stripe_webhook_settlement_failed event=%s invoice=%s error=%s",
                event.id,
                invoice_id,
                repr(exc),
            )
            await self.ledger.mark_failed(session, event.id, message, invoice_id=invoice_id)
            return WebhookResult(500, {"success": False, "error": message})

        await self.ledger.mark_processed(session, event.id, amount, invoice_id)

        return WebhookResult(
            200,
            {
                "received": True,
                "status": "processed",
                "invoice_id": str(result.invoice_id),
                "amount_paid": str(amount),
                "invoice_status": result.new_status,
                "cascade_failed": result.cascade_failed,
            },
        )

    @staticmethod
    def _validate_checkout(checkout: Optional[CheckoutSessionObject]) -> Optional[str]:
        """Devuelve el motivo de rechazo, o None si la sesión es aplicable."""
        if checkout is None:
            return "Invalid checkout session object"
        if checkout.invoice_id_raw is None:
            return "No invoice_id in metadata"
        if checkout.invoice_id is None:
            return "Invalid invoice_id in metadata"
        if checkout.amount is None:
            return "No amount_total in checkout session"
        return None


__all__ = ["StripeWebhookHandler", "WebhookResult", "CHECKOUT_SESSION_COMPLETED"]
# Fin del archivo backend/backoffice/modules/billing/webhooks/stripe_handler.py
