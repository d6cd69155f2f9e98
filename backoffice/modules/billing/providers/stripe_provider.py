# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/providers/stripe_provider.py

Proveedor Stripe para el pago de facturas con tarjeta.

Crea Stripe Checkout Sessions con un line item dinámico por el saldo de la
factura. La metadata (invoice_id, invoice_public_id) es la que lee
webhooks/stripe_handler.py al recibir checkout.session.completed.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import stripe
from fastapi.concurrency import run_in_threadpool

from backoffice.shared.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StripeSessionResult:
    """Resultado de crear una sesión de checkout en Stripe."""
    checkout_url: str
    session_id: str


class StripeCheckoutProvider:
    """
    Envuelve stripe.checkout.Session.create.

    La API key se pasa en cada llamada (no se toca stripe.api_key global).
    """

    def __init__(self, secret_key: str) -> None:
        self._secret_key = secret_key

    async def create_checkout_session(
        self,
        *,
        invoice_id: str,
        invoice_public_id: str,
        invoice_label: str,
        amount_cents: int,
        success_url: str,
        cancel_url: str,
        currency: str = "usd",
        invoice_number: str = "",
        family_id: str = "",
        customer_email: Optional[str] = None,
    ) -> StripeSessionResult:
        """
        Crea la Checkout Session para pagar una factura.

        Raises:
            UpstreamError: Stripe rechazó la solicitud o no respondió.
        """
        logger.info(
            "Creating Stripe checkout session: invoice=%s amount_cents=%s",
            invoice_public_id,
            amount_cents,
        )

        line_item = {
            "price_data": {
                "currency": currency,
                "unit_amount": amount_cents,
                "product_data": {
                    "name": f"Invoice {invoice_label}",
                    "description": "Payment for Eaton Academic services",
                },
            },
            "quantity": 1,
        }

        # Metadata para el webhook
        metadata = {
            "invoice_id": invoice_id,
            "invoice_public_id": invoice_public_id,
            "invoice_number": invoice_number,
            "family_id": family_id,
        }

        session_params: Dict[str, Any] = {
            "mode": "payment",
            "payment_method_types": ["card"],
            "line_items": [line_item],
            "success_url": success_url,
            "cancel_url": cancel_url,
            "metadata": metadata,
            "client_reference_id": invoice_id,
        }
        if customer_email:
            session_params["customer_email"] = customer_email

        try:
            # El SDK es síncrono; se ejecuta en threadpool para no bloquear el loop
            session = await run_in_threadpool(
                stripe.checkout.Session.create,
                api_key=self._secret_key,
                **session_params,
            )
        except stripe.StripeError as e:
            logger.error(
                "stripe_checkout_failed invoice=%s error=%s",
                invoice_public_id,
                getattr(e, "user_message", None) or str(e),
            )
            raise UpstreamError("Payment provider error") from e

        logger.info(
            "Stripe checkout session created: session_id=%s invoice=%s",
            session.id,
            invoice_public_id,
        )
        return StripeSessionResult(checkout_url=session.url, session_id=session.id)


__all__ = ["StripeCheckoutProvider", "StripeSessionResult"]
# Fin del archivo backend/backoffice/modules/billing/providers/stripe_provider.py
