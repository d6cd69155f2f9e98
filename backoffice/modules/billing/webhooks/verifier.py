# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/webhooks/verifier.py

Verificación de firma de webhooks de Stripe.

La firma (HMAC-SHA256, header Stripe-Signature) se calcula sobre el body
crudo exacto: se verifica ANTES de parsear el JSON y nunca sobre un
payload re-serializado.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import stripe

from backoffice.shared.errors import InvalidSignature, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifiedStripeEvent:
    """Evento de Stripe con firma verificada."""
    id: str
    type: str
    data_object: dict[str, Any]
    payload: dict[str, Any] = field(repr=False)
    livemode: bool = False


def verify_stripe_event(
    raw_body: bytes,
    sig_header: Optional[str],
    secret: str,
    tolerance: int = 300,
) -> VerifiedStripeEvent:
    """
    Verifica la firma y decodifica el evento.

    Args:
        raw_body: Body crudo del request
        sig_header: Valor del header Stripe-Signature
        secret: Webhook signing secret (whsec_...)
        tolerance: Antigüedad máxima del timestamp firmado, en segundos

    Returns:
        VerifiedStripeEvent

    Raises:
        InvalidSignature: header ausente o firma inválida
        ValidationError: payload firmado pero sin la forma de un evento
    """
    if not sig_header:
        logger.warning("stripe_webhook_missing_signature")
        raise InvalidSignature("No signature")

    try:
        payload_text = raw_body.decode("utf-8")
        stripe.WebhookSignature.verify_header(payload_text, sig_header, secret, tolerance)
    except (stripe.SignatureVerificationError, UnicodeDecodeError) as e:
        logger.warning("stripe_webhook_invalid_signature: %s", e)
        raise InvalidSignature("Invalid signature") from e

    try:
        payload = json.loads(payload_text)
    except ValueError as e:
        raise ValidationError("Invalid payload") from e

    if not isinstance(payload, dict):
        raise ValidationError("Invalid payload")

    event_id = payload.get("id")
    event_type = payload.get("type")
    data = payload.get("data")
    data_object = data.get("object") if isinstance(data, dict) else None
    if not event_id or not event_type or not isinstance(data_object, dict):
        raise ValidationError("Invalid event: id, type and data.object are required")

    return VerifiedStripeEvent(
        id=str(event_id),
        type=str(event_type),
        data_object=data_object,
        payload=payload,
        livemode=bool(payload.get("livemode", False)),
    )


__all__ = ["VerifiedStripeEvent", "verify_stripe_event"]
# Fin del archivo backend/backoffice/modules/billing/webhooks/verifier.py
