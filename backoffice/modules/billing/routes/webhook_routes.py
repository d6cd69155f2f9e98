# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/routes/webhook_routes.py

Webhook de Stripe para facturas.

Endpoint:
- POST /webhooks/stripe

Respuestas:
- 200 {"received": true, "status": "processed" | "already_processed" | "ignored"}
- 400 firma ausente/inválida (sin cambios de estado) o metadata incompleta
- 409 otra entrega del mismo evento está en curso
- 500 Stripe/DB sin configurar, o fallo al aplicar el pago (ledger 'failed')

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.config import AppSettings, get_settings
from backoffice.shared.database import get_async_session
from backoffice.shared.utils.json_response import UTF8JSONResponse, json_response_utf8
from backoffice.modules.billing.services import WebhookLedger
from backoffice.modules.billing.webhooks import StripeWebhookHandler, verify_stripe_event

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/webhooks",
    tags=["billing:webhooks"],
)


@router.post("/stripe")
async def stripe_invoice_webhook(
    request: Request,
    settings: Annotated[AppSettings, Depends(get_settings)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
    stripe_signature: Annotated[Optional[str], Header()] = None,
) -> UTF8JSONResponse:
    """
    Procesa eventos de Stripe con idempotencia por event id.

    Requiere header Stripe-Signature; la firma se valida contra el body crudo.
    """
    webhook_secret = settings.require_stripe_webhook_secret()

    raw_body = await request.body()
    event = verify_stripe_event(
        raw_body,
        stripe_signature,
        webhook_secret,
        tolerance=settings.stripe_webhook_tolerance_seconds,
    )

    handler = StripeWebhookHandler(
        ledger=WebhookLedger(stale_after_seconds=settings.webhook_processing_stale_seconds),
    )
    result = await handler.handle(session, event)
    return json_response_utf8(result.body, status_code=result.status_code)


__all__ = ["router"]
# Fin del archivo backend/backoffice/modules/billing/routes/webhook_routes.py
