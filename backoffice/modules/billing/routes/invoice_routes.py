# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/routes/invoice_routes.py

Endpoints de la página pública de la factura (públicos, sin API key):
- POST /invoices/viewed            al abrirse la página
- POST /invoices/checkout-session  botón "Pay with Card"; devuelve la URL
                                   de Stripe Checkout

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.config import AppSettings, get_settings
from backoffice.shared.database import get_async_session
from backoffice.modules.billing.providers import StripeCheckoutProvider
from backoffice.modules.billing.schemas import CheckoutSessionRequest, MarkInvoiceViewedRequest
from backoffice.modules.billing.services import CheckoutSessionService, InvoiceViewService

router = APIRouter(prefix="/invoices", tags=["billing:invoices"])


@router.post("/viewed")
async def mark_invoice_viewed(
    body: MarkInvoiceViewedRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    return await InvoiceViewService().mark_viewed(session, body.public_id)


@router.post("/checkout-session")
async def create_checkout_session(
    body: CheckoutSessionRequest,
    settings: Annotated[AppSettings, Depends(get_settings)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    """
    Crea una Stripe Checkout Session por el saldo de la factura.

    400 si la factura ya está pagada, anulada o sin saldo; 404 si no existe;
    500 si falta STRIPE_SECRET_KEY o Stripe falla.
    """
    provider = StripeCheckoutProvider(settings.require_stripe_secret_key())
    service = CheckoutSessionService(provider, portal_url=settings.invoice_portal_url)
    return await service.create_for_invoice(session, body.invoice_public_id)


__all__ = ["router"]
# Fin del archivo backend/backoffice/modules/billing/routes/invoice_routes.py
