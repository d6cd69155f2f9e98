# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/routes/onboarding_routes.py

Endpoints para n8n y Google Apps Script:
- POST /onboarding/send            crea los items del servicio y envía el email
- POST /onboarding/pending         items pendientes de una inscripción
- POST /onboarding/check-status    verifica formularios enviados vía n8n
- POST /onboarding/form-submitted  notificación de respuesta de Google Forms

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.automation_auth import AutomationAuth
from backoffice.shared.config import AppSettings, get_settings
from backoffice.shared.database import get_async_session
from backoffice.modules.onboarding.schemas import (
    EnrollmentRequest,
    FormSubmittedRequest,
    SendOnboardingRequest,
)
from backoffice.modules.onboarding.services import (
    FormSubmissionService,
    N8nFormStatusClient,
    N8nWebhookClient,
    OnboardingStatusChecker,
    PendingOnboardingService,
    SendOnboardingService,
)

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


def _webhook_client(url: Optional[str], settings: AppSettings, name: str) -> Optional[N8nWebhookClient]:
    if not url:
        return None
    return N8nWebhookClient(url, timeout=settings.n8n_timeout_seconds, name=name)


@router.post("/send")
async def send_onboarding(
    body: SendOnboardingRequest,
    _: AutomationAuth,
    settings: Annotated[AppSettings, Depends(get_settings)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    service = SendOnboardingService(
        email_client=_webhook_client(settings.n8n_send_email_webhook_url, settings, "send-email"),
        document_client=_webhook_client(settings.n8n_create_document_webhook_url, settings, "create-document"),
        nudge_client=_webhook_client(settings.n8n_nudge_webhook_url, settings, "nudge"),
    )
    return await service.send(session, body)


@router.post("/pending")
async def get_pending_onboarding(
    body: EnrollmentRequest,
    _: AutomationAuth,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    return await PendingOnboardingService().get_pending(session, body.enrollment_id)


@router.post("/check-status")
async def check_onboarding_status(
    body: EnrollmentRequest,
    _: AutomationAuth,
    settings: Annotated[AppSettings, Depends(get_settings)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    client = None
    if settings.n8n_check_status_webhook_url:
        client = N8nFormStatusClient(
            settings.n8n_check_status_webhook_url,
            timeout=settings.n8n_timeout_seconds,
        )
    return await OnboardingStatusChecker(client=client).check(session, body.enrollment_id)


@router.post("/form-submitted")
async def form_submitted(
    body: FormSubmittedRequest,
    _: AutomationAuth,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    return await FormSubmissionService().record_submission(session, body)


__all__ = ["router"]
# Fin del archivo backend/backoffice/modules/onboarding/routes/onboarding_routes.py
