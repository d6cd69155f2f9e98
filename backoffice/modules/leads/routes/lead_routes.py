# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/routes/lead_routes.py

Endpoint:
- POST /leads/ingest

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.automation_auth import AutomationAuth
from backoffice.shared.database import get_async_session
from backoffice.modules.leads.schemas import LeadSubmissionBody
from backoffice.modules.leads.services import LeadIngestService

router = APIRouter(prefix="/leads", tags=["leads"])


@router.post("/ingest")
async def ingest_lead(
    body: LeadSubmissionBody,
    _: AutomationAuth,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> Dict[str, Any]:
    """
    Registra un lead de exit intent o waitlist.

    action: created | exists | skipped
    """
    return await LeadIngestService().ingest(session, body.root)


__all__ = ["router"]
# Fin del archivo backend/backoffice/modules/leads/routes/lead_routes.py
