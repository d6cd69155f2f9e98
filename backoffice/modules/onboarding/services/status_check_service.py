# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/services/status_check_service.py

Verificación de formularios enviados (status 'sent' con form_id).

Si hay URL de n8n configurada, se le envían los items y se marcan como
completados los que reporte; sin URL, solo se informa cuántos hay.
Un fallo de n8n se registra y el endpoint responde updated=0.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import UpstreamError
from backoffice.shared.utils.datetime_helpers import to_iso8601, utcnow
from backoffice.modules.crm.repositories import EnrollmentRepository
from backoffice.modules.onboarding.repositories import OnboardingRepository
from .n8n_client import N8nFormStatusClient

logger = logging.getLogger(__name__)


class OnboardingStatusChecker:
    def __init__(
        self,
        client: Optional[N8nFormStatusClient] = None,
        items: Optional[OnboardingRepository] = None,
        enrollments: Optional[EnrollmentRepository] = None,
    ) -> None:
        self.client = client
        self.items = items or OnboardingRepository()
        self.enrollments = enrollments or EnrollmentRepository()

    async def check(self, session: AsyncSession, enrollment_id: UUID) -> Dict[str, Any]:
        sent = await self.items.list_sent_forms(session, enrollment_id)
        if not sent:
            return {
                "success": True,
                "updated": 0,
                "checked": 0,
                "message": "No pending form submissions to check",
            }

        if self.client is None:
            logger.info("onboarding_check_skipped enrollment=%s (n8n URL not configured)", enrollment_id)
            return {"success": True, "updated": 0, "checked": len(sent)}

        resolved = await self.enrollments.get_with_family_and_student(session, enrollment_id)
        family = resolved[1] if resolved is not None else None

        payload = {
            "enrollment_id": str(enrollment_id),
            "email": family.primary_email if family is not None else None,
            "items": [
                {
                    "id": str(item.id),
                    "form_id": item.form_id,
                    "item_key": item.item_key,
                    "sent_at": to_iso8601(item.sent_at),
                }
                for item in sent
            ],
        }

        try:
            completed_ids = await self.client.check(payload)
        except UpstreamError as e:
            logger.error("onboarding_check_n8n_failed enrollment=%s error=%s", enrollment_id, e.message)
            return {"success": True, "updated": 0, "checked": len(sent)}

        # Solo ids de los items enviados a revisión
        by_id = {str(item.id): item.id for item in sent}
        to_complete = [by_id[i] for i in completed_ids if i in by_id]

        updated = await self.items.mark_completed(session, to_complete, utcnow())
        await session.commit()

        logger.info(
            "onboarding_check_done enrollment=%s checked=%s updated=%s",
            enrollment_id,
            len(sent),
            updated,
        )
        return {"success": True, "updated": updated, "checked": len(sent)}


__all__ = ["OnboardingStatusChecker"]
# Fin del archivo backend/backoffice/modules/onboarding/services/status_check_service.py
