# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/services/lead_ingest_service.py

Ingesta de leads desde formularios del sitio (vía n8n).

Flujo:
1. Lead abierto (new/contacted) con el mismo (email, lead_type)
   -> se registra la repetición en lead_activities y se devuelve "exists".
2. Familia con el mismo email (case-insensitive):
   - con inscripción active/trial -> "skipped" (ya es cliente)
   - sin ella -> se reutiliza
3. Sin familia -> se crea con status 'lead'.
4. Se crea el lead -> "created".

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.modules.crm.enums import FamilyStatus
from backoffice.modules.crm.repositories import EnrollmentRepository, FamilyRepository
from backoffice.modules.leads.enums import ContactType, LeadStatus
from backoffice.modules.leads.repositories import LeadRepository
from backoffice.modules.leads.schemas import ExitIntentLead, WaitlistLead
from .name_format import format_family_name

logger = logging.getLogger(__name__)

LeadPayload = Union[ExitIntentLead, WaitlistLead]


def _source_suffix(source_url: Optional[str]) -> str:
    return f" from {source_url}" if source_url else ""


class LeadIngestService:
    def __init__(
        self,
        leads: Optional[LeadRepository] = None,
        families: Optional[FamilyRepository] = None,
        enrollments: Optional[EnrollmentRepository] = None,
    ) -> None:
        self.leads = leads or LeadRepository()
        self.families = families or FamilyRepository()
        self.enrollments = enrollments or EnrollmentRepository()

    async def ingest(self, session: AsyncSession, payload: LeadPayload) -> Dict[str, Any]:
        email = str(payload.email).strip().lower()
        lead_type = payload.lead_type

        existing = await self.leads.find_open_lead(session, email, lead_type)
        if existing is not None:
            await self.leads.add_activity(
                session,
                existing.id,
                ContactType.OTHER.value,
                notes=f"Repeat {lead_type} form submission{_source_suffix(payload.source_url)}",
            )
            await session.commit()
            logger.info("lead_exists lead=%s type=%s", existing.id, lead_type)
            return {
                "success": True,
                "action": "exists",
                "leadId": str(existing.id),
                "familyId": str(existing.family_id) if existing.family_id else None,
                "message": "Lead already exists",
            }

        family = await self.families.find_by_email(session, email)
        family_action = "existing"

        if family is not None:
            if await self.enrollments.has_current_enrollment(session, family.id):
                logger.info("lead_skipped_existing_customer family=%s type=%s", family.id, lead_type)
                return {
                    "success": True,
                    "action": "skipped",
                    "familyId": str(family.id),
                    "message": "Family already has an active enrollment",
                }
        else:
            family = await self.families.create(
                session,
                display_name=format_family_name(payload.name, email),
                primary_email=email,
                primary_contact_name=payload.name,
                status=FamilyStatus.LEAD.value,
                notes=f"Lead source: {lead_type}{_source_suffix(payload.source_url)}",
            )
            family_action = "created"
            logger.info("lead_family_created family=%s", family.id)

        fields: Dict[str, Any] = {
            "email": email,
            "name": payload.name,
            "lead_type": lead_type,
            "status": LeadStatus.NEW.value,
            "source_url": payload.source_url,
            "family_id": family.id,
        }
        if isinstance(payload, WaitlistLead):
            fields.update(
                num_children=payload.num_children,
                children_ages=payload.children_ages,
                preferred_days=payload.preferred_days,
                preferred_time=payload.preferred_time,
                service_interest=payload.service_interest,
                notes=payload.notes,
            )

        lead = await self.leads.create(session, **fields)
        await session.commit()

        logger.info("lead_created lead=%s type=%s family=%s (%s)", lead.id, lead_type, family.id, family_action)
        return {
            "success": True,
            "action": "created",
            "leadId": str(lead.id),
            "leadType": lead_type,
            "familyId": str(family.id),
            "familyAction": family_action,
        }


__all__ = ["LeadIngestService"]
# Fin del archivo backend/backoffice/modules/leads/services/lead_ingest_service.py
