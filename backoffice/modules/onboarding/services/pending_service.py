# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/services/pending_service.py

Items de onboarding pendientes de una inscripción, en la forma que usa el
email recordatorio de n8n.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.modules.crm.repositories import EnrollmentRepository
from backoffice.modules.onboarding.repositories import OnboardingRepository


def get_first_name(full_name: Optional[str]) -> str:
    """
    Primer nombre, aceptando "Apellido, Nombre" o "Nombre Apellido".

    Examples:
        >>> get_first_name("Miranda, Victor Hugo")
        'Victor'
        >>> get_first_name("Victor Miranda")
        'Victor'
        >>> get_first_name(None)
        ''
    """
    if not full_name or not full_name.strip():
        return ""
    trimmed = full_name.strip()
    if "," in trimmed:
        after_comma = trimmed.split(",", 1)[1].split()
        return after_comma[0] if after_comma else ""
    return trimmed.split()[0]


class PendingOnboardingService:
    def __init__(
        self,
        items: Optional[OnboardingRepository] = None,
        enrollments: Optional[EnrollmentRepository] = None,
    ) -> None:
        self.items = items or OnboardingRepository()
        self.enrollments = enrollments or EnrollmentRepository()

    async def get_pending(self, session: AsyncSession, enrollment_id: UUID) -> Dict[str, Any]:
        incomplete = await self.items.list_incomplete(session, enrollment_id)
        resolved = await self.enrollments.get_with_family_and_student(session, enrollment_id)
        _, family, student = resolved if resolved is not None else (None, None, None)

        items = [
            {"name": item.item_name, "url": item.link, "type": item.item_type}
            for item in incomplete
            if item.link
        ]

        customer_name = ""
        customer_email = ""
        if family is not None:
            customer_name = family.primary_contact_name or family.display_name or ""
            customer_email = family.primary_email or ""
        if incomplete and incomplete[0].sent_to:
            customer_email = incomplete[0].sent_to

        return {
            "success": True,
            "hasPending": bool(items),
            "pendingCount": len(items),
            "items": items,
            "customer_email": customer_email,
            "customer_name": customer_name,
            "customer_first_name": get_first_name(customer_name),
            "student_name": get_first_name(student.full_name if student is not None else None),
        }


__all__ = ["PendingOnboardingService", "get_first_name"]
# Fin del archivo backend/backoffice/modules/onboarding/services/pending_service.py
