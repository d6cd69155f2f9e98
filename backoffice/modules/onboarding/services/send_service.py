# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/services/send_service.py

Envío de formularios y documentos de onboarding de una inscripción.

Flujo:
1. Resuelve inscripción, familia, alumno y servicio; el servicio debe tener
   catálogo (catalog.SERVICE_ONBOARDING) y la familia un email.
2. Omite las claves ya registradas para la inscripción (nunca duplica).
3. Formularios: fila 'sent' con la URL de Google Forms.
   Documentos: n8n los genera desde la plantilla; sin URL quedan 'pending'.
4. Inserta las filas y confirma.
5. Email inicial y nudge de recordatorios vía n8n. Sus fallos no revierten
   nada: se devuelven como warnings.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import NotFound, UpstreamError, ValidationError
from backoffice.shared.utils.datetime_helpers import utcnow
from backoffice.modules.crm.repositories import EnrollmentRepository
from backoffice.modules.onboarding.catalog import (
    COMPLIANCE_FOLDER_ID,
    MERGE_FIELD_FORMATS,
    OnboardingItemSpec,
    get_service_onboarding,
)
from backoffice.modules.onboarding.enums import OnboardingItemStatus, OnboardingItemType
from backoffice.modules.onboarding.models import EnrollmentOnboarding
from backoffice.modules.onboarding.repositories import OnboardingRepository
from backoffice.modules.onboarding.schemas import SendOnboardingRequest
from .n8n_client import N8nWebhookClient
from .pending_service import get_first_name

logger = logging.getLogger(__name__)


def build_merge_data(
    client_key: str,
    student_first_name: str,
    customer_name: str,
    merge_data: Optional[Dict[str, Any]],
) -> Dict[str, str]:
    """
    Placeholders de la plantilla del documento.

    Examples:
        >>> build_merge_data("1a2b3c4d", "Sofia", "Victor Miranda", {"hourly_rate": 45})["HOURLY_RATE"]
        '$45/hr'
    """
    values = {
        "CLIENT_KEY": client_key,
        "STUDENT_NAME": student_first_name,
        "CUSTOMER_NAME": customer_name,
        "DATE_TODAY": utcnow().strftime("%m/%d/%Y"),
    }
    for field_name, value in (merge_data or {}).items():
        spec = MERGE_FIELD_FORMATS.get(field_name)
        if spec is None or value is None:
            continue
        placeholder, template = spec
        values[placeholder] = template.format(value)
    return values


def serialize_item(item: EnrollmentOnboarding) -> Dict[str, Any]:
    return {
        "id": str(item.id),
        "item_key": item.item_key,
        "item_name": item.item_name,
        "item_type": item.item_type,
        "status": item.status,
        "form_url": item.form_url,
        "document_url": item.document_url,
        "sent_to": item.sent_to,
    }


class SendOnboardingService:
    def __init__(
        self,
        email_client: Optional[N8nWebhookClient] = None,
        document_client: Optional[N8nWebhookClient] = None,
        nudge_client: Optional[N8nWebhookClient] = None,
        items: Optional[OnboardingRepository] = None,
        enrollments: Optional[EnrollmentRepository] = None,
    ) -> None:
        self.email_client = email_client
        self.document_client = document_client
        self.nudge_client = nudge_client
        self.items = items or OnboardingRepository()
        self.enrollments = enrollments or EnrollmentRepository()

    async def send(self, session: AsyncSession, request: SendOnboardingRequest) -> Dict[str, Any]:
        context = await self.enrollments.get_onboarding_context(session, request.enrollment_id)
        if context is None:
            raise NotFound("Enrollment not found")
        enrollment, family, student, service = context

        service_code = service.code if service is not None else None
        config = get_service_onboarding(service_code)
        if config is None:
            raise ValidationError(f"No onboarding configuration for service: {service_code}")

        family_email = (family.primary_email or "").strip() if family is not None else ""
        if not family_email:
            raise ValidationError("Family does not have an email address")

        customer_name = family.primary_contact_name or family.display_name or ""
        student_first_name = get_first_name(student.full_name if student is not None else None)
        client_key = str(enrollment.family_id)[:8]
        merge_values = build_merge_data(client_key, student_first_name, customer_name, request.merge_data)

        existing_keys = await self.items.list_item_keys(session, enrollment.id)
        now = utcnow()
        warnings: List[str] = []
        skipped: List[str] = []
        new_items: List[EnrollmentOnboarding] = []

        for key in dict.fromkeys(request.item_keys):
            if key in existing_keys:
                skipped.append(key)
                continue
            spec = config.find(key)
            if spec is None:
                logger.warning("onboarding_unknown_item enrollment=%s key=%s", enrollment.id, key)
                warnings.append(f"Unknown item key: {key}")
                continue

            item = EnrollmentOnboarding(
                enrollment_id=enrollment.id,
                item_type=spec.item_type.value,
                item_key=spec.key,
                item_name=spec.name,
                sent_at=now,
                sent_to=family_email,
            )
            if spec.item_type == OnboardingItemType.FORM:
                item.form_id = spec.form_id
                item.form_url = spec.form_url
                item.status = OnboardingItemStatus.SENT.value
            else:
                document_name = f"{spec.name} - {customer_name} - {student_first_name} - {client_key}"
                document = await self._create_document(spec, document_name, merge_values, warnings)
                item.document_url = document.get("document_url")
                item.document_id = document.get("document_id")
                item.merge_data = request.merge_data
                item.status = (
                    OnboardingItemStatus.SENT.value if item.document_url else OnboardingItemStatus.PENDING.value
                )
            new_items.append(item)

        if skipped:
            logger.info("onboarding_items_skipped enrollment=%s keys=%s", enrollment.id, ",".join(skipped))
            warnings.append(f"{len(skipped)} item(s) already sent and skipped")

        if not new_items:
            if skipped:
                return {
                    "success": True,
                    "items": [],
                    "message": "All requested items have already been sent",
                    "skipped": skipped,
                }
            raise ValidationError("No valid items to send")

        await self.items.add_items(session, new_items)
        await session.commit()
        logger.info("onboarding_items_created enrollment=%s count=%s", enrollment.id, len(new_items))

        forms = [item for item in new_items if item.item_type == OnboardingItemType.FORM.value]
        await self._send_email(family_email, customer_name, student_first_name, config.display_name, new_items, warnings)
        await self._start_nudge(enrollment.id, family_email, customer_name, student_first_name, forms, warnings)

        response: Dict[str, Any] = {"success": True, "items": [serialize_item(item) for item in new_items]}
        if skipped:
            response["skipped"] = skipped
        if warnings:
            response["warnings"] = warnings
        return response

    async def _create_document(
        self,
        spec: OnboardingItemSpec,
        document_name: str,
        merge_values: Dict[str, str],
        warnings: List[str],
    ) -> Dict[str, Any]:
        if self.document_client is None:
            logger.warning("onboarding_document_not_configured key=%s", spec.key)
            warnings.append("Document creation not configured - documents were not created")
            return {}

        try:
            result = await self.document_client.post_json(
                {
                    "template_id": spec.template_id,
                    "document_name": document_name,
                    "parent_folder_id": COMPLIANCE_FOLDER_ID,
                    "merge_data": merge_values,
                }
            )
        except UpstreamError as e:
            warnings.append(f"Failed to create {spec.name}: {e.message}")
            return {}

        if not isinstance(result, dict) or result.get("success") is not True or not result.get("document_url"):
            error = result.get("error") if isinstance(result, dict) else None
            logger.error("onboarding_document_failed key=%s error=%s", spec.key, error)
            warnings.append(f"Failed to create {spec.name}: {error or 'no document returned'}")
            return {}
        return result

    async def _send_email(
        self,
        to: str,
        customer_name: str,
        student_first_name: str,
        service_name: str,
        items: List[EnrollmentOnboarding],
        warnings: List[str],
    ) -> None:
        if self.email_client is None:
            logger.info("onboarding_email_not_configured to=%s", to)
            warnings.append("Email not configured - forms recorded but no emails sent")
            return

        payload = {
            "to": to,
            "email_type": "initial",
            "customer_name": customer_name,
            "student_name": student_first_name,
            "service_name": service_name,
            "items": [
                {"name": item.item_name, "url": item.link, "type": item.item_type}
                for item in items
                if item.link
            ],
        }
        try:
            await self.email_client.post_json(payload)
        except UpstreamError:
            warnings.append("Failed to send email - forms recorded but emails may not have been sent")
            return
        logger.info("onboarding_email_sent to=%s items=%s", to, len(payload["items"]))

    async def _start_nudge(
        self,
        enrollment_id,
        email: str,
        customer_name: str,
        student_first_name: str,
        forms: List[EnrollmentOnboarding],
        warnings: List[str],
    ) -> None:
        if self.nudge_client is None or not forms:
            return
        payload = {
            "enrollment_id": str(enrollment_id),
            "base": {
                "customer_email": email,
                "customer_name": customer_name,
                "student_name": student_first_name,
            },
            "formLinks": [{"name": form.item_name, "url": form.form_url} for form in forms],
        }
        try:
            await self.nudge_client.post_json(payload)
        except UpstreamError:
            warnings.append("Failed to schedule follow-up reminders")
            return
        logger.info("onboarding_nudge_started enrollment=%s forms=%s", enrollment_id, len(forms))


__all__ = ["SendOnboardingService", "build_merge_data", "serialize_item"]
# Fin del archivo backend/backoffice/modules/onboarding/services/send_service.py
