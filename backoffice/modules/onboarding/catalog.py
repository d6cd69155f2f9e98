# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/catalog.py

Catálogo de formularios y documentos de onboarding por servicio.

Las claves de SERVICE_ONBOARDING coinciden con services.code. Los
formularios son Google Forms (form_id = id de edición); los documentos se
generan desde una plantilla de Google Docs vía n8n.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from backoffice.modules.onboarding.enums import OnboardingItemType

GOOGLE_FORMS_BASE_URL = "https://docs.google.com/forms/d"
COMPLIANCE_FOLDER_ID = "1Zz5Olq4sRM6QyU6xMMr3zHr8jVHh-gII"


@dataclass(frozen=True)
class OnboardingItemSpec:
    key: str
    name: str
    item_type: OnboardingItemType
    form_id: Optional[str] = None
    template_id: Optional[str] = None

    @property
    def form_url(self) -> Optional[str]:
        if not self.form_id:
            return None
        return f"{GOOGLE_FORMS_BASE_URL}/{self.form_id}/viewform"


@dataclass(frozen=True)
class ServiceOnboarding:
    display_name: str
    items: Tuple[OnboardingItemSpec, ...]
    merge_fields: Tuple[str, ...] = ()

    def find(self, key: str) -> Optional[OnboardingItemSpec]:
        return next((item for item in self.items if item.key == key), None)


def _form(key: str, name: str, form_id: str) -> OnboardingItemSpec:
    return OnboardingItemSpec(key, name, OnboardingItemType.FORM, form_id=form_id)


def _document(key: str, name: str, template_id: str) -> OnboardingItemSpec:
    return OnboardingItemSpec(key, name, OnboardingItemType.DOCUMENT, template_id=template_id)


SERVICE_ONBOARDING: Dict[str, ServiceOnboarding] = {
    "learning_pod": ServiceOnboarding(
        display_name="Eaton Academic Learning Pod",
        items=(
            _form("lp_tos", "Learning Pod Terms of Service Agreement", "1Ayv9FEbeRsTI_gsMf8UWfQz13vFP5ZdoYeKSwZ4lv48"),
            _form("lp_enrollment", "Learning Pod Enrollment Form", "1IMbBq8aCNVnm6vdgiX-BQepAJG2iR5BPjJHWbuLlU8"),
            _form("lp_allergy", "Learning Pod Allergy Notification Form", "1vbfQKgbpWLV1MgLL5myzHWM62DfkQrMJyPfq1LX3sTI"),
            _form("lp_photo", "Learning Pod Student Photo/Video Release", "1Xe-LSy_fK8NepAXFjyPT0t4yYZmSAi53KeIKFG_BfMg"),
        ),
    ),
    "consulting": ServiceOnboarding(
        display_name="Eaton Academic Homeschool Consulting",
        items=(
            _form("hc_questionnaire", "Homeschool Consulting Questionnaire", "19m98i8Ax86VwRXg3ydgqTaUe751Or69Nfrabx3fv0J0"),
            _document("hc_agreement", "Homeschool Consultation Agreement", "1rf816Hln05S55_zXonHmiMy13K_xkuJl3DUsB6ucIqI"),
        ),
        merge_fields=("annual_fee", "monthly_fee"),
    ),
    "academic_coaching": ServiceOnboarding(
        display_name="Eaton Academic Coaching",
        items=(
            _document("ac_agreement", "Academic Coach Hours Agreement", "1AAiZqXYOBcBcE7izmOdpKaBYXfO1WzgfAiio91LwgNo"),
        ),
        merge_fields=("hourly_rate", "hours_per_week"),
    ),
    "eaton_online": ServiceOnboarding(
        display_name="Eaton Online",
        items=(
            _document("eo_tos", "Eaton Online Terms of Service", "1i_izsqCuNITYF5of4kHqQmaPr7g7MNiMhdTNPc4vu3o"),
        ),
        merge_fields=("eo_program", "eo_weekly_rate"),
    ),
}

# merge_data del request -> (placeholder de la plantilla, formato)
MERGE_FIELD_FORMATS: Dict[str, Tuple[str, str]] = {
    "hourly_rate": ("HOURLY_RATE", "${}/hr"),
    "hours_per_week": ("HOURS_PER_WEEK", "{}"),
    "annual_fee": ("ANNUAL_FEE", "${}"),
    "monthly_fee": ("MONTHLY_FEE", "${}"),
    "eo_program": ("EO_PROGRAM", "{}"),
    "eo_weekly_rate": ("EO_WEEKLY_RATE", "${}/week"),
}


def get_service_onboarding(service_code: Optional[str]) -> Optional[ServiceOnboarding]:
    if not service_code:
        return None
    return SERVICE_ONBOARDING.get(service_code)


__all__ = [
    "GOOGLE_FORMS_BASE_URL",
    "COMPLIANCE_FOLDER_ID",
    "OnboardingItemSpec",
    "ServiceOnboarding",
    "SERVICE_ONBOARDING",
    "MERGE_FIELD_FORMATS",
    "get_service_onboarding",
]
# Fin del archivo backend/backoffice/modules/onboarding/catalog.py
