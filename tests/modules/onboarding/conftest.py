# -*- coding: utf-8 -*-
"""
backend/tests/modules/onboarding/conftest.py

Fixtures de onboarding: una inscripción con familia y alumno, e items.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import timedelta

import pytest

from backoffice.shared.utils.datetime_helpers import utcnow
from backoffice.modules.onboarding.enums import OnboardingItemStatus, OnboardingItemType
from backoffice.modules.onboarding.models import EnrollmentOnboarding


@pytest.fixture
async def enrollment(make_family, make_enrollment):
    family = await make_family(
        display_name="Miranda, Victor",
        email="victor.miranda@gmail.com",
        primary_contact_name="Victor Miranda",
    )
    return await make_enrollment(family, "Miranda, Sofia Elena")


@pytest.fixture
def make_item(db_session):
    async def _make(
        enrollment,
        item_key: str,
        item_name: str | None = None,
        item_type: str = OnboardingItemType.FORM.value,
        status: str = OnboardingItemStatus.SENT.value,
        form_id: str | None = None,
        form_url: str | None = None,
        document_url: str | None = None,
        sent_to: str | None = "victor.miranda@gmail.com",
    ) -> EnrollmentOnboarding:
        item = EnrollmentOnboarding(
            enrollment_id=enrollment.id,
            item_key=item_key,
            item_name=item_name or item_key.replace("_", " ").title(),
            item_type=item_type,
            status=status,
            form_id=form_id,
            form_url=form_url,
            document_url=document_url,
            sent_to=sent_to,
            sent_at=utcnow() - timedelta(days=1) if status != OnboardingItemStatus.PENDING.value else None,
        )
        db_session.add(item)
        await db_session.commit()
        return item

    return _make

# Fin del archivo backend/tests/modules/onboarding/conftest.py
