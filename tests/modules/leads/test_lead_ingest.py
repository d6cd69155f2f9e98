# -*- coding: utf-8 -*-
"""
backend/tests/modules/leads/test_lead_ingest.py

Tests de POST /leads/ingest: alta de lead, deduplicación, clientes activos
y API key de automatización.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from http import HTTPStatus
from uuid import UUID

import pytest
from sqlalchemy import select

from backoffice.modules.crm.enums import EnrollmentStatus, FamilyStatus
from backoffice.modules.crm.models import Family
from backoffice.modules.leads.enums import LeadStatus
from backoffice.modules.leads.models import Lead, LeadActivity

AUTOMATION_KEY = "test-automation-key"


async def _all(session_factory, model):
    async with session_factory() as session:
        result = await session.execute(select(model))
        return list(result.scalars().all())


class TestIngestCreated:
    @pytest.mark.asyncio
    async def test_new_email_creates_family_and_lead(self, async_client, session_factory):
        r = await async_client.post(
            "/leads/ingest",
            json={
                "lead_type": "exit_intent",
                "email": "  Jane.Smith@Gmail.com ",
                "name": "Jane Smith",
                "source_url": "https://eaton.academy/pricing",
            },
        )

        assert r.status_code == HTTPStatus.OK
        data = r.json()
        assert data["success"] is True
        assert data["action"] == "created"
        assert data["leadType"] == "exit_intent"
        assert data["familyAction"] == "created"

        (family,) = await _all(session_factory, Family)
        assert str(family.id) == data["familyId"]
        assert family.display_name == "Smith, Jane"
        assert family.status == FamilyStatus.LEAD.value
        assert family.primary_email == "jane.smith@gmail.com"

        (lead,) = await _all(session_factory, Lead)
        assert lead.id == UUID(data["leadId"])
        assert lead.email == "jane.smith@gmail.com"
        assert lead.status == LeadStatus.NEW.value
        assert lead.family_id == family.id

    @pytest.mark.asyncio
    async def test_waitlist_fields_are_stored(self, async_client, session_factory):
        r = await async_client.post(
            "/leads/ingest",
            json={
                "lead_type": "waitlist",
                "email": "parent@gmail.com",
                "name": "Ana Ruiz",
                "num_children": 2,
                "children_ages": "6, 9",
                "preferred_days": "Mon, Wed",
                "preferred_time": "after school",
                "service_interest": "math",
            },
        )

        assert r.json()["action"] == "created"
        (lead,) = await _all(session_factory, Lead)
        assert lead.num_children == 2
        assert lead.children_ages == "6, 9"
        assert lead.service_interest == "math"

    @pytest.mark.asyncio
    async def test_existing_family_without_enrollment_is_reused(
        self, async_client, make_family, session_factory
    ):
        family = await make_family(email="returning@gmail.com", status=FamilyStatus.CHURNED.value)

        r = await async_client.post(
            "/leads/ingest",
            json={"lead_type": "waitlist", "email": "Returning@gmail.com"},
        )

        data = r.json()
        assert data["action"] == "created"
        assert data["familyAction"] == "existing"
        assert data["familyId"] == str(family.id)
        assert len(await _all(session_factory, Family)) == 1


class TestIngestDeduplication:
    @pytest.mark.asyncio
    async def test_repeat_submission_returns_existing_lead(self, async_client, session_factory):
        payload = {"lead_type": "exit_intent", "email": "dup@gmail.com", "name": "Dup Parent"}
        first = await async_client.post("/leads/ingest", json=payload)
        second = await async_client.post(
            "/leads/ingest", json={**payload, "source_url": "https://eaton.academy/"}
        )

        assert second.status_code == HTTPStatus.OK
        data = second.json()
        assert data["action"] == "exists"
        assert data["leadId"] == first.json()["leadId"]
        assert data["familyId"] == first.json()["familyId"]
        assert len(await _all(session_factory, Lead)) == 1

        (activity,) = await _all(session_factory, LeadActivity)
        assert "Repeat exit_intent form submission" in activity.notes
        assert "https://eaton.academy/" in activity.notes

    @pytest.mark.asyncio
    async def test_different_lead_type_creates_new_lead(self, async_client, session_factory):
        await async_client.post("/leads/ingest", json={"lead_type": "exit_intent", "email": "two@gmail.com"})
        r = await async_client.post("/leads/ingest", json={"lead_type": "waitlist", "email": "two@gmail.com"})

        assert r.json()["action"] == "created"
        assert r.json()["familyAction"] == "existing"
        assert len(await _all(session_factory, Lead)) == 2
        assert len(await _all(session_factory, Family)) == 1

    @pytest.mark.asyncio
    async def test_active_customer_is_skipped(self, async_client, make_family, make_enrollment, session_factory):
        family = await make_family(email="customer@gmail.com")
        await make_enrollment(family, "Leo Smith", status=EnrollmentStatus.TRIAL.value)

        r = await async_client.post(
            "/leads/ingest",
            json={"lead_type": "exit_intent", "email": "customer@gmail.com"},
        )

        data = r.json()
        assert data["action"] == "skipped"
        assert data["familyId"] == str(family.id)
        assert await _all(session_factory, Lead) == []


class TestIngestValidation:
    @pytest.mark.asyncio
    async def test_missing_email_is_bad_request(self, async_client):
        r = await async_client.post("/leads/ingest", json={"lead_type": "exit_intent"})
        assert r.status_code == HTTPStatus.BAD_REQUEST
        assert r.json()["success"] is False

    @pytest.mark.asyncio
    async def test_invalid_email_is_bad_request(self, async_client):
        r = await async_client.post("/leads/ingest", json={"lead_type": "waitlist", "email": "not-an-email"})
        assert r.status_code == HTTPStatus.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_unknown_lead_type_is_bad_request(self, async_client):
        r = await async_client.post("/leads/ingest", json={"lead_type": "newsletter", "email": "a@gmail.com"})
        assert r.status_code == HTTPStatus.BAD_REQUEST


class TestAutomationApiKey:
    @pytest.mark.asyncio
    async def test_missing_key_is_unauthorized(self, async_client, use_settings):
        use_settings(automation_api_key=AUTOMATION_KEY)
        r = await async_client.post("/leads/ingest", json={"lead_type": "exit_intent", "email": "a@gmail.com"})
        assert r.status_code == HTTPStatus.UNAUTHORIZED
        assert r.json() == {"success": False, "error": "Unauthorized"}

    @pytest.mark.asyncio
    async def test_wrong_key_is_unauthorized(self, async_client, use_settings):
        use_settings(automation_api_key=AUTOMATION_KEY)
        r = await async_client.post(
            "/leads/ingest",
            json={"lead_type": "exit_intent", "email": "a@gmail.com"},
            headers={"x-api-key": "wrong"},
        )
        assert r.status_code == HTTPStatus.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_valid_key_is_accepted(self, async_client, use_settings):
        use_settings(automation_api_key=AUTOMATION_KEY)
        r = await async_client.post(
            "/leads/ingest",
            json={"lead_type": "exit_intent", "email": "a@gmail.com"},
            headers={"x-api-key": AUTOMATION_KEY},
        )
        assert r.status_code == HTTPStatus.OK
        assert r.json()["action"] == "created"

# Fin del archivo backend/tests/modules/leads/test_lead_ingest.py
