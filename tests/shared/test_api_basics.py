# -*- coding: utf-8 -*-
"""
backend/tests/shared/test_api_basics.py

Tests transversales de la app: health, CORS, 404/405 y formato de errores.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import pytest
from http import HTTPStatus
from uuid import uuid4

from sqlalchemy.exc import OperationalError, SQLAlchemyError

from backoffice.routes import health_routes
from backoffice.modules.leads.repositories import LeadRepository
from backoffice.modules.onboarding.repositories import OnboardingRepository


@pytest.mark.asyncio
async def test_health_reports_degraded_without_database(async_client, use_settings):
    use_settings(database_url=None)
    r = await async_client.get("/health")
    assert r.status_code == HTTPStatus.OK
    data = r.json()
    assert data["status"] == "degraded"
    assert data["database"]["reachable"] is False
    assert data["service"]["name"] == "eaton-backoffice"


@pytest.mark.asyncio
async def test_health_ok_when_database_reachable(async_client, monkeypatch):
    async def _healthy(settings, timeout_s=3.0):
        return True

    monkeypatch.setattr(health_routes, "check_database_health", _healthy)
    r = await async_client.get("/health")
    assert r.json()["status"] == "ok"
    assert r.json()["environment"] == "test"


@pytest.mark.asyncio
async def test_wrong_method_returns_405_error_body(async_client):
    r = await async_client.get("/webhooks/stripe")
    assert r.status_code == HTTPStatus.METHOD_NOT_ALLOWED
    assert r.json()["success"] is False


@pytest.mark.asyncio
async def test_unknown_route_returns_404_error_body(async_client):
    r = await async_client.post("/nope")
    assert r.status_code == HTTPStatus.NOT_FOUND
    assert r.json() == {"success": False, "error": "Not Found"}


class TestUnhandledErrors:
    @pytest.mark.asyncio
    async def test_database_error_on_lead_ingest_is_json_500(self, async_client, monkeypatch):
        async def _broken(self, session, email, lead_type):
            raise OperationalError("SELECT leads", {}, Exception("no such table: leads"))

        monkeypatch.setattr(LeadRepository, "find_open_lead", _broken)

        r = await async_client.post("/leads/ingest", json={"lead_type": "waitlist", "email": "ana@gmail.com"})

        assert r.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert r.headers["content-type"] == "application/json; charset=utf-8"
        assert r.json() == {"success": False, "error": "Internal server error"}
        assert r.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_database_error_on_onboarding_keeps_request_id(self, async_client, monkeypatch):
        async def _broken(self, session, enrollment_id):
            raise SQLAlchemyError("connection reset")

        monkeypatch.setattr(OnboardingRepository, "list_incomplete", _broken)

        r = await async_client.post(
            "/onboarding/pending",
            json={"enrollment_id": str(uuid4())},
            headers={"x-request-id": "req-onboarding-1"},
        )

        assert r.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert r.json()["success"] is False
        assert r.headers["x-request-id"] == "req-onboarding-1"


@pytest.mark.asyncio
async def test_cors_preflight_is_answered(async_client):
    r = await async_client.options(
        "/leads/ingest",
        headers={
            "Origin": "https://eaton.academy",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type,x-api-key",
        },
    )
    assert r.status_code == HTTPStatus.OK
    assert "access-control-allow-origin" in r.headers


@pytest.mark.asyncio
async def test_responses_declare_utf8_charset(async_client, use_settings):
    use_settings(database_url=None)
    r = await async_client.get("/health")
    assert r.headers["content-type"] == "application/json; charset=utf-8"

# Fin del archivo backend/tests/shared/test_api_basics.py
