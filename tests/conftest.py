# -*- coding: utf-8 -*-
"""
backend/tests/conftest.py

Config global de tests del backoffice.

- SQLite (aiosqlite) en archivo por test, con el esquema completo vía
  Base.metadata.create_all
- SAVEPOINT habilitado en pysqlite (BEGIN emitido por SQLAlchemy)
- App FastAPI con overrides de get_settings y get_async_session
- Cliente httpx con ASGITransport y ciclo de vida vía asgi-lifespan
- Helper para firmar payloads como lo hace Stripe

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import hashlib
import hmac
import json
import time
from collections.abc import AsyncIterator

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from backoffice.models import Base
from backoffice.shared.config import AppSettings, get_settings
from backoffice.shared.database import get_async_session

STRIPE_WEBHOOK_SECRET = "whsec_test_backoffice"
AUTOMATION_API_KEY = "test-automation-key"


# -----------------------------------------------------------------------------
# Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'backoffice.db'}"


@pytest.fixture
async def db_engine(database_url):
    engine = create_async_engine(database_url)

    # pysqlite no emite BEGIN por sí mismo; sin esto begin_nested() no funciona
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


# -----------------------------------------------------------------------------
# Configuración
# -----------------------------------------------------------------------------
@pytest.fixture
def settings(database_url) -> AppSettings:
    return AppSettings(
        _env_file=None,
        python_env="test",
        database_url=database_url,
        stripe_secret_key="sk_test_backoffice",
        stripe_webhook_secret=STRIPE_WEBHOOK_SECRET,
        automation_api_key=None,
        n8n_check_status_webhook_url=None,
    )


# -----------------------------------------------------------------------------
# App FastAPI y cliente httpx
# -----------------------------------------------------------------------------
@pytest.fixture
def app(settings, session_factory):
    """
    App principal con la configuración y la sesión del test.
    Los tests pueden reemplazar overrides[get_settings] para variar la config.
    """
    from backoffice.main import app as fastapi_app

    async def _session_override() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_settings] = lambda: settings
    fastapi_app.dependency_overrides[get_async_session] = _session_override
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture
def use_settings(app, settings):
    """Aplica cambios sobre la config del test: use_settings(automation_api_key="k")."""

    def _apply(**changes) -> AppSettings:
        updated = AppSettings(_env_file=None, **{**settings.model_dump(), **changes})
        app.dependency_overrides[get_settings] = lambda: updated
        return updated

    return _apply


# -----------------------------------------------------------------------------
# Stripe
# -----------------------------------------------------------------------------
def _sign(payload: str, secret: str = STRIPE_WEBHOOK_SECRET, timestamp: int | None = None) -> str:
    ts = int(time.time()) if timestamp is None else timestamp
    signature = hmac.new(
        secret.encode("utf-8"),
        f"{ts}.{payload}".encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return f"t={ts},v1={signature}"


@pytest.fixture
def stripe_signer():
    """Devuelve sign(payload, secret=..., timestamp=...) -> header Stripe-Signature."""
    return _sign


@pytest.fixture
def checkout_event():
    """Construye un evento checkout.session.completed serializado."""

    def _build(
        event_id: str = "evt_test_1",
        invoice_id=None,
        amount_total: int | None = 10000,
        event_type: str = "checkout.session.completed",
        metadata: dict | None = None,
    ) -> str:
        if metadata is None:
            metadata = {"invoice_id": str(invoice_id)} if invoice_id is not None else {}
        data_object = {
            "id": f"cs_test_{event_id}",
            "object": "checkout.session",
            "amount_total": amount_total,
            "payment_intent": f"pi_{event_id}",
            "metadata": metadata,
        }
        return json.dumps(
            {
                "id": event_id,
                "object": "event",
                "type": event_type,
                "livemode": False,
                "data": {"object": data_object},
            }
        )

    return _build
