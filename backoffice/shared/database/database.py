# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/database/database.py

SQLAlchemy async sobre Supabase Postgres (asyncpg detrás de PgBouncer).

Provee:
- get_engine(dsn) / get_sessionmaker(dsn): construidos de forma perezosa y
  cacheados por DSN, para que una configuración ausente se reporte como
  ConfigError en el request y no al importar.
- Dependencia FastAPI: get_async_session
- context manager: session_scope() para scripts
- check_database_health()

Notas:
- NullPool en Postgres; el pool lo maneja PgBouncer.
- Sin cache de prepared statements (modo transacción de PgBouncer).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, Optional
from uuid import uuid4

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from backoffice.shared.config import AppSettings, get_settings

logger = logging.getLogger(__name__)


def _prepared_statement_name_func() -> str:
    return f"__asyncpg_{uuid4().hex[:8]}__"


@lru_cache(maxsize=4)
def get_engine(dsn: str, echo: bool = False) -> AsyncEngine:
    """
    Crea (una vez por DSN) el engine async.
    """
    url = make_url(dsn)
    if url.get_backend_name() == "postgresql":
        logger.info("[DB] Conectando a %s:%s/%s (asyncpg)", url.host, url.port, url.database)
        return create_async_engine(
            dsn,
            poolclass=NullPool,
            echo=echo,
            connect_args={
                "statement_cache_size": 0,
                "prepared_statement_cache_size": 0,
                "prepared_statement_name_func": _prepared_statement_name_func,
            },
        )
    return create_async_engine(dsn, echo=echo)


@lru_cache(maxsize=4)
def get_sessionmaker(dsn: str, echo: bool = False) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=get_engine(dsn, echo),
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,
    )


def sessionmaker_for(settings: AppSettings) -> async_sessionmaker[AsyncSession]:
    """Resuelve la fábrica de sesiones para la configuración dada (ConfigError si falta la DB)."""
    return get_sessionmaker(settings.get_database_dsn(), settings.db_echo_sql)


# ── Dependencia FastAPI
async def get_async_session(
    settings: AppSettings = Depends(get_settings),
) -> AsyncGenerator[AsyncSession, None]:
    factory = sessionmaker_for(settings)
    async with factory() as session:
        try:
            yield session
        except SQLAlchemyError:
            await session.rollback()
            raise


# ── Context manager reutilizable en scripts
@asynccontextmanager
async def session_scope(settings: Optional[AppSettings] = None) -> AsyncGenerator[AsyncSession, None]:
    """
    Abre una sesión para scripts. El commit queda a cargo de quien la usa.
    """
    factory = sessionmaker_for(settings or get_settings())
    async with factory() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Health check
async def check_database_health(settings: AppSettings, timeout_s: float = 3.0) -> bool:
    """
    Verifica conectividad a la base de datos con SELECT 1.

    Returns:
        True si la conexión es exitosa, False en caso contrario (incluida
        configuración ausente).
    """
    try:
        engine = get_engine(settings.get_database_dsn(), settings.db_echo_sql)
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        logger.warning("[DB] health check falló: %s", exc)
        return False


__all__ = [
    "get_engine",
    "get_sessionmaker",
    "sessionmaker_for",
    "get_async_session",
    "session_scope",
    "check_database_health",
]
# Fin del archivo backend/backoffice/shared/database/database.py
