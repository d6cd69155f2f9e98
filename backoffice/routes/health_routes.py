# -*- coding: utf-8 -*-
"""
backend/backoffice/routes/health_routes.py

Health check del backoffice.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from backoffice import __version__
from backoffice.shared.config import AppSettings, get_settings
from backoffice.shared.database import check_database_health
from backoffice.shared.utils.datetime_helpers import to_iso8601, utcnow

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backoffice",
    description="Estado básico del servicio con verificación de conectividad a la base de datos.",
)
async def health_check(settings: Annotated[AppSettings, Depends(get_settings)]) -> dict:
    db_ok = await check_database_health(settings, timeout_s=2.0)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": to_iso8601(utcnow()),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": "eaton-backoffice",
            "version": __version__,
        },
    }

# Fin del archivo backend/backoffice/routes/health_routes.py
