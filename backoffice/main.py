# -*- coding: utf-8 -*-
"""
backend/backoffice/main.py

Punto de entrada del backoffice de Eaton Academic.

- Carga .env antes de leer configuración (override solo fuera de producción)
- Logging configurado en el lifespan según LOG_LEVEL / LOG_FORMAT
- CORS permisivo para los formularios del sitio y el preflight de navegadores
- Errores de dominio, validación y HTTP como {"success": false, "error": ...}
- Cualquier otra excepción -> 500 JSON (JSONExceptionMiddleware)

Arranque:
    uvicorn backoffice.main:app --host 0.0.0.0 --port 8000

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_override_env = os.getenv("PYTHON_ENV", "development").strip().lower() != "production"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backoffice import __version__
from backoffice.routes import main_router
from backoffice.shared.config import get_settings, setup_logging
from backoffice.shared.errors import BackofficeError
from backoffice.shared.middleware import JSONExceptionMiddleware
from backoffice.shared.utils.json_response import UTF8JSONResponse, error_response

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
    "stripe-signature",
    "x-api-key",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("🟢 Backoffice iniciado (env=%s, version=%s)", settings.python_env, __version__)
    yield
    logger.info("🔴 Backoffice apagado.")


app = FastAPI(
    title="Eaton Backoffice API",
    description="Webhooks de Stripe, endpoints para n8n y soporte de conciliación",
    version=__version__,
    lifespan=lifespan,
    default_response_class=UTF8JSONResponse,
)


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORSMiddleware. Con origins '*' no se permiten credenciales
    (combinación inválida en navegadores).
    """
    settings = get_settings()
    origins = settings.get_cors_origins() or ["*"]
    wildcard = origins == ["*"]
    if wildcard and settings.is_prod:
        logger.warning("CORS_ORIGINS=* en producción; definir los dominios del sitio")
    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not wildcard,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": CORS_ALLOW_HEADERS,
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    return cors_config


# Registrado antes que CORS: CORS queda por fuera y también decora los 500
app.add_middleware(JSONExceptionMiddleware)
_configure_cors(app)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════
@app.exception_handler(BackofficeError)
async def backoffice_error_handler(request: Request, exc: BackofficeError):
    if exc.status_code >= 500:
        logger.error("request_failed path=%s error=%s", request.url.path, exc.message)
    return error_response(exc.message, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Campos faltantes o mal formados -> 400 (no 422)."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(message, status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


app.include_router(main_router)


__all__ = ["app"]


if __name__ == "__main__":
    import uvicorn

    is_prod = get_settings().is_prod
    uvicorn.run(
        "backoffice.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=not is_prod,
        log_level="info",
    )

# Fin del archivo backend/backoffice/main.py
