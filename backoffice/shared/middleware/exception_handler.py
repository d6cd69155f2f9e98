# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/middleware/exception_handler.py

Middleware ASGI que convierte excepciones no manejadas en JSON.

Los errores de dominio, validación y HTTP ya tienen handler en main.py;
aquí llega lo demás (SQLAlchemyError, bugs). El cliente (Stripe, n8n, el
sitio) recibe {"success": false, "error": "Internal server error"} con
status 500 en lugar del text/plain de Starlette.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from backoffice.shared.utils.json_response import error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADERS = ["x-request-id", "x-correlation-id"]
INTERNAL_ERROR_MESSAGE = "Internal server error"


def get_request_id(request: Request) -> str:
    """Request id del header entrante o uno nuevo de 16 caracteres."""
    for header in REQUEST_ID_HEADERS:
        value = request.headers.get(header)
        if value:
            return value
    return uuid.uuid4().hex[:16]


class JSONExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = get_request_id(request)
        request.state.request_id = request_id

        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "unhandled_exception request_id=%s method=%s path=%s error=%r",
                request_id,
                request.method,
                request.url.path,
                e,
            )
            return error_response(
                INTERNAL_ERROR_MESSAGE,
                status_code=500,
                headers={"X-Request-ID": request_id},
            )


__all__ = ["JSONExceptionMiddleware", "get_request_id", "INTERNAL_ERROR_MESSAGE"]
# Fin del archivo backend/backoffice/shared/middleware/exception_handler.py
