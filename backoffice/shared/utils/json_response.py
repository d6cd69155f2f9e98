# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

Uso:
    app = FastAPI(default_response_class=UTF8JSONResponse)
    return error_response("Invoice not found", status_code=404)

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """
    JSONResponse con Content-Type: application/json; charset=utf-8.

    Los nombres de familias y alumnos llegan con acentos desde los
    formularios; el charset explícito evita mojibake en n8n.
    """
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


def error_response(
    message: str,
    status_code: int,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    """Cuerpo de error uniforme: {"success": false, "error": message}."""
    return json_response_utf8(
        {"success": False, "error": message},
        status_code=status_code,
        headers=headers,
    )


__all__ = ["UTF8JSONResponse", "json_response_utf8", "error_response"]

# Fin del archivo backend/backoffice/shared/utils/json_response.py
