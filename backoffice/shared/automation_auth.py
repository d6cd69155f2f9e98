# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/automation_auth.py

Autenticación de los endpoints que invoca n8n (leads, onboarding, invoices).

Si AUTOMATION_API_KEY (o el alias LEAD_INGEST_API_KEY) está configurada, el
request debe traer el header x-api-key con el mismo valor. Si no está
configurada, la verificación queda deshabilitada.

Uso:
    from backoffice.shared.automation_auth import AutomationAuth

    @router.post("/leads/ingest")
    async def ingest(_: AutomationAuth, ...): ...

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
import secrets
from typing import Annotated

from fastapi import Depends, Header

from backoffice.shared.config import AppSettings, get_settings
from backoffice.shared.errors import AuthError

logger = logging.getLogger(__name__)


async def require_automation_api_key(
    settings: Annotated[AppSettings, Depends(get_settings)],
    x_api_key: Annotated[str | None, Header()] = None,
) -> bool:
    """
    Valida el header x-api-key contra la clave configurada.

    Returns:
        True si la validación es exitosa o si no hay clave configurada.

    Raises:
        AuthError (401): header ausente o clave distinta.
    """
    if settings.automation_api_key is None:
        return True

    if not x_api_key:
        logger.warning("automation_auth_missing_header")
        raise AuthError("Unauthorized")

    expected = settings.automation_api_key.get_secret_value()
    # Comparación timing-safe
    if not secrets.compare_digest(x_api_key.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("automation_auth_invalid_key")
        raise AuthError("Unauthorized")

    return True


AutomationAuth = Annotated[bool, Depends(require_automation_api_key)]


__all__ = ["require_automation_api_key", "AutomationAuth"]

# Fin del archivo backend/backoffice/shared/automation_auth.py
