# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/onboarding/services/n8n_client.py

Clientes HTTP de los workflows de n8n usados en onboarding.

- N8nWebhookClient: POST JSON a un webhook; cualquier fallo -> UpstreamError
- N8nFormStatusClient: revisa respuestas de Google Forms

    Request:  POST {enrollment_id, email, items: [{id, form_id, item_key, sent_at}]}
    Response: {"completed_ids": ["<item id>", ...]}

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from backoffice.shared.errors import UpstreamError

logger = logging.getLogger(__name__)


class N8nWebhookClient:
    def __init__(
        self,
        url: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        name: str = "webhook",
    ) -> None:
        self.url = url
        self.name = name
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport

    async def post_json(self, payload: Dict[str, Any]) -> Any:
        """
        Envía payload y devuelve el JSON de la respuesta (None si viene vacía).

        Raises:
            UpstreamError: timeout, error de red, status no-2xx o respuesta no JSON.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.url, json=payload)
            except httpx.TimeoutException as e:
                logger.error("[n8n] %s timeout: %s", self.name, e)
                raise UpstreamError(f"n8n timeout: {e}") from e
            except httpx.RequestError as e:
                logger.error("[n8n] %s request error: %s", self.name, e)
                raise UpstreamError(f"n8n request error: {e}") from e

        if response.is_error:
            logger.error(
                "[n8n] %s failed: status=%d body=%s",
                self.name,
                response.status_code,
                response.text[:500],
            )
            raise UpstreamError(f"n8n error: {response.status_code}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("n8n returned a non-JSON response") from e


class N8nFormStatusClient(N8nWebhookClient):
    def __init__(
        self,
        url: str,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(url, timeout=timeout, transport=transport, name="check-status")

    async def check(self, payload: Dict[str, Any]) -> List[str]:
        """Envía los items a n8n y devuelve los ids que reporta completados."""
        data = await self.post_json(payload)
        if data is None:
            raise UpstreamError("n8n returned a non-JSON response")
        completed = data.get("completed_ids") if isinstance(data, dict) else None
        return [str(item_id) for item_id in (completed or [])]


__all__ = ["N8nWebhookClient", "N8nFormStatusClient"]
# Fin del archivo backend/backoffice/modules/onboarding/services/n8n_client.py
