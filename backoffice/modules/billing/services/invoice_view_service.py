# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/services/invoice_view_service.py

Registra la primera apertura de una factura pública.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.errors import ValidationError
from backoffice.shared.utils.datetime_helpers import utcnow
from backoffice.modules.billing.repositories import InvoiceRepository

logger = logging.getLogger(__name__)


class InvoiceViewService:
    def __init__(self, invoices: Optional[InvoiceRepository] = None) -> None:
        self.invoices = invoices or InvoiceRepository()

    async def mark_viewed(self, session: AsyncSession, public_id: str) -> dict[str, Any]:
        public_id = (public_id or "").strip()
        if not public_id:
            raise ValidationError("public_id is required")

        updated = await self.invoices.mark_viewed_if_unseen(session, public_id, utcnow())
        await session.commit()

        if updated:
            logger.info("invoice_viewed public_id=%s", public_id)
            message = "Invoice marked as viewed"
        else:
            message = "Invoice already viewed or not found"

        return {"success": True, "updated": bool(updated), "message": message}


__all__ = ["InvoiceViewService"]
# Fin del archivo backend/backoffice/modules/billing/services/invoice_view_service.py
