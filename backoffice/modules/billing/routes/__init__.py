# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/routes/__init__.py
"""

from fastapi import APIRouter

from .webhook_routes import router as webhook_router
from .invoice_routes import router as invoice_router

router = APIRouter()
router.include_router(webhook_router)
router.include_router(invoice_router)

__all__ = ["router"]
