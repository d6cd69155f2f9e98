# -*- coding: utf-8 -*-
"""
backend/backoffice/routes/__init__.py

Router maestro: health + routers de cada módulo.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from fastapi import APIRouter

from .health_routes import router as health_router
from backoffice.modules.billing.routes import router as billing_router
from backoffice.modules.leads.routes import router as leads_router
from backoffice.modules.onboarding.routes import router as onboarding_router

main_router = APIRouter()
main_router.include_router(health_router)
main_router.include_router(billing_router)
main_router.include_router(leads_router)
main_router.include_router(onboarding_router)

__all__ = ["main_router"]

# Fin del archivo backend/backoffice/routes/__init__.py
