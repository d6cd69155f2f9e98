# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/routes/__init__.py
"""

from .lead_routes import router

__all__ = ["router"]
