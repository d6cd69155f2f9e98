# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/repositories/__init__.py
"""

from .lead_repository import LeadRepository

__all__ = ["LeadRepository"]
