# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/models/__init__.py
"""

from .lead import Lead
from .lead_activity import LeadActivity

__all__ = ["Lead", "LeadActivity"]
