# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/services/__init__.py
"""

from .name_format import NAME_SUFFIXES, format_family_name
from .lead_ingest_service import LeadIngestService

__all__ = ["NAME_SUFFIXES", "format_family_name", "LeadIngestService"]
