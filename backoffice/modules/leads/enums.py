# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/enums.py

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from enum import StrEnum


class LeadType(StrEnum):
    EXIT_INTENT = "exit_intent"
    WAITLIST = "waitlist"
    CALENDLY_CALL = "calendly_call"
    EVENT = "event"


class LeadStatus(StrEnum):
    NEW = "new"
    CONTACTED = "contacted"
    CONVERTED = "converted"
    CLOSED = "closed"


class ContactType(StrEnum):
    CALL = "call"
    EMAIL = "email"
    TEXT = "text"
    OTHER = "other"


# Leads aún dentro del pipeline (sujetos a deduplicación)
OPEN_LEAD_STATUSES = (LeadStatus.NEW, LeadStatus.CONTACTED)


__all__ = ["LeadType", "LeadStatus", "ContactType", "OPEN_LEAD_STATUSES"]
# Fin del archivo backend/backoffice/modules/leads/enums.py
