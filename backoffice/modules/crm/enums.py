# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/enums.py

Estados de familias e inscripciones.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from enum import StrEnum


class FamilyStatus(StrEnum):
    """customer_status en la base de datos."""
    LEAD = "lead"
    TRIAL = "trial"
    ACTIVE = "active"
    PAUSED = "paused"
    CHURNED = "churned"


class EnrollmentStatus(StrEnum):
    TRIAL = "trial"
    ACTIVE = "active"
    PAUSED = "paused"
    ENDED = "ended"


# Inscripciones que cuentan como cliente vigente
CURRENT_ENROLLMENT_STATUSES = (EnrollmentStatus.ACTIVE, EnrollmentStatus.TRIAL)


__all__ = ["FamilyStatus", "EnrollmentStatus", "CURRENT_ENROLLMENT_STATUSES"]
# Fin del archivo backend/backoffice/modules/crm/enums.py
