# -*- coding: utf-8 -*-
"""
backend/backoffice/models.py

Importa todos los modelos ORM para que Base.metadata quede completo
(tests, create_all, introspección).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from backoffice.shared.database.base import Base
from backoffice.modules.crm.models import Enrollment, Family, Service, Student
from backoffice.modules.billing.models import EventOrder, Invoice, Payment, StripeWebhookEvent
from backoffice.modules.leads.models import Lead, LeadActivity
from backoffice.modules.onboarding.models import EnrollmentOnboarding

__all__ = [
    "Base",
    "Family",
    "Student",
    "Service",
    "Enrollment",
    "Invoice",
    "Payment",
    "EventOrder",
    "StripeWebhookEvent",
    "Lead",
    "LeadActivity",
    "EnrollmentOnboarding",
]

# Fin del archivo backend/backoffice/models.py
