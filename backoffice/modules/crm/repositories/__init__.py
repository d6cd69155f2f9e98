# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/repositories/__init__.py
"""

from .family_repository import FamilyRepository
from .enrollment_repository import EnrollmentRepository

__all__ = ["FamilyRepository", "EnrollmentRepository"]
