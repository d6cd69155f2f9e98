# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/models/__init__.py
"""

from .family import Family
from .student import Student
from .service import Service
from .enrollment import Enrollment

__all__ = ["Family", "Student", "Service", "Enrollment"]
