# -*- coding: utf-8 -*-
"""
backend/tests/modules/conftest.py

Fixtures de CRM compartidas por los módulos: familias, alumnos, servicios
e inscripciones.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import pytest

from backoffice.modules.crm.enums import EnrollmentStatus, FamilyStatus
from backoffice.modules.crm.models import Enrollment, Family, Service, Student


@pytest.fixture
def make_family(db_session):
    async def _make(
        display_name: str = "Smith, Jane",
        email: str | None = "jane.smith@gmail.com",
        status: str = FamilyStatus.ACTIVE.value,
        **extra,
    ) -> Family:
        family = Family(display_name=display_name, primary_email=email, status=status, **extra)
        db_session.add(family)
        await db_session.commit()
        return family

    return _make


@pytest.fixture
def make_service(db_session):
    async def _make(code: str = "tutoring", name: str = "Tutoring") -> Service:
        service = Service(code=code, name=name)
        db_session.add(service)
        await db_session.commit()
        return service

    return _make


@pytest.fixture
def make_enrollment(db_session):
    async def _make(
        family: Family,
        student_name: str | None = None,
        status: str = EnrollmentStatus.ACTIVE.value,
        service: Service | None = None,
    ) -> Enrollment:
        student = None
        if student_name is not None:
            student = Student(family_id=family.id, full_name=student_name)
            db_session.add(student)
            await db_session.flush()
        enrollment = Enrollment(
            family_id=family.id,
            student_id=student.id if student is not None else None,
            service_id=service.id if service is not None else None,
            status=status,
        )
        db_session.add(enrollment)
        await db_session.commit()
        return enrollment

    return _make

# Fin del archivo backend/tests/modules/conftest.py
