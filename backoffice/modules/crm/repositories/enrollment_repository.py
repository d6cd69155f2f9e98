# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/crm/repositories/enrollment_repository.py

Repositorio para la tabla enrollments.

Responsabilidades:
- Saber si una familia ya es cliente (inscripción active/trial)
- Resolver la inscripción con su familia y alumno (onboarding)
- Resolver además el servicio para el envío de onboarding
- Listar nombres de alumnos inscritos (conciliación de roster)

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.crm.enums import CURRENT_ENROLLMENT_STATUSES
from backoffice.modules.crm.models import Enrollment, Family, Service, Student


class EnrollmentRepository(BaseRepository[Enrollment]):
    def __init__(self) -> None:
        super().__init__(Enrollment)

    async def has_current_enrollment(
        self,
        session: AsyncSession,
        family_id: UUID,
    ) -> bool:
        stmt = (
            select(Enrollment.id)
            .where(
                Enrollment.family_id == family_id,
                Enrollment.status.in_([s.value for s in CURRENT_ENROLLMENT_STATUSES]),
            )
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_with_family_and_student(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
    ) -> Optional[Tuple[Enrollment, Optional[Family], Optional[Student]]]:
        stmt = (
            select(Enrollment, Family, Student)
            .outerjoin(Family, Family.id == Enrollment.family_id)
            .outerjoin(Student, Student.id == Enrollment.student_id)
            .where(Enrollment.id == enrollment_id)
        )
        result = await session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1], row[2]

    async def get_onboarding_context(
        self,
        session: AsyncSession,
        enrollment_id: UUID,
    ) -> Optional[Tuple[Enrollment, Optional[Family], Optional[Student], Optional[Service]]]:
        """Inscripción con familia, alumno y servicio (envío de onboarding)."""
        stmt = (
            select(Enrollment, Family, Student, Service)
            .outerjoin(Family, Family.id == Enrollment.family_id)
            .outerjoin(Student, Student.id == Enrollment.student_id)
            .outerjoin(Service, Service.id == Enrollment.service_id)
            .where(Enrollment.id == enrollment_id)
        )
        result = await session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1], row[2], row[3]

    async def list_current_student_names(
        self,
        session: AsyncSession,
        service_code: Optional[str] = None,
    ) -> Sequence[str]:
        """
        Nombres de alumnos con inscripción active/trial, opcionalmente
        filtrados por código de servicio.
        """
        stmt = (
            select(Student.full_name)
            .join(Enrollment, Enrollment.student_id == Student.id)
            .where(Enrollment.status.in_([s.value for s in CURRENT_ENROLLMENT_STATUSES]))
        )
        if service_code:
            stmt = stmt.join(Service, Service.id == Enrollment.service_id).where(
                Service.code == service_code
            )
        result = await session.execute(stmt)
        return result.scalars().all()

# Fin del archivo backend/backoffice/modules/crm/repositories/enrollment_repository.py
