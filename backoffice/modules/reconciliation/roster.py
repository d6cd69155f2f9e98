# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/reconciliation/roster.py

Diff entre un roster CSV de alumnos esperados y las inscripciones vigentes.

Columnas del CSV (la primera fila es encabezado):
    [1] alumno, [2] cliente, [3] email del cliente, [6] grupo de edad

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, TextIO

from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.modules.crm.repositories import EnrollmentRepository
from .names import build_name_index, name_variants, to_display_name

STUDENT_COL = 1
CUSTOMER_COL = 2
EMAIL_COL = 3
AGE_GROUP_COL = 6


@dataclass(frozen=True)
class RosterRow:
    student_name: str
    customer_name: str = ""
    customer_email: str = ""
    age_group: str = ""

    @property
    def display_name(self) -> str:
        return to_display_name(self.student_name)


def _cell(values: Sequence[str], index: int) -> str:
    return values[index].strip() if index < len(values) else ""


def parse_roster(stream: TextIO) -> List[RosterRow]:
    """Lee el CSV; omite el encabezado y las filas sin nombre de alumno."""
    reader = csv.reader(stream)
    next(reader, None)
    rows: List[RosterRow] = []
    for values in reader:
        student = _cell(values, STUDENT_COL)
        if not student:
            continue
        rows.append(
            RosterRow(
                student_name=student,
                customer_name=_cell(values, CUSTOMER_COL),
                customer_email=_cell(values, EMAIL_COL),
                age_group=_cell(values, AGE_GROUP_COL),
            )
        )
    return rows


def find_missing(rows: Iterable[RosterRow], enrolled_names: Iterable[str]) -> List[RosterRow]:
    """Filas del roster cuyo alumno no coincide con ningún nombre inscrito."""
    index = build_name_index(enrolled_names)
    return [row for row in rows if not (name_variants(row.student_name) & index)]


async def load_enrolled_names(
    session: AsyncSession,
    service_code: Optional[str] = None,
) -> Sequence[str]:
    return await EnrollmentRepository().list_current_student_names(session, service_code)


def format_missing_report(missing: Sequence[RosterRow]) -> List[str]:
    lines = ["Students in CSV without an active/trial enrollment:", ""]
    for n, row in enumerate(missing, start=1):
        lines.append(f"{n}. {row.display_name}")
        lines.append(f"   Family: {to_display_name(row.customer_name)} ({row.customer_email})")
        lines.append(f"   Age Group: {row.age_group}")
        lines.append("")
    lines.append(f"Total missing: {len(missing)}")
    return lines


__all__ = [
    "RosterRow",
    "parse_roster",
    "find_missing",
    "load_enrolled_names",
    "format_missing_report",
]
# Fin del archivo backend/backoffice/modules/reconciliation/roster.py
