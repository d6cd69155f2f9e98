#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
backend/scripts/find_missing_enrollments.py

Lista los alumnos del roster CSV que no tienen una inscripción active/trial.

Los nombres se comparan normalizados y en ambas formas
("Nombre Apellido" / "Apellido, Nombre").

Uso:
    python scripts/find_missing_enrollments.py "Learning Pod Clients (Current).csv"
    python scripts/find_missing_enrollments.py roster.csv --service-code learning_pod

Requiere DATABASE_URL (y DB_PASSWORD si la URL no la incluye) en el entorno o .env.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import argparse
import asyncio
import sys
from pathlib import Path

from backoffice.shared.config import get_settings, setup_logging
from backoffice.shared.database import session_scope
from backoffice.shared.errors import ConfigError
from backoffice.modules.reconciliation.roster import (
    find_missing,
    format_missing_report,
    load_enrolled_names,
    parse_roster,
)


async def run(csv_path: Path, service_code: str) -> int:
    with csv_path.open(encoding="utf-8-sig", newline="") as fh:
        rows = parse_roster(fh)

    async with session_scope() as session:
        enrolled = await load_enrolled_names(session, service_code or None)

    missing = find_missing(rows, enrolled)
    for line in format_missing_report(missing):
        print(line)
    return len(missing)


def main() -> int:
    parser = argparse.ArgumentParser(description="Alumnos del roster CSV sin inscripción vigente")
    parser.add_argument("csv_path", type=Path, help="Roster exportado (CSV)")
    parser.add_argument(
        "--service-code",
        default="learning_pod",
        help="Código de servicio a considerar ('' = todos). Default: learning_pod",
    )
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, "plain")

    if not args.csv_path.exists():
        print(f"CSV no encontrado: {args.csv_path}", file=sys.stderr)
        return 2

    try:
        asyncio.run(run(args.csv_path, args.service_code))
    except ConfigError as e:
        print(f"Configuración incompleta: {e.message}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
