#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
backend/scripts/migrate_lead_families.py

Migra las familias con status 'lead' a la tabla leads y borra la familia.

ADVERTENCIA: borra filas de families. Probar primero con --dry-run.

Uso:
    python scripts/migrate_lead_families.py --dry-run   # Ver resultado sin aplicar
    python scripts/migrate_lead_families.py             # Aplicar

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import argparse
import asyncio
import sys

from backoffice.shared.config import get_settings, setup_logging
from backoffice.shared.database import session_scope
from backoffice.shared.errors import ConfigError
from backoffice.modules.reconciliation.lead_migration import LeadFamilyMigrator, MigrationSummary


async def run(dry_run: bool) -> MigrationSummary:
    async with session_scope() as session:
        return await LeadFamilyMigrator(dry_run=dry_run).run(session)


def main() -> int:
    parser = argparse.ArgumentParser(description="Migrar familias 'lead' a la tabla leads")
    parser.add_argument("--dry-run", action="store_true", help="Revertir al final en lugar de confirmar")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, "plain")

    print("=" * 60)
    print("Migration: Move Lead Families to Leads Table" + (" (DRY RUN)" if args.dry_run else ""))
    print("=" * 60)

    try:
        summary = asyncio.run(run(args.dry_run))
    except ConfigError as e:
        print(f"Configuración incompleta: {e.message}", file=sys.stderr)
        return 2

    for line in summary.log:
        print(f"   {line}")

    print("\n" + "=" * 60)
    print("Migration Summary")
    print("=" * 60)
    print(f"   Migrated: {summary.migrated}")
    print(f"   Skipped:  {summary.skipped}")
    print(f"   Failed:   {summary.failed}")
    print(f"   Total:    {summary.total}")
    if args.dry_run:
        print("\n   DRY RUN: no changes were committed")
    return 1 if summary.failed else 0


if __name__ == "__main__":
    sys.exit(main())
