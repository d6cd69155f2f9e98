# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/reconciliation/lead_migration.py

Migración de familias legacy con status 'lead' a la tabla leads.

Por familia:
- sin email               -> skipped
- email ya presente en leads -> skipped, y se borra la familia duplicada
- resto                   -> se crea un lead 'waitlist' y se borra la familia

Cada familia corre en su propio SAVEPOINT: un fallo se registra, se cuenta
como failed y el lote sigue. No es idempotente: correrlo dos veces no
duplica leads, pero las familias borradas no vuelven.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.modules.crm.enums import FamilyStatus
from backoffice.modules.crm.models import Family
from backoffice.modules.crm.repositories import FamilyRepository
from backoffice.modules.leads.enums import LeadStatus, LeadType
from backoffice.modules.leads.repositories import LeadRepository

logger = logging.getLogger(__name__)


@dataclass
class MigrationSummary:
    migrated: int = 0
    skipped: int = 0
    failed: int = 0
    log: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.migrated + self.skipped + self.failed


class LeadFamilyMigrator:
    def __init__(
        self,
        families: Optional[FamilyRepository] = None,
        leads: Optional[LeadRepository] = None,
        dry_run: bool = False,
    ) -> None:
        self.families = families or FamilyRepository()
        self.leads = leads or LeadRepository()
        self.dry_run = dry_run

    async def run(self, session: AsyncSession) -> MigrationSummary:
        summary = MigrationSummary()
        lead_families = await self.families.list_by_status(session, FamilyStatus.LEAD.value)
        logger.info("lead_migration_start families=%s dry_run=%s", len(lead_families), self.dry_run)

        for family in lead_families:
            label = family.display_name
            family_id = family.id
            try:
                async with session.begin_nested():
                    outcome = await self._migrate_one(session, family)
            except SQLAlchemyError as e:
                summary.failed += 1
                summary.log.append(f"FAIL: {label} - {e}")
                logger.error("lead_migration_failed family=%s error=%s", family_id, e)
                continue

            if outcome == "migrated":
                summary.migrated += 1
                summary.log.append(f"OK: {label} -> leads table")
            else:
                summary.skipped += 1
                summary.log.append(f"SKIP: {label} - {outcome}")

        if self.dry_run:
            await session.rollback()
        else:
            await session.commit()

        logger.info(
            "lead_migration_done total=%s migrated=%s skipped=%s failed=%s",
            summary.total,
            summary.migrated,
            summary.skipped,
            summary.failed,
        )
        return summary

    async def _migrate_one(self, session: AsyncSession, family: Family) -> str:
        email = (family.primary_email or "").strip().lower()
        if not email:
            return "no email address"

        if await self.leads.email_exists(session, email):
            deleted = await self._delete_family(session, family)
            suffix = "duplicate family deleted" if deleted else "duplicate family NOT deleted"
            return f"already exists in leads table ({suffix})"

        await self.leads.create(
            session,
            email=email,
            name=family.primary_contact_name or family.display_name,
            phone=family.primary_phone,
            lead_type=LeadType.WAITLIST.value,
            status=LeadStatus.NEW.value,
            notes=family.notes,
            created_at=family.created_at,
        )
        # Lead creado: cuenta como migrado aunque la familia no se pueda borrar
        await self._delete_family(session, family)
        return "migrated"

    async def _delete_family(self, session: AsyncSession, family: Family) -> bool:
        family_id = family.id
        try:
            async with session.begin_nested():
                await self.families.delete(session, family)
        except SQLAlchemyError as e:
            logger.warning("lead_migration_family_not_deleted family=%s error=%s", family_id, e)
            return False
        return True


__all__ = ["LeadFamilyMigrator", "MigrationSummary"]
# Fin del archivo backend/backoffice/modules/reconciliation/lead_migration.py
