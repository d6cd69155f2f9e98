# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Las tablas ya existen en Supabase (creadas por migraciones SQL); los modelos
solo describen las columnas que usa el backoffice. Los estados se guardan
como texto para que el mismo mapeo funcione sobre SQLite en tests.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from sqlalchemy import JSON, MetaData
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# JSONB en Postgres, JSON genérico en otros dialectos
JSONType = JSON().with_variant(JSONB(), "postgresql")


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM del backoffice.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


__all__ = ["Base", "NAMING_CONVENTION", "JSONType"]

# Fin del archivo backend/backoffice/shared/database/base.py
