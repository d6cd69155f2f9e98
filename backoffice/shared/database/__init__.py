# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/database/__init__.py

Fachada de base de datos.
"""

from .base import Base, JSONType, NAMING_CONVENTION
from .database import (
    check_database_health,
    get_async_session,
    get_engine,
    get_sessionmaker,
    session_scope,
    sessionmaker_for,
)
from .repository import BaseRepository

__all__ = [
    "Base",
    "JSONType",
    "NAMING_CONVENTION",
    "BaseRepository",
    "check_database_health",
    "get_async_session",
    "get_engine",
    "get_sessionmaker",
    "session_scope",
    "sessionmaker_for",
]

# Fin del archivo backend/backoffice/shared/database/__init__.py
