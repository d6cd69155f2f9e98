# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/utils/datetime_helpers.py

Utilidades para timestamps UTC consistentes entre Postgres y SQLite.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from datetime import date, datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """
    Retorna el timestamp UTC actual (timezone-aware).

    Examples:
        >>> utcnow().tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def utctoday() -> date:
    return utcnow().date()


def ensure_utc(dt: datetime) -> datetime:
    """
    Asegura que un datetime sea UTC timezone-aware.

    SQLite devuelve datetimes naive; se asumen UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    if dt.tzinfo != timezone.utc:
        return dt.astimezone(timezone.utc)
    return dt


def to_iso8601(dt: Optional[datetime]) -> Optional[str]:
    """
    Convierte datetime a ISO 8601 con 'Z'.

    Examples:
        >>> to_iso8601(datetime(2026, 10, 17, 14, 30, tzinfo=timezone.utc))
        '2026-10-17T14:30:00Z'
    """
    if dt is None:
        return None
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")


__all__ = ["utcnow", "utctoday", "ensure_utc", "to_iso8601"]
# Fin del archivo backend/backoffice/shared/utils/datetime_helpers.py
