# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/leads/services/name_format.py

Nombre de familia a partir del nombre libre de un formulario.

La convención del CRM es "Apellido, Nombre" (display_name de families).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Optional

NAME_SUFFIXES = frozenset(
    {"jr", "jr.", "sr", "sr.", "ii", "iii", "iv", "v", "esq", "esq.", "phd", "md", "dds"}
)

_FAMILY_SUFFIX = " family"


def format_family_name(name: Optional[str], email: str) -> str:
    """
    Convierte un nombre de formulario en display_name de familia.

    Examples:
        >>> format_family_name("Jane Smith", "jane@gmail.com")
        'Smith, Jane'
        >>> format_family_name("Mary Ann Lee", "m@gmail.com")
        'Lee, Mary Ann'
        >>> format_family_name("John Smith Jr.", "j@gmail.com")
        'Smith, John Jr.'
        >>> format_family_name("Smith, Jane", "jane@gmail.com")
        'Smith, Jane'
        >>> format_family_name("The Garcia Family", "g@gmail.com")
        'The Garcia'
        >>> format_family_name("Cher", "cher@gmail.com")
        'Cher'
        >>> format_family_name(None, "jane.doe@gmail.com")
        'jane.doe (Lead)'
    """
    cleaned = " ".join((name or "").split())
    if not cleaned:
        return f"{email.split('@')[0]} (Lead)"

    # Ya viene en formato "Apellido, Nombre"
    if "," in cleaned:
        return cleaned

    if cleaned.lower().endswith(_FAMILY_SUFFIX):
        return cleaned[: -len(_FAMILY_SUFFIX)].strip()

    parts = cleaned.split(" ")
    if len(parts) == 1:
        return parts[0]

    suffix = ""
    if len(parts) > 2 and parts[-1].lower() in NAME_SUFFIXES:
        suffix = parts.pop()

    last = parts[-1]
    first = " ".join(parts[:-1])
    formatted = f"{last}, {first}"
    return f"{formatted} {suffix}" if suffix else formatted


__all__ = ["format_family_name", "NAME_SUFFIXES"]
# Fin del archivo backend/backoffice/modules/leads/services/name_format.py
