# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/reconciliation/names.py

Normalización de nombres para comparar el roster en CSV contra students.

Los nombres almacenados siguen "Apellido, Nombre" (a veces
"Apellido, Jr., Nombre"); el CSV mezcla ese formato con "Nombre Apellido".
La comparación prueba ambas formas sobre texto normalizado.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

import re
from typing import Iterable, Set

_SUFFIX_RE = re.compile(r"^(jr\.?|sr\.?|ii|iii|iv)$", re.IGNORECASE)
# Apóstrofos y puntos unen (O'Brien -> obrien, A.J. -> aj)
_JOINING_PUNCT_RE = re.compile(r"['’`.]")
# El resto de la puntuación separa palabras (Smith-Jones -> smith jones)
_PUNCT_RE = re.compile(r"[^\w\s]")
_SPACES_RE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """
    Minúsculas, sin puntuación, espacios colapsados.

    Apóstrofos y puntos se eliminan; guiones, comas y demás signos se
    reemplazan por un espacio. Así "O'Brien" y "OBrien" coinciden, igual
    que "Smith-Jones" y "Smith Jones".

    Examples:
        >>> normalize_name("  Victor   MIRANDA, Jr. ")
        'victor miranda jr'
        >>> normalize_name("O'Brien-Smith, Kate")
        'obrien smith kate'
    """
    cleaned = _JOINING_PUNCT_RE.sub("", (name or "").lower())
    cleaned = _PUNCT_RE.sub(" ", cleaned)
    return _SPACES_RE.sub(" ", cleaned).strip()


def to_display_name(name: str) -> str:
    """
    "Apellido, Nombre" -> "Nombre Apellido". Sin coma se devuelve igual.

    Examples:
        >>> to_display_name("Miranda, Victor")
        'Victor Miranda'
        >>> to_display_name("Miranda, Jr., Victor")
        'Victor Miranda Jr'
        >>> to_display_name("Victor Miranda")
        'Victor Miranda'
    """
    if not name:
        return ""
    if "," not in name:
        return name.strip()

    parts = [p.strip() for p in name.split(",")]
    if len(parts) >= 3 and _SUFFIX_RE.match(parts[1]):
        last, suffix = parts[0], parts[1].replace(".", "")
        first = " ".join(parts[2:])
        return f"{first} {last} {suffix}"

    last = parts[0]
    first = " ".join(parts[1:])
    return f"{first} {last}"


def to_last_first(name: str) -> str:
    """
    "Nombre Apellido" -> "Apellido, Nombre". Con coma se devuelve igual.

    Examples:
        >>> to_last_first("Victor Hugo Miranda")
        'Miranda, Victor Hugo'
    """
    stripped = (name or "").strip()
    if "," in stripped:
        return stripped
    parts = stripped.split()
    if len(parts) < 2:
        return stripped
    return f"{parts[-1]}, {' '.join(parts[:-1])}"


def name_variants(name: str) -> Set[str]:
    """Formas normalizadas bajo las que un nombre puede aparecer."""
    variants = {
        normalize_name(name),
        normalize_name(to_display_name(name)),
        normalize_name(to_last_first(name)),
    }
    variants.discard("")
    return variants


def names_match(a: str, b: str) -> bool:
    """
    Examples:
        >>> names_match("Miranda, Victor", "Victor Miranda")
        True
        >>> names_match("Miranda, Victor", "Victoria Miranda")
        False
    """
    return bool(name_variants(a) & name_variants(b))


def build_name_index(names: Iterable[str]) -> Set[str]:
    """Conjunto de todas las variantes normalizadas de una lista de nombres."""
    index: Set[str] = set()
    for name in names:
        index |= name_variants(name)
    return index


__all__ = [
    "normalize_name",
    "to_display_name",
    "to_last_first",
    "name_variants",
    "names_match",
    "build_name_index",
]
# Fin del archivo backend/backoffice/modules/reconciliation/names.py
