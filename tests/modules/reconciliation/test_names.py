# -*- coding: utf-8 -*-
"""
backend/tests/modules/reconciliation/test_names.py

Tests de normalización y comparación de nombres de alumnos.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import pytest

from backoffice.modules.reconciliation.names import (
    build_name_index,
    name_variants,
    names_match,
    normalize_name,
    to_display_name,
    to_last_first,
)


def test_normalize_name_drops_punctuation_and_case():
    assert normalize_name("  Victor   MIRANDA, Jr. ") == "victor miranda jr"
    assert normalize_name("O'Brien-Smith, Kate") == "obrien smith kate"
    assert normalize_name("A.J. Lee") == "aj lee"


@pytest.mark.parametrize(
    "a, b",
    [
        ("O'Brien, Liam", "Liam OBrien"),
        ("O’Brien, Liam", "liam o'brien"),
        ("Smith-Jones, Kate", "Kate Smith Jones"),
    ],
)
def test_apostrophes_and_hyphens_do_not_block_matches(a, b):
    assert names_match(a, b)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Miranda, Victor", "Victor Miranda"),
        ("Miranda, Victor Hugo", "Victor Hugo Miranda"),
        ("Miranda, Jr., Victor", "Victor Miranda Jr"),
        ("Victor Miranda", "Victor Miranda"),
        ("", ""),
    ],
)
def test_to_display_name(raw, expected):
    assert to_display_name(raw) == expected


def test_to_last_first():
    assert to_last_first("Victor Hugo Miranda") == "Miranda, Victor Hugo"
    assert to_last_first("Miranda, Victor") == "Miranda, Victor"
    assert to_last_first("Cher") == "Cher"


class TestNamesMatch:
    def test_last_first_matches_first_last(self):
        assert names_match("Miranda, Victor", "Victor Miranda")

    def test_match_ignores_case_and_spacing(self):
        assert names_match("victor  MIRANDA", "Miranda,Victor")

    def test_different_first_name_does_not_match(self):
        assert not names_match("Miranda, Victor", "Victoria Miranda")

    def test_empty_names_never_match(self):
        assert not names_match("", "")
        assert name_variants("   ") == set()


def test_build_name_index_contains_both_forms():
    index = build_name_index(["Victor Miranda", "Lee, Mary Ann"])
    assert "victor miranda" in index
    assert "miranda victor" in index
    assert "mary ann lee" in index

# Fin del archivo backend/tests/modules/reconciliation/test_names.py
