# -*- coding: utf-8 -*-
"""
backend/tests/shared/test_logging_config.py

Tests de setup_logging (plain y JSON).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import json
import logging

import pytest

from backoffice.shared.config import setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    setup_logging("INFO", "plain")


def test_plain_format_sets_root_level():
    setup_logging("WARNING", "plain")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_json_format_emits_json_lines(capsys):
    pytest.importorskip("pythonjsonlogger")
    setup_logging("INFO", "json")
    logging.getLogger("backoffice.test").info("ledger_processed event=%s", "evt_1")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "ledger_processed event=evt_1"
    assert record["levelname"] == "INFO"
    assert record["name"] == "backoffice.test"

# Fin del archivo backend/tests/shared/test_logging_config.py
