# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/config/logging_config.py

Configuración centralizada de logging.
Soporta formato plain (desarrollo/scripts) y json (producción).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import logging.config
from typing import Literal


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "json"] = "plain",
) -> None:
    """
    Configura el logger raíz.

    Args:
        level: Nivel de logging
        fmt: Formato de salida (plain, json)

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    use_json = fmt == "json"

    formatters = {
        "default": {
            "format": "%(asctime)s %(levelname)s [%(name)s]: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if use_json else "default",
            "stream": "ext://sys.stdout",
        }
    }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": handlers,
            "loggers": {
                # El SQL lo controla DB_ECHO_SQL, no el nivel global
                "sqlalchemy.engine": {"level": "WARNING"},
                "httpx": {"level": "WARNING"},
            },
            "root": {
                "handlers": ["console"],
                "level": level.upper(),
            },
        }
    )


__all__ = ["setup_logging"]
# Fin del archivo backend/backoffice/shared/config/logging_config.py
