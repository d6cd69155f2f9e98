# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/config/__init__.py

Fachada de configuración.

Uso:
    from backoffice.shared.config import AppSettings, get_settings, setup_logging
"""

from .settings_base import AppSettings
from .config_loader import get_settings
from .logging_config import setup_logging

__all__ = ["AppSettings", "get_settings", "setup_logging"]

# Fin del archivo backend/backoffice/shared/config/__init__.py
