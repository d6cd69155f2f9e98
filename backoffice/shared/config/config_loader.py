# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/config/config_loader.py

Carga la configuración una sola vez por proceso y la cachea (singleton).
Los routers la reciben vía Depends(get_settings); los tests la sustituyen
con app.dependency_overrides.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from functools import lru_cache

from .settings_base import AppSettings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """
    Devuelve la configuración del proceso leída de entorno y .env.

    Returns:
        AppSettings: instancia única de configuración
    """
    return AppSettings()


__all__ = ["get_settings"]
# Fin del archivo backend/backoffice/shared/config/config_loader.py
