# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/config/settings_base.py

Configuración (Pydantic v2) del backoffice.

- Esta clase NO instancia singletons; eso lo hace config_loader.
- Los valores obligatorios (DB, Stripe) son Optional a propósito: su ausencia
  se reporta como ConfigError (500) en el request que los necesita y nunca
  impide el arranque.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

from backoffice.shared.errors import ConfigError


EnvName = Literal["development", "test", "production"]


class AppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Eaton Backoffice", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["plain", "json"] = Field(default="plain", validation_alias="LOG_FORMAT")

    # =========================
    # Base de datos (Supabase Postgres)
    # =========================
    database_url: Optional[str] = Field(default=None, validation_alias="DATABASE_URL")
    db_password: Optional[SecretStr] = Field(default=None, validation_alias="DB_PASSWORD")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")

    # =========================
    # Stripe
    # =========================
    stripe_secret_key: Optional[SecretStr] = Field(default=None, validation_alias="STRIPE_SECRET_KEY")
    stripe_webhook_secret: Optional[SecretStr] = Field(default=None, validation_alias="STRIPE_WEBHOOK_SECRET")
    stripe_webhook_tolerance_seconds: int = Field(
        default=300, validation_alias="STRIPE_WEBHOOK_TOLERANCE_SECONDS"
    )
    webhook_processing_stale_seconds: int = Field(
        default=120,
        validation_alias="WEBHOOK_PROCESSING_STALE_SECONDS",
        description="Antigüedad a partir de la cual un registro 'processing' se considera atascado",
    )
    invoice_portal_url: str = Field(
        default="https://eaton-console.vercel.app",
        validation_alias="INVOICE_PORTAL_URL",
        description="Base de la página pública de facturas (success/cancel de Checkout)",
    )

    # =========================
    # Automatización (n8n)
    # =========================
    automation_api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("AUTOMATION_API_KEY", "LEAD_INGEST_API_KEY"),
    )
    n8n_check_status_webhook_url: Optional[str] = Field(
        default=None, validation_alias="N8N_CHECK_STATUS_WEBHOOK_URL"
    )
    n8n_send_email_webhook_url: Optional[str] = Field(
        default=None, validation_alias="N8N_SEND_EMAIL_WEBHOOK_URL"
    )
    n8n_create_document_webhook_url: Optional[str] = Field(
        default=None, validation_alias="N8N_CREATE_DOCUMENT_WEBHOOK_URL"
    )
    n8n_nudge_webhook_url: Optional[str] = Field(default=None, validation_alias="N8N_NUDGE_WEBHOOK_URL")
    n8n_timeout_seconds: float = Field(default=15.0, validation_alias="N8N_TIMEOUT_SECONDS")

    # =========================
    # CORS
    # =========================
    cors_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    @field_validator(
        "n8n_check_status_webhook_url",
        "n8n_send_email_webhook_url",
        "n8n_create_document_webhook_url",
        "n8n_nudge_webhook_url",
        "database_url",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # -------------------------
    # Helpers
    # -------------------------
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    def get_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_database_dsn(self) -> str:
        """
        Devuelve la URL async de SQLAlchemy.

        Normaliza postgres:// y postgresql:// a postgresql+asyncpg:// e inyecta
        DB_PASSWORD cuando la URL no trae contraseña.

        Raises:
            ConfigError: si falta DATABASE_URL o la credencial.
        """
        if not self.database_url:
            raise ConfigError("Database not configured")

        url = self.database_url
        if url.startswith("postgres://"):
            url = "postgresql+asyncpg://" + url[len("postgres://"):]
        elif url.startswith("postgresql://"):
            url = "postgresql+asyncpg://" + url[len("postgresql://"):]

        parsed = make_url(url)
        if parsed.get_backend_name() == "sqlite":
            return url
        if parsed.password:
            return url
        if self.db_password is None:
            raise ConfigError("Database credential not configured")
        return parsed.set(password=self.db_password.get_secret_value()).render_as_string(hide_password=False)

    def require_stripe_secret_key(self) -> str:
        """API key de Stripe para crear Checkout Sessions; ConfigError si falta."""
        if self.stripe_secret_key is None:
            raise ConfigError("Stripe not configured")
        return self.stripe_secret_key.get_secret_value()

    def require_stripe_webhook_secret(self) -> str:
        """Signing secret del webhook (whsec_...); ConfigError si falta."""
        if self.stripe_webhook_secret is None:
            raise ConfigError("Stripe not configured")
        return self.stripe_webhook_secret.get_secret_value()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


__all__ = ["AppSettings", "EnvName"]

# Fin del archivo backend/backoffice/shared/config/settings_base.py
