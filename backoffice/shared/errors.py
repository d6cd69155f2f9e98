# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/errors.py

Excepciones de dominio del backoffice.

Cada excepción lleva su status_code HTTP; main.py las traduce a
{"success": false, "error": "<mensaje>"} con un único exception handler.

Autor: Eaton Academic
Fecha: 2026-10-17
"""


class BackofficeError(Exception):
    """Base de todos los errores esperados del backoffice."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(BackofficeError):
    """Campo requerido ausente o con formato inválido."""
    status_code = 400


class AuthError(BackofficeError):
    """API key ausente o inválida."""
    status_code = 401


class InvalidSignature(AuthError):
    """Firma de webhook ausente o inválida."""
    status_code = 400


class NotFound(BackofficeError):
    """Registro referenciado inexistente."""
    status_code = 404


class InvoiceNotFound(NotFound):
    """Se lanza cuando el invoice_id del evento no existe."""
    def __init__(self, invoice_id):
        self.invoice_id = invoice_id
        super().__init__(f"Invoice not found: {invoice_id}")


class ConflictError(BackofficeError):
    """Otro request está procesando el mismo recurso."""
    status_code = 409


class UpstreamError(BackofficeError):
    """Fallo de la base de datos o de un servicio externo (n8n)."""
    status_code = 500


class ConfigError(BackofficeError):
    """Falta configuración obligatoria; se detecta en tiempo de request."""
    status_code = 500


__all__ = [
    "BackofficeError",
    "ValidationError",
    "AuthError",
    "InvalidSignature",
    "NotFound",
    "InvoiceNotFound",
    "ConflictError",
    "UpstreamError",
    "ConfigError",
]

# Fin del archivo backend/backoffice/shared/errors.py
