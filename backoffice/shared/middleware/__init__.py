# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/middleware/__init__.py

Middlewares compartidos.
"""

from .exception_handler import JSONExceptionMiddleware, get_request_id

__all__ = ["JSONExceptionMiddleware", "get_request_id"]
