# -*- coding: utf-8 -*-
"""
backend/backoffice/modules/billing/repositories/payment_repository.py

Repositorio para la tabla payments.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from backoffice.shared.database.repository import BaseRepository
from backoffice.modules.billing.models import Payment


class PaymentRepository(BaseRepository[Payment]):
    def __init__(self) -> None:
        super().__init__(Payment)

# Fin del archivo backend/backoffice/modules/billing/repositories/payment_repository.py
