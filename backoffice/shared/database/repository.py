# -*- coding: utf-8 -*-
"""
backend/backoffice/shared/database/repository.py

Repositorio base para operaciones async con SQLAlchemy.

Autor: Eaton Academic
Fecha: 2026-10-17
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # modelo ORM


class BaseRepository(Generic[T]):
    """Repositorio asincrónico base para CRUD común."""

    def __init__(self, model: Type[T]):
        self.model = model

    async def get(self, session: AsyncSession, obj_id: Any) -> Optional[T]:
        return await session.get(self.model, obj_id)

    async def get_for_update(self, session: AsyncSession, obj_id: Any) -> Optional[T]:
        # SELECT ... FOR UPDATE en Postgres; SQLite lo ignora
        return await session.get(self.model, obj_id, with_for_update=True, populate_existing=True)

    async def create(self, session: AsyncSession, **kwargs) -> T:
        obj = self.model(**kwargs)
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> None:
        await session.delete(obj)
        await session.flush()

# Fin del archivo backend/backoffice/shared/database/repository.py
