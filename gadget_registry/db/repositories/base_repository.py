"""
Base repository - generic keyed-map interface (SOLID: Interface Segregation, Dependency Inversion).
Challenge: Consistent data access, testability, query shape in one place.
"""

from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gadget_registry.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository over a table keyed by a string id."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: str, *, refresh: bool = False) -> ModelType | None:
        """Fetch single entity by primary key. refresh=True bypasses the identity map."""
        stmt = select(self.model).where(self.model.id == id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self) -> list[ModelType]:
        """Every row in key order (stable for a given table state)."""
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete_by_id(self, id: str) -> ModelType | None:
        """Remove the row in one statement and return it as deleted. None when nothing matched."""
        result = await self.session.execute(
            delete(self.model)
            .where(self.model.id == id)
            .returning(self.model)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        return result.scalar_one_or_none()
