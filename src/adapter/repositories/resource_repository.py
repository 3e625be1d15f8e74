"""SQLAlchemy Resource Repository Implementation

Generic ORM persistence for plain CRUD entities.
"""

from typing import Any, Dict, Generic, Optional, Type, TypeVar
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.resource_repository import ResourceRepository

ModelT = TypeVar("ModelT")


class SqlAlchemyResourceRepository(ResourceRepository[ModelT], Generic[ModelT]):
    """
    SQLAlchemy implementation of ResourceRepository

    One instance per (session, model) pair.
    """

    def __init__(self, session: AsyncSession, model: Type[ModelT]):
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return await self.session.get(self.model, entity_id)

    async def create(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: ModelT, values: Dict[str, Any]) -> ModelT:
        for field, value in values.items():
            setattr(entity, field, value)
        entity.touch()
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.session.delete(entity)
        await self.session.flush()
