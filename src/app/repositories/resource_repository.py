"""Generic Resource Repository Interface

ORM persistence shared by every entity that follows the plain CRUD pattern.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

ModelT = TypeVar("ModelT")


class ResourceRepository(ABC, Generic[ModelT]):
    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """Retrieve an entity by primary key, or None"""
        pass

    @abstractmethod
    async def create(self, entity: ModelT) -> ModelT:
        """
        Persist a new entity

        Args:
            entity: Entity to insert

        Returns:
            Entity with generated ID
        """
        pass

    @abstractmethod
    async def update(self, entity: ModelT, values: Dict[str, Any]) -> ModelT:
        """
        Apply new field values to an existing entity

        Args:
            entity: Loaded entity
            values: Field -> new value

        Returns:
            Updated entity
        """
        pass

    @abstractmethod
    async def delete(self, entity: ModelT) -> None:
        pass
