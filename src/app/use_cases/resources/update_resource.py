"""UpdateResource Use Case"""

import logging
from typing import Any, Dict
from libs.result import Result, Return
from src.app.errors import error_code, not_found, transaction_failed
from src.app.query.resource import ResourceConfig
from src.app.repositories.resource_repository import ResourceRepository
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

PROTECTED_FIELDS = ("id", "created_at", "updated_at")


class UpdateResource:
    """
    Use Case: Update a resource row

    The existence check is a plain read; only then are the new values
    applied. Derived columns are recomputed from the merged values.
    """

    def __init__(self, uow: UnitOfWork, repo: ResourceRepository):
        self.uow = uow
        self.repo = repo

    def _failed(self, resource: ResourceConfig, exc: Exception):
        return transaction_failed(
            code=f"UPDATE_{error_code(resource.label, 'FAILED')}",
            message=f"Failed to update {resource.noun}",
            exc=exc,
        )

    async def execute(
        self, resource: ResourceConfig, entity_id: int, values: Dict[str, Any]
    ) -> Result[Any]:
        try:
            entity = await self.repo.get_by_id(entity_id)
        except Exception as e:
            logger.error(f"Update {resource.noun} error: {e}")
            return Return.err(self._failed(resource, e))

        if entity is None:
            return Return.err(not_found(resource.label, entity_id))

        try:
            changes = dict(values)
            if resource.prepare:
                prepared = resource.prepare({**entity.model_dump(), **changes})
                changes = {
                    field: value
                    for field, value in prepared.items()
                    if field not in PROTECTED_FIELDS and field != resource.identifier_field
                }

            updated = await self.repo.update(entity, changes)
            await self.uow.commit()
            return Return.ok(updated)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Update {resource.noun} error: {e}")
            return Return.err(self._failed(resource, e))
