"""DeleteResource Use Case"""

import logging
from libs.result import Result, Return
from src.app.errors import error_code, not_found, transaction_failed
from src.app.query.resource import ResourceConfig
from src.app.repositories.resource_repository import ResourceRepository
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteResource:
    def __init__(self, uow: UnitOfWork, repo: ResourceRepository):
        self.uow = uow
        self.repo = repo

    async def execute(self, resource: ResourceConfig, entity_id: int) -> Result[None]:
        try:
            entity = await self.repo.get_by_id(entity_id)
            if entity is None:
                return Return.err(not_found(resource.label, entity_id))

            await self.repo.delete(entity)
            await self.uow.commit()

            logger.info(f"Deleted {resource.noun} id={entity_id}")
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Delete {resource.noun} error: {e}")
            return Return.err(
                transaction_failed(
                    code=f"DELETE_{error_code(resource.label, 'FAILED')}",
                    message=f"Failed to delete {resource.noun}",
                    exc=e,
                )
            )
