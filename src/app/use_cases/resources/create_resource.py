"""CreateResource Use Case

Inserts a new row for a plain CRUD resource, assigning its business
identifier.
"""

import logging
from typing import Any, Dict
from libs.result import Result, Return
from src.app.errors import error_code, transaction_failed
from src.app.query.resource import ResourceConfig
from src.app.repositories.resource_repository import ResourceRepository
from src.app.services.identifier_generator import EntityIdentifierGenerator
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateResource:
    """
    Use Case: Create a resource row

    Flow:
    1. Generate the business identifier (PREFIX-NNN) when configured
    2. Apply the resource's prepare hook (derived columns)
    3. Insert and commit; roll back on any failure
    """

    def __init__(
        self,
        uow: UnitOfWork,
        repo: ResourceRepository,
        id_generator: EntityIdentifierGenerator,
    ):
        self.uow = uow
        self.repo = repo
        self.id_generator = id_generator

    async def execute(self, resource: ResourceConfig, values: Dict[str, Any]) -> Result[Any]:
        """
        Execute resource creation

        Args:
            resource: Resource configuration (must carry a model)
            values: Validated field values

        Returns:
            Result with the created entity or CREATE_<LABEL>_FAILED
        """
        try:
            data = dict(values)
            if resource.identifier_field and resource.identifier_prefix:
                data[resource.identifier_field] = await self.id_generator.next_identifier(
                    resource.table,
                    resource.identifier_prefix,
                    with_year=resource.identifier_with_year,
                )
            if resource.prepare:
                data = resource.prepare(data)

            entity = await self.repo.create(resource.model(**data))
            await self.uow.commit()

            logger.info(f"Created {resource.noun} id={entity.id}")
            return Return.ok(entity)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Create {resource.noun} error: {e}")
            return Return.err(
                transaction_failed(
                    code=f"CREATE_{error_code(resource.label, 'FAILED')}",
                    message=f"Failed to create {resource.noun}",
                    exc=e,
                )
            )
