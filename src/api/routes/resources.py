"""Project Resource API Routes

CRUD, listing and statistics routes for every plain project resource. Each
router is built from the resource's ResourceConfig.
"""

from dataclasses import dataclass
from typing import Type

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.resource_repository import SqlAlchemyResourceRepository
from src.adapter.services.sql_executor import SqlAlchemySqlExecutor
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import get_current_role, require_capability
from src.api.error import ClientError
from src.api.responses import paginated_response, success_response
from src.api.schemas.resource_request import (
    ContractRequestSchema,
    InspectionRequestSchema,
    JobCostRequestSchema,
    MaterialRequestSchema,
    MilestoneRequestSchema,
    ProjectRequestSchema,
    ResourceRequestSchema,
    RfqRequestSchema,
    RiskRequestSchema,
    TaskRequestSchema,
)
from src.app.query.resource import ResourceConfig
from src.app.resources import (
    CONTRACTS,
    INSPECTIONS,
    JOB_COSTS,
    MATERIALS,
    MILESTONES,
    PROJECTS,
    RFQS,
    RISKS,
    TASKS,
    WORKFORCE,
)
from src.app.services.access_control import Action
from src.app.services.identifier_generator import EntityIdentifierGenerator
from src.app.use_cases.resources import (
    CreateResource,
    DeleteResource,
    GetResource,
    ListResources,
    ResourceStats,
    UpdateResource,
)
from src.depends import build_list_executor, get_session


@dataclass(frozen=True)
class ResourceRoute:
    resource: ResourceConfig
    path: str
    schema: Type[BaseModel]
    create_action: Action
    update_action: Action
    delete_action: Action


def build_resource_router(route: ResourceRoute) -> APIRouter:
    resource = route.resource
    schema = route.schema
    title = resource.title
    plural_title = resource.plural_label[:1].upper() + resource.plural_label[1:]

    router = APIRouter(
        prefix=route.path,
        tags=[plural_title],
        dependencies=[Depends(get_current_role)],
    )

    @router.get("", status_code=status.HTTP_200_OK)
    async def list_resources(request: Request, session: AsyncSession = Depends(get_session)):
        """
        List with pagination, filters, search and sorting.

        **Query parameters:** `page`, `limit`, `sortBy`, `sortOrder`,
        `search` and any allow-listed filter column.
        """
        list_executor = build_list_executor(session, request.app.state.config)
        result = await ListResources(list_executor).execute(resource, dict(request.query_params))
        if result.is_err():
            raise ClientError(result.error)
        return paginated_response(result.value, f"{plural_title} retrieved successfully")

    @router.get("/stats", status_code=status.HTTP_200_OK)
    async def resource_stats(session: AsyncSession = Depends(get_session)):
        result = await ResourceStats(SqlAlchemySqlExecutor(session)).execute(resource)
        if result.is_err():
            raise ClientError(result.error)
        return success_response(result.value, f"{title} statistics retrieved successfully")

    @router.get("/{entity_id}", status_code=status.HTTP_200_OK)
    async def get_resource(entity_id: int, session: AsyncSession = Depends(get_session)):
        result = await GetResource(SqlAlchemySqlExecutor(session)).execute(resource, entity_id)
        if result.is_err():
            raise ClientError(result.error)
        return success_response(result.value, f"{title} retrieved successfully")

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        dependencies=[Depends(require_capability(route.create_action))],
    )
    async def create_resource(body: schema, session: AsyncSession = Depends(get_session)):
        uow = SqlAlchemyUnitOfWork(session)
        repo = SqlAlchemyResourceRepository(session, resource.model)
        id_generator = EntityIdentifierGenerator(SqlAlchemySqlExecutor(session))

        result = await CreateResource(uow, repo, id_generator).execute(resource, body.model_dump())
        if result.is_err():
            raise ClientError(result.error)
        return success_response(result.value, f"{title} created successfully")

    @router.put(
        "/{entity_id}",
        status_code=status.HTTP_200_OK,
        dependencies=[Depends(require_capability(route.update_action))],
    )
    async def update_resource(
        entity_id: int, body: schema, session: AsyncSession = Depends(get_session)
    ):
        uow = SqlAlchemyUnitOfWork(session)
        repo = SqlAlchemyResourceRepository(session, resource.model)

        result = await UpdateResource(uow, repo).execute(resource, entity_id, body.model_dump())
        if result.is_err():
            raise ClientError(result.error)
        return success_response(result.value, f"{title} updated successfully")

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_200_OK,
        dependencies=[Depends(require_capability(route.delete_action))],
    )
    async def delete_resource(entity_id: int, session: AsyncSession = Depends(get_session)):
        uow = SqlAlchemyUnitOfWork(session)
        repo = SqlAlchemyResourceRepository(session, resource.model)

        result = await DeleteResource(uow, repo).execute(resource, entity_id)
        if result.is_err():
            raise ClientError(result.error)
        return success_response(None, f"{title} deleted successfully")

    return router


RESOURCE_ROUTES = (
    ResourceRoute(
        resource=PROJECTS,
        path="/projects",
        schema=ProjectRequestSchema,
        create_action=Action.PROJECT_CREATE,
        update_action=Action.PROJECT_UPDATE,
        delete_action=Action.PROJECT_DELETE,
    ),
    ResourceRoute(
        resource=MILESTONES,
        path="/milestones",
        schema=MilestoneRequestSchema,
        create_action=Action.MILESTONE_CREATE,
        update_action=Action.MILESTONE_UPDATE,
        delete_action=Action.MILESTONE_DELETE,
    ),
    ResourceRoute(
        resource=RISKS,
        path="/risks",
        schema=RiskRequestSchema,
        create_action=Action.RISK_CREATE,
        update_action=Action.RISK_UPDATE,
        delete_action=Action.RISK_DELETE,
    ),
    ResourceRoute(
        resource=JOB_COSTS,
        path="/job-costs",
        schema=JobCostRequestSchema,
        create_action=Action.JOB_COST_CREATE,
        update_action=Action.JOB_COST_UPDATE,
        delete_action=Action.JOB_COST_DELETE,
    ),
    ResourceRoute(
        resource=TASKS,
        path="/tasks",
        schema=TaskRequestSchema,
        create_action=Action.TASK_CREATE,
        update_action=Action.TASK_UPDATE,
        delete_action=Action.TASK_DELETE,
    ),
    ResourceRoute(
        resource=CONTRACTS,
        path="/contracts",
        schema=ContractRequestSchema,
        create_action=Action.CONTRACT_CREATE,
        update_action=Action.CONTRACT_UPDATE,
        delete_action=Action.CONTRACT_DELETE,
    ),
    ResourceRoute(
        resource=RFQS,
        path="/rfqs",
        schema=RfqRequestSchema,
        create_action=Action.RFQ_CREATE,
        update_action=Action.RFQ_UPDATE,
        delete_action=Action.RFQ_DELETE,
    ),
    ResourceRoute(
        resource=MATERIALS,
        path="/procurement/materials",
        schema=MaterialRequestSchema,
        create_action=Action.MATERIAL_CREATE,
        update_action=Action.MATERIAL_UPDATE,
        delete_action=Action.MATERIAL_DELETE,
    ),
    ResourceRoute(
        resource=INSPECTIONS,
        path="/quality/inspections",
        schema=InspectionRequestSchema,
        create_action=Action.INSPECTION_CREATE,
        update_action=Action.INSPECTION_UPDATE,
        delete_action=Action.INSPECTION_DELETE,
    ),
    ResourceRoute(
        resource=WORKFORCE,
        path="/resources",
        schema=ResourceRequestSchema,
        create_action=Action.RESOURCE_CREATE,
        update_action=Action.RESOURCE_UPDATE,
        delete_action=Action.RESOURCE_DELETE,
    ),
)

routers = [build_resource_router(route) for route in RESOURCE_ROUTES]
