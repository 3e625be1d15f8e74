"""Reporting API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.sql_executor import SqlAlchemySqlExecutor
from src.api.auth import get_current_role
from src.api.error import ClientError
from src.api.responses import success_response
from src.app.services.access_control import Role
from src.app.use_cases.reports import DashboardStats
from src.depends import get_session

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/dashboard-stats", status_code=status.HTTP_200_OK)
async def dashboard_stats(
    role: Role = Depends(get_current_role),
    session: AsyncSession = Depends(get_session),
):
    """
    Portfolio headline figures.

    Every role sees projects and tasks; further sections depend on the
    caller's role.
    """
    result = await DashboardStats(SqlAlchemySqlExecutor(session)).execute(role)
    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Dashboard statistics retrieved successfully")
