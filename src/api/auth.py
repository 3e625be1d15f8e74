"""Caller role resolution and capability checks

The role arrives in the X-User-Role header, set by the upstream auth layer.
"""

from typing import Optional

from fastapi import Depends, Header, Request, status

from src.api.error import ClientError
from src.app.errors import AppError, ErrorKind
from src.app.services.access_control import Action, Role, can_perform, parse_role

ROLE_HEADER = "X-User-Role"


async def get_current_role(
    request: Request,
    x_user_role: Optional[str] = Header(default=None, alias=ROLE_HEADER),
) -> Role:
    config = request.app.state.config
    if getattr(config, "AUTH_DISABLED", False):
        return Role.ADMIN

    role = parse_role(x_user_role)
    if role is None:
        raise ClientError(
            AppError(
                code="UNAUTHORIZED",
                message="Access denied. No valid role provided.",
                kind=ErrorKind.AUTHORIZATION,
            ),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return role


def require_capability(action: Action):
    """Dependency factory: 403 unless the caller's role allows `action`"""

    async def check(role: Role = Depends(get_current_role)) -> Role:
        if not can_perform(role, action):
            raise ClientError(
                AppError(
                    code="FORBIDDEN",
                    message="Access denied. Insufficient permissions.",
                    kind=ErrorKind.AUTHORIZATION,
                    reason=f"{role.value} may not {action.value}",
                ),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return role

    return check
