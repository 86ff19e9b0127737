"""User administration endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from football_network.api.dependencies import get_dispatcher, require_access
from football_network.api.responses import to_response
from football_network.api.schemas import (
    CreateUserRequest,
    SetUserActiveRequest,
    UpdateUserRoleRequest,
)
from football_network.application.authorization.models import AuthUser
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.users.commands.create_user import CreateUserCommand
from football_network.application.users.commands.set_user_active import SetUserActiveCommand
from football_network.application.users.commands.update_user_role import UpdateUserRoleCommand
from football_network.application.users.queries.get_users import GetUsersQuery
from football_network.domain.user.enums import UserRole

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", dependencies=[Depends(require_access("users", "view"))])
async def list_users(
    search_term: Optional[str] = None,
    role: Optional[UserRole] = None,
    is_active: Optional[bool] = None,
    page: int = 1,
    page_size: int = 20,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetUsersQuery(
        search_term=search_term, role=role, is_active=is_active, page=page, page_size=page_size
    )
    return to_response(await dispatcher.send(query))


@router.post("", dependencies=[Depends(require_access("users", "create"))])
async def create_user(body: CreateUserRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    result = await dispatcher.send(CreateUserCommand(**body.model_dump()))
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.put("/{user_id}/role")
async def update_role(
    user_id: UUID,
    body: UpdateUserRoleRequest,
    actor: AuthUser = Depends(require_access("users", "manage_roles")),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    command = UpdateUserRoleCommand(
        user_id=user_id,
        role=body.role,
        acting_user_id=actor.user_id,
        acting_user_role=actor.account_role,
    )
    return to_response(await dispatcher.send(command))


@router.put("/{user_id}/status")
async def set_active(
    user_id: UUID,
    body: SetUserActiveRequest,
    actor: AuthUser = Depends(require_access("users", "edit")),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    command = SetUserActiveCommand(
        user_id=user_id,
        is_active=body.is_active,
        acting_user_id=actor.user_id,
        acting_user_role=actor.account_role,
    )
    return to_response(await dispatcher.send(command))
