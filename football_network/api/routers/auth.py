"""Authentication endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from football_network.api.dependencies import get_dispatcher, require_user
from football_network.api.responses import envelope, to_response
from football_network.api.schemas import LoginRequest, LogoutRequest, RefreshRequest
from football_network.application.auth.commands.authenticate_user import AuthenticateUserCommand
from football_network.application.auth.commands.logout import LogoutCommand
from football_network.application.auth.commands.refresh_token import RefreshTokenCommand
from football_network.application.auth.queries.get_current_user import GetCurrentUserQuery
from football_network.application.authorization.models import AuthUser
from football_network.application.common.dispatcher import Dispatcher

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login")
async def login(body: LoginRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    result = await dispatcher.send(
        AuthenticateUserCommand(
            email=body.email, password=body.password, session_key=body.session_key
        )
    )
    return to_response(result)


@router.post("/refresh")
async def refresh(body: RefreshRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    return to_response(await dispatcher.send(RefreshTokenCommand(refresh_token=body.refresh_token)))


@router.post("/logout")
async def logout(
    body: Optional[LogoutRequest] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    refresh_token = body.refresh_token if body else None
    return to_response(await dispatcher.send(LogoutCommand(refresh_token=refresh_token)))


@router.get("/me")
async def me(
    user: AuthUser = Depends(require_user),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    return to_response(await dispatcher.send(GetCurrentUserQuery(user_id=user.user_id)))


@router.get("/validate", status_code=status.HTTP_200_OK)
async def validate(user: AuthUser = Depends(require_user)):
    """Confirm the bearer token and return the resolved principal."""
    return envelope(
        {
            "user_id": user.user_id,
            "username": user.username,
            "email": user.email,
            "roles": list(user.roles),
            "permissions": sorted(user.permissions),
        }
    )
