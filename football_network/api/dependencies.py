"""FastAPI dependencies: container access and endpoint authorization."""

import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status

from football_network.application.authorization.models import AuthUser
from football_network.application.common.dispatcher import Dispatcher
from football_network.infrastructure.container import Container

logger = logging.getLogger(__name__)


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_dispatcher(container: Container = Depends(get_container)) -> Dispatcher:
    return container.dispatcher


def get_current_user(request: Request) -> Optional[AuthUser]:
    """Principal set by AuthMiddleware, None when anonymous."""
    return getattr(request.state, "auth_user", None)


def require_user(user: Optional[AuthUser] = Depends(get_current_user)) -> AuthUser:
    if user is None or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required.")
    return user


def require_access(resource: str, action: str) -> Callable[..., AuthUser]:
    """Dependency enforcing the access policy for resource/action.

    The same policies drive the frontend route guards.

    Example:
        @router.post("", dependencies=[Depends(require_access("clubs", "create"))])
    """

    def dependency(
        user: AuthUser = Depends(require_user),
        container: Container = Depends(get_container),
    ) -> AuthUser:
        if not container.authorization.can_access(user, resource, action):
            logger.warning(
                "Access denied",
                extra={"user_id": str(user.user_id), "resource": resource, "action": action},
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"You do not have permission to {action} {resource}.",
            )
        return user

    return dependency
