"""Strawberry permission for authenticated principals."""

import logging
from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

logger = logging.getLogger(__name__)


class IsAuthenticated(BasePermission):
    """Allow the field only when AuthMiddleware resolved an active user.

    Examples:
        @strawberry.field(permission_classes=[IsAuthenticated])
        async def clubs(self, info: Info) -> ClubPage:
            ...
    """

    message = "Not authenticated"

    async def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        user = getattr(info.context, "auth_user", None)
        if user is None or not user.is_active:
            logger.warning("Permission denied: no authenticated user in context")
            return False
        return True
