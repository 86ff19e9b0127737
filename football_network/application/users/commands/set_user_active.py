"""Activate or deactivate a user."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.application.users.dtos import UserDto
from football_network.application.users.hierarchy import check_hierarchy
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus
from football_network.domain.user.enums import UserRole
from football_network.domain.user.ports import IUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetUserActiveCommand(Command):
    user_id: Optional[UUID] = None
    is_active: bool = True
    acting_user_id: Optional[UUID] = None
    acting_user_role: Optional[UserRole] = None


class SetUserActiveValidator(Validator[SetUserActiveCommand]):
    def rules(self, request: SetUserActiveCommand, errors: ValidationErrors) -> None:
        errors.check(request.user_id is not None, "User ID is required.")


class SetUserActiveCommandHandler(RequestHandler[SetUserActiveCommand, UserDto]):
    validator = SetUserActiveValidator()
    operation = "changing the user status"

    def __init__(
        self,
        users: IUserRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._users = users
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: SetUserActiveCommand) -> Result[UserDto]:
        user = await self._users.get_by_id(command.user_id)  # type: ignore[arg-type]
        if user is None:
            return Result.failure(f"User with ID '{command.user_id}' not found.", ErrorKind.NOT_FOUND)

        if not command.is_active and command.acting_user_id == user.id:
            return Result.failure("You cannot deactivate your own account.", ErrorKind.BUSINESS_RULE)

        denied = check_hierarchy(command.acting_user_role, user.role)
        if denied is not None:
            return denied

        if user.is_active != command.is_active:
            if command.is_active:
                user.activate()
            else:
                user.deactivate()
            await self._users.update(user)
            await publish_events(self._event_bus, user)
            await invalidate_read_models(self._cache)
            logger.info(
                "User status changed",
                extra={"user_id": str(user.id), "is_active": user.is_active},
            )

        return Result.success(UserDto.from_domain(user))
