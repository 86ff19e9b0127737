"""Change the role of a user."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.application.users.dtos import UserDto
from football_network.application.users.hierarchy import check_hierarchy
from football_network.domain.shared.ports.event_bus import IEventBus
from football_network.domain.user.enums import UserRole
from football_network.domain.user.ports import IUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateUserRoleCommand(Command):
    """
    Command: Assign a new role.

    Attributes:
        acting_user_id: The administrator performing the change; users
            cannot change their own role
        acting_user_role: Role of that administrator; only strictly lower
            accounts can be changed, and never above this role
    """

    user_id: Optional[UUID] = None
    role: Optional[UserRole] = None
    acting_user_id: Optional[UUID] = None
    acting_user_role: Optional[UserRole] = None


class UpdateUserRoleValidator(Validator[UpdateUserRoleCommand]):
    def rules(self, request: UpdateUserRoleCommand, errors: ValidationErrors) -> None:
        errors.check(request.user_id is not None, "User ID is required.")
        errors.check(
            request.role is not None and request.role in {r.value for r in UserRole},
            "Role is invalid.",
        )


class UpdateUserRoleCommandHandler(RequestHandler[UpdateUserRoleCommand, UserDto]):
    validator = UpdateUserRoleValidator()
    operation = "changing the user role"

    def __init__(self, users: IUserRepository, event_bus: Optional[IEventBus] = None):
        self._users = users
        self._event_bus = event_bus

    async def _execute(self, command: UpdateUserRoleCommand) -> Result[UserDto]:
        user = await self._users.get_by_id(command.user_id)  # type: ignore[arg-type]
        if user is None:
            return Result.failure(f"User with ID '{command.user_id}' not found.", ErrorKind.NOT_FOUND)

        if command.acting_user_id is not None and command.acting_user_id == user.id:
            return Result.failure("You cannot change your own role.", ErrorKind.BUSINESS_RULE)

        denied = check_hierarchy(command.acting_user_role, user.role, UserRole(command.role))
        if denied is not None:
            logger.warning(
                "Role change denied by hierarchy",
                extra={"user_id": str(user.id), "acting_user_id": str(command.acting_user_id)},
            )
            return denied

        user.change_role(UserRole(command.role))
        await self._users.update(user)
        await publish_events(self._event_bus, user)

        logger.info(
            "User role changed",
            extra={"user_id": str(user.id), "role": user.role.name},
        )
        return Result.success(UserDto.from_domain(user))
