"""Mark a connection as verified."""

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
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifyConnectionCommand(Command):
    connection_id: Optional[UUID] = None


class VerifyConnectionValidator(Validator[VerifyConnectionCommand]):
    def rules(self, request: VerifyConnectionCommand, errors: ValidationErrors) -> None:
        errors.check(request.connection_id is not None, "Connection ID is required.")


class VerifyConnectionCommandHandler(RequestHandler[VerifyConnectionCommand, bool]):
    validator = VerifyConnectionValidator()
    operation = "verifying the connection"

    def __init__(
        self,
        connections: IConnectionRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._connections = connections
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: VerifyConnectionCommand) -> Result[bool]:
        connection = await self._connections.get_by_id(command.connection_id)  # type: ignore[arg-type]
        if connection is None:
            return Result.failure(
                f"Connection with ID '{command.connection_id}' not found.", ErrorKind.NOT_FOUND
            )
        if connection.is_verified:
            return Result.success(False)

        connection.verify()
        await self._connections.update(connection)
        await publish_events(self._event_bus, connection)
        await invalidate_read_models(self._cache)
        logger.info("Connection verified", extra={"connection_id": str(connection.id)})
        return Result.success(True)
