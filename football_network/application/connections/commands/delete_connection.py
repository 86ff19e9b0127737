"""Delete connection command and handler."""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.domain.connection.events import ConnectionRemoved
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.shared.events import DomainEvent
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteConnectionCommand(Command):
    connection_id: Optional[UUID] = None


class DeleteConnectionValidator(Validator[DeleteConnectionCommand]):
    def rules(self, request: DeleteConnectionCommand, errors: ValidationErrors) -> None:
        errors.check(request.connection_id is not None, "Connection ID is required.")


class DeleteConnectionCommandHandler(RequestHandler[DeleteConnectionCommand, bool]):
    validator = DeleteConnectionValidator()
    operation = "deleting the connection"

    def __init__(
        self,
        connections: IConnectionRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._connections = connections
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: DeleteConnectionCommand) -> Result[bool]:
        logger.info("Deleting connection", extra={"connection_id": str(command.connection_id)})

        connection = await self._connections.get_by_id(command.connection_id)  # type: ignore[arg-type]
        if connection is None:
            return Result.failure(
                f"Connection with ID '{command.connection_id}' not found.", ErrorKind.NOT_FOUND
            )

        await self._connections.delete(connection.id)
        if self._event_bus is not None:
            await self._event_bus.publish(
                ConnectionRemoved(
                    **DomainEvent.new_metadata(),
                    connection_id=connection.id,
                    source_club_id=connection.source_club_id,
                    target_club_id=connection.target_club_id,
                )
            )
        await invalidate_read_models(self._cache)

        logger.info("Connection deleted", extra={"connection_id": str(connection.id)})
        return Result.success(True)
