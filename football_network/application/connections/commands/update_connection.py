"""Update connection command and handler."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID

from football_network.application.common.events import publish_events
from football_network.application.common.handler import RequestHandler
from football_network.application.common.read_models import invalidate_read_models
from football_network.application.common.requests import Command
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import ValidationErrors, Validator
from football_network.application.connections.dtos import ConnectionDetailDto
from football_network.application.connections.validators import (
    check_connection_fields,
    to_date_range,
)
from football_network.domain.club.ports import IClubRepository
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateConnectionCommand(Command):
    """Command: Replace type, strength, period and texts of a connection."""

    connection_id: Optional[UUID] = None
    type: Optional[ConnectionType] = None
    strength: Optional[ConnectionStrength] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    reliability_score: Optional[float] = None


class UpdateConnectionValidator(Validator[UpdateConnectionCommand]):
    def rules(self, request: UpdateConnectionCommand, errors: ValidationErrors) -> None:
        errors.check(request.connection_id is not None, "Connection ID is required.")
        check_connection_fields(
            errors,
            request.type,
            request.strength,
            request.description,
            request.start_date,
            request.end_date,
        )
        if request.reliability_score is not None:
            errors.check(
                0.0 <= request.reliability_score <= 1.0,
                "Reliability score must be between 0 and 1.",
            )


class UpdateConnectionCommandHandler(RequestHandler[UpdateConnectionCommand, ConnectionDetailDto]):
    validator = UpdateConnectionValidator()
    operation = "updating the connection"

    def __init__(
        self,
        clubs: IClubRepository,
        connections: IConnectionRepository,
        event_bus: Optional[IEventBus] = None,
        cache: Optional[ICacheService] = None,
    ):
        self._clubs = clubs
        self._connections = connections
        self._event_bus = event_bus
        self._cache = cache

    async def _execute(self, command: UpdateConnectionCommand) -> Result[ConnectionDetailDto]:
        logger.info("Updating connection", extra={"connection_id": str(command.connection_id)})

        connection = await self._connections.get_by_id(command.connection_id)  # type: ignore[arg-type]
        if connection is None:
            return Result.failure(
                f"Connection with ID '{command.connection_id}' not found.", ErrorKind.NOT_FOUND
            )

        source = await self._clubs.get_by_id(connection.source_club_id)
        target = await self._clubs.get_by_id(connection.target_club_id)
        if source is None or target is None:
            return Result.failure(
                "Source or target club not found for this connection.", ErrorKind.NOT_FOUND
            )

        changes = {
            "type": ConnectionType(command.type),
            "strength": ConnectionStrength(command.strength),
            "active_period": to_date_range(command.start_date, command.end_date),
            "description": command.description,
            "notes": command.notes,
        }
        if command.reliability_score is not None:
            changes["reliability_score"] = command.reliability_score

        changed = connection.update(**changes)
        if changed:
            await self._connections.update(connection)
            await publish_events(self._event_bus, connection)
            await invalidate_read_models(self._cache)

        logger.info(
            "Connection updated",
            extra={"connection_id": str(connection.id), "changed_fields": changed},
        )
        return Result.success(ConnectionDetailDto.from_domain(connection, source, target))
