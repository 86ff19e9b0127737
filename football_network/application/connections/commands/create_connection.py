"""Create connection command and handler."""

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
from football_network.domain.connection.entities import Connection
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.connection.ports import IConnectionRepository
from football_network.domain.shared.ports.cache import ICacheService
from football_network.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateConnectionCommand(Command):
    """
    Command: Connect two clubs.

    Attributes:
        source_club_id: Club the connection starts from
        target_club_id: Club the connection points to
        type: Alliance, rivalry or friendship
        strength: Weak to very strong
        start_date: Optional start of the active period
        end_date: Optional end of the active period
    """

    source_club_id: Optional[UUID] = None
    target_club_id: Optional[UUID] = None
    type: Optional[ConnectionType] = None
    strength: Optional[ConnectionStrength] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class CreateConnectionValidator(Validator[CreateConnectionCommand]):
    def rules(self, request: CreateConnectionCommand, errors: ValidationErrors) -> None:
        errors.check(request.source_club_id is not None, "Source club ID is required.")
        errors.check(request.target_club_id is not None, "Target club ID is required.")
        if request.source_club_id is not None:
            errors.check(
                request.source_club_id != request.target_club_id,
                "Source and target clubs must be different.",
            )
        check_connection_fields(
            errors,
            request.type,
            request.strength,
            request.description,
            request.start_date,
            request.end_date,
        )


class CreateConnectionCommandHandler(RequestHandler[CreateConnectionCommand, ConnectionDetailDto]):
    """Handler for CreateConnectionCommand."""

    validator = CreateConnectionValidator()
    operation = "creating the connection"

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

    async def _execute(self, command: CreateConnectionCommand) -> Result[ConnectionDetailDto]:
        logger.info(
            "Creating connection",
            extra={
                "source_club_id": str(command.source_club_id),
                "target_club_id": str(command.target_club_id),
            },
        )

        source = await self._clubs.get_by_id(command.source_club_id)  # type: ignore[arg-type]
        if source is None:
            return Result.failure(
                f"Source club with ID '{command.source_club_id}' not found.",
                ErrorKind.NOT_FOUND,
            )
        target = await self._clubs.get_by_id(command.target_club_id)  # type: ignore[arg-type]
        if target is None:
            return Result.failure(
                f"Target club with ID '{command.target_club_id}' not found.",
                ErrorKind.NOT_FOUND,
            )

        if await self._connections.get_between(source.id, target.id) is not None:
            return Result.failure(
                f"A connection already exists between '{source.name}' and '{target.name}'.",
                ErrorKind.CONFLICT,
            )

        connection = Connection.create(
            source_club_id=source.id,
            target_club_id=target.id,
            type=ConnectionType(command.type),
            strength=ConnectionStrength(command.strength),
            active_period=to_date_range(command.start_date, command.end_date),
            description=command.description,
            notes=command.notes,
        )
        await self._connections.add(connection)
        await publish_events(self._event_bus, connection)
        await invalidate_read_models(self._cache)

        logger.info(
            "Connection created",
            extra={
                "connection_id": str(connection.id),
                "source_club": source.name,
                "target_club": target.name,
            },
        )
        return Result.success(ConnectionDetailDto.from_domain(connection, source, target))
