"""Connection endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from football_network.api.dependencies import get_dispatcher, require_access
from football_network.api.responses import to_response
from football_network.api.schemas import CreateConnectionRequest, UpdateConnectionRequest
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.connections.commands.create_connection import (
    CreateConnectionCommand,
)
from football_network.application.connections.commands.delete_connection import (
    DeleteConnectionCommand,
)
from football_network.application.connections.commands.update_connection import (
    UpdateConnectionCommand,
)
from football_network.application.connections.commands.verify_connection import (
    VerifyConnectionCommand,
)
from football_network.application.connections.queries.get_connections import GetConnectionsQuery
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType

router = APIRouter(prefix="/api/v1/connections", tags=["connections"])


@router.get("", dependencies=[Depends(require_access("connections", "view"))])
async def list_connections(
    page: int = 1,
    page_size: int = 20,
    type: Optional[ConnectionType] = None,
    strength: Optional[ConnectionStrength] = None,
    is_verified: Optional[bool] = None,
    club_id: Optional[UUID] = None,
    min_reliability_score: Optional[float] = None,
    sort_by: str = "created_at",
    sort_direction: str = "DESC",
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetConnectionsQuery(
        page=page,
        page_size=page_size,
        type=type,
        strength=strength,
        is_verified=is_verified,
        club_id=club_id,
        min_reliability_score=min_reliability_score,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
    return to_response(await dispatcher.send(query))


@router.post("", dependencies=[Depends(require_access("connections", "create"))])
async def create_connection(
    body: CreateConnectionRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    result = await dispatcher.send(CreateConnectionCommand(**body.model_dump()))
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.put("/{connection_id}", dependencies=[Depends(require_access("connections", "edit"))])
async def update_connection(
    connection_id: UUID,
    body: UpdateConnectionRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    command = UpdateConnectionCommand(connection_id=connection_id, **body.model_dump())
    return to_response(await dispatcher.send(command))


@router.post("/{connection_id}/verify", dependencies=[Depends(require_access("connections", "edit"))])
async def verify_connection(connection_id: UUID, dispatcher: Dispatcher = Depends(get_dispatcher)):
    return to_response(await dispatcher.send(VerifyConnectionCommand(connection_id=connection_id)))


@router.delete("/{connection_id}", dependencies=[Depends(require_access("connections", "delete"))])
async def delete_connection(connection_id: UUID, dispatcher: Dispatcher = Depends(get_dispatcher)):
    return to_response(await dispatcher.send(DeleteConnectionCommand(connection_id=connection_id)))
