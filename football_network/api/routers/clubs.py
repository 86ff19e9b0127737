"""Club endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from football_network.api.dependencies import get_dispatcher, require_access
from football_network.api.responses import to_response
from football_network.api.schemas import ClubRequest, ClubStatusRequest
from football_network.application.authorization.models import AuthUser
from football_network.application.clubs.commands.change_club_status import ChangeClubStatusCommand
from football_network.application.clubs.commands.create_club import CreateClubCommand
from football_network.application.clubs.commands.delete_club import DeleteClubCommand
from football_network.application.clubs.commands.update_club import UpdateClubCommand
from football_network.application.clubs.commands.upload_logo import UploadClubLogoCommand
from football_network.application.clubs.queries.get_club_by_id import GetClubByIdQuery
from football_network.application.clubs.queries.get_club_connections import (
    GetClubConnectionsQuery,
)
from football_network.application.clubs.queries.get_clubs import GetClubsQuery
from football_network.application.common.dispatcher import Dispatcher
from football_network.domain.club.enums import LeagueType

router = APIRouter(prefix="/api/v1/clubs", tags=["clubs"])


def _fields(body: ClubRequest) -> dict:
    fields = body.model_dump()
    fields["colors"] = tuple(fields["colors"])
    return fields


@router.get("", dependencies=[Depends(require_access("clubs", "view"))])
async def list_clubs(
    page: int = 1,
    page_size: int = 20,
    search_term: Optional[str] = None,
    league: Optional[LeagueType] = None,
    country: Optional[str] = None,
    city: Optional[str] = None,
    is_active: Optional[bool] = None,
    is_verified: Optional[bool] = None,
    is_featured: Optional[bool] = None,
    founded_from: Optional[int] = None,
    founded_to: Optional[int] = None,
    sort_by: str = "name",
    sort_direction: str = "ASC",
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetClubsQuery(
        page=page,
        page_size=page_size,
        search_term=search_term,
        league=league,
        country=country,
        city=city,
        is_active=is_active,
        is_verified=is_verified,
        is_featured=is_featured,
        founded_from=founded_from,
        founded_to=founded_to,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
    return to_response(await dispatcher.send(query))


@router.get("/{club_id}", dependencies=[Depends(require_access("clubs", "view"))])
async def get_club(club_id: UUID, dispatcher: Dispatcher = Depends(get_dispatcher)):
    return to_response(await dispatcher.send(GetClubByIdQuery(club_id=club_id)))


@router.get("/{club_id}/connections", dependencies=[Depends(require_access("connections", "view"))])
async def get_club_connections(
    club_id: UUID,
    verified_only: bool = False,
    page: int = 1,
    page_size: int = 20,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetClubConnectionsQuery(
        club_id=club_id, verified_only=verified_only, page=page, page_size=page_size
    )
    return to_response(await dispatcher.send(query))


@router.post("", dependencies=[Depends(require_access("clubs", "create"))])
async def create_club(body: ClubRequest, dispatcher: Dispatcher = Depends(get_dispatcher)):
    result = await dispatcher.send(CreateClubCommand(**_fields(body)))
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.put("/{club_id}", dependencies=[Depends(require_access("clubs", "edit"))])
async def update_club(
    club_id: UUID,
    body: ClubRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    return to_response(await dispatcher.send(UpdateClubCommand(club_id=club_id, **_fields(body))))


@router.patch("/{club_id}/status", dependencies=[Depends(require_access("clubs", "approve"))])
async def change_status(
    club_id: UUID,
    body: ClubStatusRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    command = ChangeClubStatusCommand(club_id=club_id, **body.model_dump())
    return to_response(await dispatcher.send(command))


@router.delete("/{club_id}", dependencies=[Depends(require_access("clubs", "delete"))])
async def delete_club(
    club_id: UUID,
    force_delete: bool = Query(False),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    command = DeleteClubCommand(club_id=club_id, force_delete=force_delete)
    return to_response(await dispatcher.send(command))


@router.post("/{club_id}/logo")
async def upload_logo(
    club_id: UUID,
    file: UploadFile = File(...),
    user: AuthUser = Depends(require_access("files", "upload")),
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    command = UploadClubLogoCommand(
        club_id=club_id,
        file_name=file.filename or "",
        content_type=file.content_type or "",
        content=await file.read(),
        uploaded_by=user.user_id,
    )
    return to_response(await dispatcher.send(command), success_status=status.HTTP_201_CREATED)
