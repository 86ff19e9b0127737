"""Stored file endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from football_network.api.dependencies import get_dispatcher, require_access
from football_network.api.responses import to_response
from football_network.application.common.dispatcher import Dispatcher
from football_network.application.files.commands.delete_file import DeleteFileCommand
from football_network.application.files.queries.get_files import GetFilesQuery
from football_network.domain.file.enums import FileType

router = APIRouter(prefix="/api/v1/files", tags=["files"])


@router.get("", dependencies=[Depends(require_access("files", "view"))])
async def list_files(
    file_type: Optional[FileType] = None,
    club_id: Optional[UUID] = None,
    page: int = 1,
    page_size: int = 20,
    dispatcher: Dispatcher = Depends(get_dispatcher),
):
    query = GetFilesQuery(file_type=file_type, club_id=club_id, page=page, page_size=page_size)
    return to_response(await dispatcher.send(query))


@router.delete("/{file_id}", dependencies=[Depends(require_access("files", "delete"))])
async def delete_file(file_id: UUID, dispatcher: Dispatcher = Depends(get_dispatcher)):
    return to_response(await dispatcher.send(DeleteFileCommand(file_id=file_id)))
