"""List stored files."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from football_network.application.common.handler import RequestHandler
from football_network.application.common.pagination import MAX_PAGE_SIZE, PagedResult
from football_network.application.common.requests import Query
from football_network.application.common.result import Result
from football_network.application.common.validation import ValidationErrors, Validator, valid_page
from football_network.application.files.dtos import StoredFileDto
from football_network.domain.file.enums import FileType
from football_network.domain.file.ports import FileSearchCriteria, IFileRepository


@dataclass(frozen=True)
class GetFilesQuery(Query):
    file_type: Optional[FileType] = None
    club_id: Optional[UUID] = None
    page: int = 1
    page_size: int = 20


class GetFilesValidator(Validator[GetFilesQuery]):
    def rules(self, request: GetFilesQuery, errors: ValidationErrors) -> None:
        valid_page(errors, request.page, request.page_size, MAX_PAGE_SIZE)


class GetFilesQueryHandler(RequestHandler[GetFilesQuery, PagedResult[StoredFileDto]]):
    validator = GetFilesValidator()
    operation = "retrieving files"

    def __init__(self, files: IFileRepository):
        self._files = files

    async def _execute(self, query: GetFilesQuery) -> Result[PagedResult[StoredFileDto]]:
        criteria = FileSearchCriteria(
            file_type=query.file_type,
            club_id=query.club_id,
            page=query.page,
            page_size=query.page_size,
        )
        files, total = await self._files.search(criteria)
        return Result.success(
            PagedResult(
                items=[StoredFileDto.from_domain(stored) for stored in files],
                total_count=total,
                page=query.page,
                page_size=query.page_size,
            )
        )
