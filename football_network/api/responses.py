"""Result to HTTP mapping.

Every endpoint answers with the envelope
``{"success": bool, "data": ..., "errors": [...]}``.
"""

from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from football_network.application.common.pagination import PagedResult
from football_network.application.common.result import ErrorKind, Result

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.BUSINESS_RULE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _page(result: PagedResult[Any]) -> Dict[str, Any]:
    return {
        "items": result.items,
        "total_count": result.total_count,
        "page": result.page,
        "page_size": result.page_size,
        "total_pages": result.total_pages,
        "has_next_page": result.has_next_page,
        "has_previous_page": result.has_previous_page,
    }


def envelope(data: Any = None, errors: Optional[List[str]] = None) -> Dict[str, Any]:
    if isinstance(data, PagedResult):
        data = _page(data)
    return {
        "success": not errors,
        "data": jsonable_encoder(data),
        "errors": errors or [],
    }


def error_response(status_code: int, errors: List[str]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(errors=errors))


def to_response(result: Result[Any], success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Render a handler result.

    Examples:
        >>> to_response(Result.failure("Club with ID 'x' not found.", ErrorKind.NOT_FOUND)).status_code
        404
    """
    if result.is_success:
        return JSONResponse(status_code=success_status, content=envelope(result.value))
    return error_response(STATUS_BY_KIND.get(result.kind, 500), result.errors)
