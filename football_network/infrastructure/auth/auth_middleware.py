"""FastAPI authentication middleware."""

import logging
from typing import Any, Optional, Tuple

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from football_network.application.auth.queries.validate_token import ValidateTokenQuery

logger = logging.getLogger(__name__)

PUBLIC_API_PREFIXES: Tuple[str, ...] = (
    "/api/v1/auth/login",
    "/api/v1/auth/refresh",
    "/api/v1/navigation",
)


class AuthMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for JWT authentication.

    Verifies the Bearer token through the dispatcher (ValidateTokenQuery)
    and sets ``request.state.auth_user`` (an AuthUser, or None for
    anonymous requests).

    - A token that fails validation is always rejected with 401.
    - With ``auth_required`` anonymous requests to ``/api/`` are
      rejected too, except login, refresh and navigation.

    Examples:
        >>> app.add_middleware(AuthMiddleware, auth_required=True)
        >>> # In route handler:
        >>> principal = request.state.auth_user
    """

    def __init__(self, app: Any, auth_required: bool = False) -> None:
        super().__init__(app)
        self.auth_required = auth_required

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        request.state.auth_user = None
        token = self._extract_token(request.headers.get("Authorization"))

        if not token:
            if self.auth_required and self._is_protected(request.url.path):
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"error": "unauthorized", "message": "Missing authorization token"},
                )
            return await call_next(request)

        dispatcher = request.app.state.container.dispatcher
        result = await dispatcher.send(ValidateTokenQuery(token=token))
        if result.is_failure:
            logger.info("Rejected bearer token", extra={"path": request.url.path})
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "invalid_token", "message": result.error},
            )

        request.state.auth_user = result.value.principal
        return await call_next(request)

    @staticmethod
    def _is_protected(path: str) -> bool:
        if not path.startswith("/api/"):
            return False
        return not path.startswith(PUBLIC_API_PREFIXES)

    @staticmethod
    def _extract_token(auth_header: Optional[str]) -> Optional[str]:
        """Extract Bearer token from Authorization header.

        Examples:
            >>> AuthMiddleware._extract_token("Bearer eyJ...")
            'eyJ...'
            >>> AuthMiddleware._extract_token("eyJ...")  # Missing Bearer
        """
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2:
            return None

        scheme, token = parts
        if scheme.lower() != "bearer":
            return None

        return token
