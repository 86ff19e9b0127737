"""In-process command/query dispatcher.

Handlers are registered explicitly against the concrete request type.
There is no type scanning: the application wiring lists every handler
(see ``football_network.application.registry``) and ``verify`` checks
at startup that no request type is left without one.
"""

import logging
from typing import Any, Dict, Iterable, List, Type

from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Request
from football_network.application.common.result import Result

logger = logging.getLogger(__name__)


class DispatcherError(Exception):
    """Base class for dispatcher configuration errors."""


class HandlerRegistrationError(DispatcherError):
    """Duplicate or missing handler registration."""


class HandlerNotFoundError(DispatcherError):
    """No handler registered for a request type."""

    def __init__(self, request_type: type):
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")


class Dispatcher:
    """Routes a request to exactly one handler.

    Example:
        >>> dispatcher = Dispatcher()
        >>> dispatcher.register(GetClubByIdQuery, GetClubByIdQueryHandler(repo))
        >>> result = await dispatcher.send(GetClubByIdQuery(club_id=club_id))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[Request], RequestHandler[Any, Any]] = {}

    def register(self, request_type: Type[Request], handler: RequestHandler[Any, Any]) -> None:
        """Register handler for request_type.

        Raises:
            HandlerRegistrationError: If request_type is not a request class
                or already has a handler
        """
        if not (isinstance(request_type, type) and issubclass(request_type, Request)):
            raise HandlerRegistrationError(f"{request_type!r} is not a command or query type")
        if request_type in self._handlers:
            existing = type(self._handlers[request_type]).__name__
            raise HandlerRegistrationError(
                f"{request_type.__name__} already handled by {existing}; "
                f"refusing to register {type(handler).__name__}"
            )
        self._handlers[request_type] = handler
        logger.debug(
            "Handler registered",
            extra={"request": request_type.__name__, "handler": type(handler).__name__},
        )

    def verify(self, request_types: Iterable[Type[Request]]) -> None:
        """Fail fast when any expected request type has no handler.

        Raises:
            HandlerRegistrationError: Listing every unhandled type
        """
        missing: List[str] = [t.__name__ for t in request_types if t not in self._handlers]
        if missing:
            raise HandlerRegistrationError(
                "Missing handlers for: " + ", ".join(sorted(missing))
            )
        logger.info("Dispatcher verified", extra={"handlers": len(self._handlers)})

    def is_registered(self, request_type: Type[Request]) -> bool:
        return request_type in self._handlers

    @property
    def registered_types(self) -> List[Type[Request]]:
        return list(self._handlers)

    async def send(self, request: Request) -> Result[Any]:
        """Dispatch request to its handler.

        Raises:
            HandlerNotFoundError: If the request type was never registered
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise HandlerNotFoundError(type(request))
        return await handler.handle(request)
