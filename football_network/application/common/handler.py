"""Request handler template.

Every command/query handler follows the same flow:

1. Run the request validator. Any message short-circuits into a
   VALIDATION failure and nothing else runs.
2. Execute the handler body (``_execute``).
3. Convert domain errors into typed failures and unexpected exceptions
   into a generic failure. The exception text never reaches the caller,
   it only goes to the log.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import Validator
from football_network.domain.shared.errors import DomainError

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")

logger = logging.getLogger(__name__)


class RequestHandler(ABC, Generic[TRequest, TResponse]):
    """Base class for command and query handlers.

    Class attributes:
        validator: Optional validator run before ``_execute``
        operation: Human readable operation name used in the generic
            failure message ("creating the club", ...)
    """

    validator: Optional[Validator] = None
    operation: str = "processing the request"

    async def handle(self, request: TRequest) -> Result[TResponse]:
        request_name = type(request).__name__

        if self.validator is not None:
            errors = self.validator.validate(request)
            if errors:
                logger.warning(
                    "Validation failed",
                    extra={"request": request_name, "errors": errors},
                )
                return Result.failure(errors, ErrorKind.VALIDATION)

        try:
            return await self._execute(request)
        except DomainError as e:
            logger.info(
                "Request rejected by domain rule",
                extra={"request": request_name, "reason": str(e), "kind": e.kind},
            )
            return Result.failure(str(e), ErrorKind(e.kind))
        except Exception:
            logger.exception(
                "Unexpected error while handling request",
                extra={"request": request_name},
            )
            return Result.failure(
                f"An unexpected error occurred while {self.operation}.",
                ErrorKind.UNEXPECTED,
            )

    @abstractmethod
    async def _execute(self, request: TRequest) -> Result[TResponse]:
        """Handler body, called only for valid requests."""
