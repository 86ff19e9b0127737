"""Result type returned by every request handler.

Expected failures (validation, not found, conflicts, business rules,
authentication) travel as values instead of exceptions so that the HTTP
and GraphQL layers can map them without try/except blocks.
"""

from enum import Enum
from typing import Generic, Iterable, List, Optional, TypeVar, Union

T = TypeVar("T")

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ErrorKind(str, Enum):
    """Category of a failed result."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    BUSINESS_RULE = "business_rule"
    UNEXPECTED = "unexpected"


class Result(Generic[T]):
    """Tagged union of Success(value) and Failure(errors).

    Examples:
        >>> Result.success(42).value
        42
        >>> failed = Result.failure("Club not found.", ErrorKind.NOT_FOUND)
        >>> failed.is_failure, failed.error
        (True, 'Club not found.')
    """

    __slots__ = ("_value", "_errors", "_kind")

    def __init__(
        self,
        value: Optional[T] = None,
        errors: Optional[List[str]] = None,
        kind: Optional[ErrorKind] = None,
    ):
        self._value = value
        self._errors = list(errors or [])
        self._kind = kind

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        errors: Union[str, Iterable[str]],
        kind: ErrorKind = ErrorKind.BUSINESS_RULE,
    ) -> "Result[T]":
        if isinstance(errors, str):
            messages = [errors]
        else:
            messages = [message for message in errors if message]
        if not messages:
            messages = [GENERIC_ERROR_MESSAGE]
        return cls(errors=messages, kind=kind)

    @property
    def is_success(self) -> bool:
        return not self._errors

    @property
    def is_failure(self) -> bool:
        return bool(self._errors)

    @property
    def value(self) -> T:
        """Success value.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot read value of a failed result: {self.error}")
        return self._value  # type: ignore[return-value]

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    @property
    def error(self) -> Optional[str]:
        """First error message, or None on success."""
        return self._errors[0] if self._errors else None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self._kind

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._errors!r}, kind={self._kind})"
