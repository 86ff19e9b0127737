"""Declarative-ish request validation.

A validator inspects a request and collects user-facing messages. It
never raises: an empty list means the request is valid. Handlers run
the validator before touching any collaborator.
"""

import re
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Pattern, TypeVar, Union

R = TypeVar("R")

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URL_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


class ValidationErrors:
    """Accumulates validation messages in rule order."""

    def __init__(self) -> None:
        self._messages: List[str] = []

    def add(self, message: str) -> None:
        self._messages.append(message)

    def check(self, condition: bool, message: str) -> bool:
        """Record message when condition is false. Returns condition."""
        if not condition:
            self._messages.append(message)
        return condition

    @property
    def messages(self) -> List[str]:
        return list(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)


class Validator(ABC, Generic[R]):
    """Base validator.

    Subclasses implement ``rules`` and report every violated rule through
    the ``errors`` collector, so the caller receives all messages at once.

    Example:
        class GetClubValidator(Validator[GetClubByIdQuery]):
            def rules(self, request, errors):
                errors.check(request.club_id is not None, "Club ID is required.")
    """

    def validate(self, request: R) -> List[str]:
        errors = ValidationErrors()
        self.rules(request, errors)
        return errors.messages

    @abstractmethod
    def rules(self, request: R, errors: ValidationErrors) -> None:
        """Evaluate rules for request."""


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def max_length(value: Optional[str], limit: int) -> bool:
    """True when value is empty or at most limit characters long."""
    return value is None or len(value) <= limit


def length_between(value: Optional[str], minimum: int, maximum: int) -> bool:
    return value is not None and minimum <= len(value) <= maximum


def matches(value: Optional[str], pattern: Union[str, Pattern[str]]) -> bool:
    if value is None:
        return False
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return compiled.fullmatch(value) is not None


def is_email(value: Optional[str]) -> bool:
    return value is not None and _EMAIL_PATTERN.match(value) is not None


def is_http_url(value: Optional[str]) -> bool:
    return value is not None and _URL_PATTERN.match(value) is not None


def valid_page(errors: ValidationErrors, page: int, page_size: int, max_page_size: int) -> None:
    """Shared paging rules for list queries."""
    errors.check(page >= 1, "Page must be greater than 0.")
    errors.check(
        1 <= page_size <= max_page_size,
        f"Page size must be between 1 and {max_page_size}.",
    )
