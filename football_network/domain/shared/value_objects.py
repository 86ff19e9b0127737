"""Shared value objects."""

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from football_network.domain.shared.clock import ensure_utc
from football_network.domain.shared.errors import DomainValidationError

COORDINATE_LIMIT = 10000.0

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Point2D:
    """Position of a club on the graph canvas.

    Examples:
        >>> Point2D(3, 4).distance_to(Point2D.origin())
        5.0
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        for axis, value in (("X", self.x), ("Y", self.y)):
            if not math.isfinite(value):
                raise DomainValidationError(f"{axis} coordinate must be a finite number.")
            if abs(value) > COORDINATE_LIMIT:
                raise DomainValidationError(
                    f"{axis} coordinate must be between {-COORDINATE_LIMIT:g} "
                    f"and {COORDINATE_LIMIT:g}."
                )

    @staticmethod
    def origin() -> "Point2D":
        return Point2D(0.0, 0.0)

    def distance_to(self, other: "Point2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class DateRange:
    """Closed period with an optional open end.

    Invariants:
    - start and end are timezone-aware UTC
    - end, when present, is not before start
    """

    start: datetime
    end: Optional[datetime] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_utc(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", ensure_utc(self.end))
            if self.end < self.start:
                raise DomainValidationError("End date must be after or equal to start date.")

    @property
    def is_ongoing(self) -> bool:
        return self.end is None

    def contains(self, moment: datetime) -> bool:
        moment = ensure_utc(moment)
        if moment < self.start:
            return False
        return self.end is None or moment <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        self_ends_before = self.end is not None and self.end < other.start
        other_ends_before = other.end is not None and other.end < self.start
        return not (self_ends_before or other_ends_before)


@dataclass(frozen=True)
class Email:
    """Normalised e-mail address."""

    value: str

    def __post_init__(self) -> None:
        normalised = (self.value or "").strip().lower()
        if not normalised:
            raise DomainValidationError("Email is required.")
        if len(normalised) > 254:
            raise DomainValidationError("Email must not exceed 254 characters.")
        if not _EMAIL_PATTERN.match(normalised):
            raise DomainValidationError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalised)

    def __str__(self) -> str:
        return self.value
