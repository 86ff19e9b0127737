"""Validation rules shared by connection commands."""

from datetime import date, datetime, time, timezone
from typing import Optional

from football_network.application.common.validation import ValidationErrors, max_length
from football_network.domain.connection.entities import MAX_DESCRIPTION_LENGTH
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.value_objects import DateRange

EARLIEST_YEAR = 1850


def _is_member(enum_type: type, value: object) -> bool:
    if value is None:
        return False
    try:
        enum_type(value)
    except ValueError:
        return False
    return True


def check_connection_fields(
    errors: ValidationErrors,
    type: object,
    strength: object,
    description: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
) -> None:
    errors.check(_is_member(ConnectionType, type), "Invalid connection type specified.")
    errors.check(_is_member(ConnectionStrength, strength), "Invalid connection strength specified.")
    errors.check(
        max_length(description, MAX_DESCRIPTION_LENGTH),
        f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters.",
    )

    today = utc_now().date()
    if start_date is not None:
        errors.check(start_date.year > EARLIEST_YEAR, f"Start date must be after {EARLIEST_YEAR}.")
        errors.check(start_date <= today, "Start date cannot be in the future.")
    if end_date is not None:
        if errors.check(start_date is not None, "Start date is required when an end date is given."):
            errors.check(
                end_date >= start_date,  # type: ignore[operator]
                "End date must be greater than or equal to start date.",
            )
        errors.check(end_date <= today, "End date cannot be in the future.")


def to_date_range(start_date: Optional[date], end_date: Optional[date]) -> Optional[DateRange]:
    """Active period from request dates; None when no start date is given."""
    if start_date is None:
        return None
    return DateRange(_start_of_day(start_date), _start_of_day(end_date) if end_date else None)


def _start_of_day(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min, tzinfo=timezone.utc)
