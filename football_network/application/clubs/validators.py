"""Validation rules shared by the create and update club commands."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from football_network.application.common.validation import (
    ValidationErrors,
    is_blank,
    is_http_url,
    matches,
    max_length,
)
from football_network.domain.club.enums import LeagueType
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.value_objects import COORDINATE_LIMIT, Point2D

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-\.]+$")
_SHORT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
_HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

EARLIEST_FOUNDED_YEAR = 1850
MAX_COLORS = 3


@dataclass(frozen=True)
class ClubFields:
    """Editable club attributes carried by create/update commands."""

    name: str = ""
    short_name: str = ""
    league: Optional[LeagueType] = None
    city: str = ""
    country: Optional[str] = None
    region: Optional[str] = None
    slug: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    founded: Optional[int] = None
    stadium: Optional[str] = None
    website: Optional[str] = None
    colors: Tuple[str, ...] = field(default_factory=tuple)
    description: Optional[str] = None
    nickname: Optional[str] = None
    motto: Optional[str] = None


def _is_league(value: object) -> bool:
    if value is None:
        return False
    try:
        LeagueType(value)
    except ValueError:
        return False
    return True


def check_club_fields(request: ClubFields, errors: ValidationErrors) -> None:
    """Rules for the editable club attributes."""
    if errors.check(not is_blank(request.name), "Club name is required."):
        name = request.name.strip()
        errors.check(len(name) >= 2, "Club name must be at least 2 characters long.")
        errors.check(len(name) <= 100, "Club name must not exceed 100 characters.")
        errors.check(
            matches(name, _NAME_PATTERN),
            "Club name can only contain letters, numbers, spaces, hyphens, and dots.",
        )

    if errors.check(not is_blank(request.short_name), "Short name is required."):
        short_name = request.short_name.strip()
        errors.check(len(short_name) >= 2, "Short name must be at least 2 characters long.")
        errors.check(len(short_name) <= 10, "Short name must not exceed 10 characters.")
        errors.check(
            matches(short_name, _SHORT_NAME_PATTERN),
            "Short name can only contain letters and numbers.",
        )

    errors.check(
        _is_league(request.league),
        "Invalid league specified.",
    )

    if request.founded is not None:
        errors.check(
            request.founded > EARLIEST_FOUNDED_YEAR,
            f"Founded year must be after {EARLIEST_FOUNDED_YEAR}.",
        )
        errors.check(request.founded <= utc_now().year, "Founded year cannot be in the future.")

    if errors.check(not is_blank(request.city), "City is required."):
        errors.check(max_length(request.city.strip(), 50), "City must not exceed 50 characters.")

    errors.check(max_length(request.country, 50), "Country must not exceed 50 characters.")
    errors.check(max_length(request.stadium, 100), "Stadium name must not exceed 100 characters.")
    if not is_blank(request.website):
        errors.check(is_http_url(request.website), "Website must be a valid URL.")
    errors.check(
        max_length(request.description, 1000),
        "Description must not exceed 1000 characters.",
    )

    for axis, value in (("X", request.x), ("Y", request.y)):
        if value is not None:
            errors.check(
                -COORDINATE_LIMIT <= value <= COORDINATE_LIMIT,
                f"{axis} coordinate must be between {-COORDINATE_LIMIT:g} and {COORDINATE_LIMIT:g}.",
            )

    if request.colors:
        errors.check(len(request.colors) <= MAX_COLORS, "A club can have at most 3 colors.")
        errors.check(
            all(_HEX_COLOR_PATTERN.match(color) for color in request.colors),
            "All colors must be valid hex color codes.",
        )


def club_attributes(request: ClubFields, default_country: str) -> Dict[str, Any]:
    """Normalised entity attributes from a create/update request.

    The slug is left out; callers derive or check it separately.
    """
    return {
        "name": request.name.strip(),
        "short_name": request.short_name.strip() or None,
        "league": LeagueType(request.league),
        "city": request.city.strip(),
        "country": (request.country or "").strip() or default_country,
        "region": request.region,
        "position": Point2D(request.x or 0.0, request.y or 0.0),
        "founded": request.founded,
        "stadium": request.stadium,
        "website": request.website,
        "colors": ",".join(request.colors) or None,
        "description": request.description,
        "nickname": request.nickname,
        "motto": request.motto,
    }
