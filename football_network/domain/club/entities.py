"""Club aggregate root."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from football_network.domain.club.enums import LeagueType
from football_network.domain.club.events import ClubCreated, ClubUpdated
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.errors import DomainValidationError
from football_network.domain.shared.events import DomainEvent, EventRecorder
from football_network.domain.shared.value_objects import Point2D

MIN_FOUNDED_YEAR = 1800

_SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")

# Attributes that may change through Club.update(); flags have their own methods.
UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "short_name",
        "slug",
        "league",
        "country",
        "city",
        "region",
        "position",
        "founded",
        "stadium",
        "website",
        "colors",
        "description",
        "nickname",
        "motto",
        "metadata",
    }
)


def slugify(name: str) -> str:
    """Derive a URL slug from a club name.

    Examples:
        >>> slugify("Legia Warszawa")
        'legia-warszawa'
        >>> slugify("K.S. Cracovia")
        'ks-cracovia'
    """
    slug = name.strip().lower().replace(" ", "-")
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return re.sub(r"-{2,}", "-", slug).strip("-")


@dataclass
class Club(EventRecorder):
    """Football club.

    Invariants:
    - name is required and at most 100 characters
    - slug contains only lowercase letters, digits and hyphens
    - country and city are required, at most 50 characters each
    - founded, when known, lies between 1800 and the current year

    Examples:
        >>> club = Club.create(
        ...     name="Lech Poznan", league=LeagueType.EKSTRAKLASA,
        ...     country="Poland", city="Poznan",
        ... )
        >>> club.slug
        'lech-poznan'
        >>> [type(e).__name__ for e in club.collect_events()]
        ['ClubCreated']
    """

    id: UUID
    name: str
    slug: str
    league: LeagueType
    country: str
    city: str
    position: Point2D = field(default_factory=Point2D.origin)
    short_name: Optional[str] = None
    region: Optional[str] = None
    logo_path: Optional[str] = None
    founded: Optional[int] = None
    stadium: Optional[str] = None
    website: Optional[str] = None
    colors: Optional[str] = None
    description: Optional[str] = None
    nickname: Optional[str] = None
    motto: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    is_active: bool = True
    is_verified: bool = False
    is_featured: bool = False
    created_at: datetime = field(default_factory=utc_now)
    modified_at: Optional[datetime] = None
    _events: List[DomainEvent] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip()
        self.slug = (self.slug or "").strip().lower()
        self.country = (self.country or "").strip()
        self.city = (self.city or "").strip()
        self.league = LeagueType(self.league)
        self._validate()

    def _validate(self) -> None:
        if not self.name:
            raise DomainValidationError("Club name is required.")
        if len(self.name) > 100:
            raise DomainValidationError("Club name must not exceed 100 characters.")
        if not self.slug or not _SLUG_PATTERN.match(self.slug):
            raise DomainValidationError(
                "Club slug may only contain lowercase letters, digits and hyphens."
            )
        if len(self.slug) > 100:
            raise DomainValidationError("Club slug must not exceed 100 characters.")
        if not self.country:
            raise DomainValidationError("Country is required.")
        if len(self.country) > 50:
            raise DomainValidationError("Country must not exceed 50 characters.")
        if not self.city:
            raise DomainValidationError("City is required.")
        if len(self.city) > 50:
            raise DomainValidationError("City must not exceed 50 characters.")
        if self.founded is not None:
            current_year = utc_now().year
            if not MIN_FOUNDED_YEAR <= self.founded <= current_year:
                raise DomainValidationError(
                    f"Founded year must be between {MIN_FOUNDED_YEAR} and {current_year}."
                )

    @staticmethod
    def create(
        name: str,
        league: LeagueType,
        country: str,
        city: str,
        slug: Optional[str] = None,
        position: Optional[Point2D] = None,
        **details: Any,
    ) -> "Club":
        """Factory for a new club; records ClubCreated.

        Args:
            name: Club name
            league: League the club plays in
            country: Country name
            city: City name
            slug: URL slug (derived from name when omitted)
            position: Graph position (origin when omitted)
            **details: Optional attributes (short_name, stadium, ...)

        Raises:
            DomainValidationError: If any invariant is violated
        """
        club = Club(
            id=uuid4(),
            name=name,
            slug=slug or slugify(name),
            league=league,
            country=country,
            city=city,
            position=position or Point2D.origin(),
            **details,
        )
        club._add_event(
            ClubCreated(
                **DomainEvent.new_metadata(),
                club_id=club.id,
                name=club.name,
                league=club.league,
            )
        )
        return club

    def update(self, **changes: Any) -> List[str]:
        """Apply attribute changes atomically.

        Only attributes whose value actually differs are recorded in the
        ClubUpdated event. If the new state violates an invariant nothing
        is changed.

        Returns:
            Names of the changed attributes

        Raises:
            ValueError: If an attribute is not updatable
            DomainValidationError: If the resulting club is invalid
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update club attributes: {', '.join(sorted(unknown))}")

        changed = [name for name, value in changes.items() if getattr(self, name) != value]
        if not changed:
            return []

        snapshot = {name: getattr(self, name) for name in changed}
        for name in changed:
            setattr(self, name, changes[name])
        try:
            self.__post_init__()
        except DomainValidationError:
            for name, value in snapshot.items():
                setattr(self, name, value)
            raise

        self._touch(changed)
        return changed

    def update_logo_path(self, logo_path: Optional[str]) -> None:
        self.logo_path = logo_path
        self._touch(["logo_path"])

    def activate(self) -> None:
        self._set_flag("is_active", True)

    def deactivate(self) -> None:
        self._set_flag("is_active", False)

    def verify(self) -> None:
        self._set_flag("is_verified", True)

    def unverify(self) -> None:
        self._set_flag("is_verified", False)

    def feature(self) -> None:
        self._set_flag("is_featured", True)

    def unfeature(self) -> None:
        self._set_flag("is_featured", False)

    def _set_flag(self, name: str, value: bool) -> None:
        if getattr(self, name) == value:
            return
        setattr(self, name, value)
        self._touch([name])

    def _touch(self, changed: List[str]) -> None:
        self.modified_at = utc_now()
        self._add_event(
            ClubUpdated(
                **DomainEvent.new_metadata(),
                club_id=self.id,
                changed_fields=tuple(changed),
            )
        )

