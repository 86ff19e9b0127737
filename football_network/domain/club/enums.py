"""Club enumerations."""

from enum import IntEnum


class LeagueType(IntEnum):
    """Competition a club plays in."""

    EKSTRAKLASA = 1
    FORTUNA_1_LIGA = 2
    EUROPEAN_CLUB = 3

    @property
    def display_name(self) -> str:
        return _LEAGUE_NAMES[self]


_LEAGUE_NAMES = {
    LeagueType.EKSTRAKLASA: "Ekstraklasa",
    LeagueType.FORTUNA_1_LIGA: "Fortuna 1 Liga",
    LeagueType.EUROPEAN_CLUB: "European Club",
}
