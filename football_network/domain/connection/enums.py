"""Connection enumerations."""

from enum import IntEnum


class ConnectionType(IntEnum):
    ALLIANCE = 1
    RIVALRY = 2
    FRIENDSHIP = 3


class ConnectionStrength(IntEnum):
    """Strength of a relation; the value doubles as graph edge weight."""

    WEAK = 1
    MEDIUM = 2
    STRONG = 3
    VERY_STRONG = 4
