"""User enumerations."""

from enum import IntEnum


class UserRole(IntEnum):
    """Account role. Higher values include the rights of lower ones."""

    USER = 1
    MODERATOR = 2
    ADMINISTRATOR = 3
    SUPER_ADMIN = 4
