"""Role hierarchy rules for managing other accounts."""

from typing import Optional

from football_network.application.common.result import ErrorKind, Result
from football_network.domain.user.enums import UserRole

OUTRANKED_MESSAGE = "You cannot manage a user whose role is equal to or higher than your own."
ROLE_TOO_HIGH_MESSAGE = "You cannot assign a role higher than your own."


def check_hierarchy(
    acting_role: Optional[UserRole],
    target_role: UserRole,
    requested_role: Optional[UserRole] = None,
) -> Optional[Result]:
    """Forbidden result when the actor may not act on the target, else None.

    A missing acting role means an internal call (bootstrap, scripts) and is
    not restricted. Super administrators manage every account.
    """
    if acting_role is None or acting_role == UserRole.SUPER_ADMIN:
        return None
    if target_role >= acting_role:
        return Result.failure(OUTRANKED_MESSAGE, ErrorKind.FORBIDDEN)
    if requested_role is not None and requested_role > acting_role:
        return Result.failure(ROLE_TOO_HIGH_MESSAGE, ErrorKind.FORBIDDEN)
    return None
