"""Authorization decisions over an AuthUser.

Every check returns False for a missing or inactive principal.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set

from football_network.application.authorization import catalog
from football_network.application.authorization.catalog import AccessPolicy
from football_network.application.authorization.models import AuthUser

logger = logging.getLogger(__name__)


class AuthorizationService:
    """Role, permission and policy checks.

    Example:
        >>> service = AuthorizationService()
        >>> service.can_access(moderator, "clubs", "delete")
        False
        >>> service.get_available_actions(moderator, "clubs")
        ['view', 'edit', 'approve']
    """

    def __init__(self, policies: Optional[Sequence[AccessPolicy]] = None):
        self._policies = list(policies if policies is not None else catalog.POLICIES)

    @staticmethod
    def _usable(user: Optional[AuthUser]) -> bool:
        return user is not None and user.is_active

    def has_role(self, user: Optional[AuthUser], role: str) -> bool:
        return self._usable(user) and role in user.roles  # type: ignore[union-attr]

    def has_any_role(self, user: Optional[AuthUser], roles: Iterable[str]) -> bool:
        return any(self.has_role(user, role) for role in roles)

    def has_permission(self, user: Optional[AuthUser], permission: str) -> bool:
        if not self._usable(user):
            return False
        return permission in self.get_effective_permissions(user)

    def has_any_permission(self, user: Optional[AuthUser], permissions: Iterable[str]) -> bool:
        return any(self.has_permission(user, p) for p in permissions)

    def has_all_permissions(self, user: Optional[AuthUser], permissions: Iterable[str]) -> bool:
        return all(self.has_permission(user, p) for p in permissions)

    def get_effective_permissions(self, user: Optional[AuthUser]) -> Set[str]:
        """Explicit permissions plus those granted by the user's roles."""
        if user is None:
            return set()
        return set(user.permissions) | set(catalog.permissions_for_roles(user.roles))

    def has_minimum_role_level(self, user: Optional[AuthUser], min_level: int) -> bool:
        if not self._usable(user):
            return False
        levels = [catalog.ROLES[r].level for r in user.roles if r in catalog.ROLES]  # type: ignore[union-attr]
        return max(levels, default=0) >= min_level

    def can_access_admin(self, user: Optional[AuthUser]) -> bool:
        return self.has_any_role(user, catalog.ADMIN_ROLES) and self.has_any_permission(
            user, catalog.ADMIN_PERMISSIONS
        )

    def can_access(self, user: Optional[AuthUser], resource: str, action: str) -> bool:
        """Evaluate the policies registered for (resource, action).

        Returns False when no policy exists for the pair.
        """
        if not self._usable(user):
            return False
        policies = [p for p in self._policies if p.resource == resource and p.action == action]
        if not policies:
            logger.debug(
                "No access policy defined",
                extra={"resource": resource, "action": action},
            )
            return False
        return any(self._evaluate(policy, user) for policy in policies)  # type: ignore[arg-type]

    def get_available_actions(self, user: Optional[AuthUser], resource: str) -> List[str]:
        """Actions on resource the user may perform, in policy order."""
        if not self._usable(user):
            return []
        actions: List[str] = []
        for policy in self._policies:
            if policy.resource != resource or policy.action in actions:
                continue
            if self._evaluate(policy, user):  # type: ignore[arg-type]
                actions.append(policy.action)
        return actions

    def _evaluate(self, policy: AccessPolicy, user: AuthUser) -> bool:
        if policy.roles and not self.has_any_role(user, policy.roles):
            return False
        if policy.permissions and not self.has_any_permission(user, policy.permissions):
            return False
        return True
