"""Route guards.

A guard is a pure predicate over the current principal and the
requested route's metadata. It returns a ``GuardDecision``; performing
the redirect (and remembering the intended URL) is the caller's job,
see ``NavigationService``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from football_network.application.authorization.models import AuthUser
from football_network.application.authorization.service import AuthorizationService

LOGIN_PATH = "/login"
UNAUTHORIZED_PATH = "/unauthorized"


class GuardOutcome(str, Enum):
    ALLOW = "allow"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class GuardDecision:
    outcome: GuardOutcome
    redirect_to: Optional[str] = None
    reason: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GuardOutcome.ALLOW

    @classmethod
    def allow(cls) -> "GuardDecision":
        return cls(GuardOutcome.ALLOW)

    @classmethod
    def to_login(cls, reason: str = "authentication required") -> "GuardDecision":
        return cls(GuardOutcome.REDIRECT, LOGIN_PATH, reason)

    @classmethod
    def unauthorized(cls, reason: str) -> "GuardDecision":
        return cls(GuardOutcome.REDIRECT, UNAUTHORIZED_PATH, reason)


@dataclass(frozen=True)
class RouteData:
    """Access requirements attached to a route."""

    roles: Tuple[str, ...] = field(default_factory=tuple)
    permissions: Tuple[str, ...] = field(default_factory=tuple)
    require_all_permissions: bool = False
    resource: Optional[str] = None
    action: Optional[str] = None
    title: Optional[str] = None


def _signed_in(user: Optional[AuthUser]) -> bool:
    return user is not None and user.is_active


class RouteGuard(ABC):
    """Base class for guards."""

    @abstractmethod
    def check(self, user: Optional[AuthUser], data: RouteData) -> GuardDecision:
        """Decide whether user may open a route carrying data."""


class AuthGuard(RouteGuard):
    """Any active, signed-in user."""

    def check(self, user: Optional[AuthUser], data: RouteData) -> GuardDecision:
        if _signed_in(user):
            return GuardDecision.allow()
        return GuardDecision.to_login()


class AdminGuard(RouteGuard):
    """Admin panel access (admin-ish role and admin permission)."""

    def __init__(self, authorization: AuthorizationService):
        self._authorization = authorization

    def check(self, user: Optional[AuthUser], data: RouteData) -> GuardDecision:
        if not _signed_in(user):
            return GuardDecision.to_login()
        if self._authorization.can_access_admin(user):
            return GuardDecision.allow()
        return GuardDecision.unauthorized("admin access required")


class RoleGuard(RouteGuard):
    """Requires any of ``data.roles``; an empty list allows everyone."""

    def __init__(self, authorization: AuthorizationService):
        self._authorization = authorization

    def check(self, user: Optional[AuthUser], data: RouteData) -> GuardDecision:
        if not data.roles:
            return GuardDecision.allow()
        if not _signed_in(user):
            return GuardDecision.to_login()
        if self._authorization.has_any_role(user, data.roles):
            return GuardDecision.allow()
        return GuardDecision.unauthorized(f"requires one of roles: {', '.join(data.roles)}")


class PermissionGuard(RouteGuard):
    """Requires any (or all, with ``require_all_permissions``) of ``data.permissions``."""

    def __init__(self, authorization: AuthorizationService):
        self._authorization = authorization

    def check(self, user: Optional[AuthUser], data: RouteData) -> GuardDecision:
        if not data.permissions:
            return GuardDecision.allow()
        if not _signed_in(user):
            return GuardDecision.to_login()
        if data.require_all_permissions:
            granted = self._authorization.has_all_permissions(user, data.permissions)
        else:
            granted = self._authorization.has_any_permission(user, data.permissions)
        if granted:
            return GuardDecision.allow()
        mode = "all" if data.require_all_permissions else "one"
        return GuardDecision.unauthorized(
            f"requires {mode} of permissions: {', '.join(data.permissions)}"
        )


class ResourceGuard(RouteGuard):
    """Delegates to the access policies for (``data.resource``, ``data.action``)."""

    def __init__(self, authorization: AuthorizationService):
        self._authorization = authorization

    def check(self, user: Optional[AuthUser], data: RouteData) -> GuardDecision:
        if not data.resource or not data.action:
            return GuardDecision.allow()
        if not _signed_in(user):
            return GuardDecision.to_login()
        if self._authorization.can_access(user, data.resource, data.action):
            return GuardDecision.allow()
        return GuardDecision.unauthorized(f"cannot {data.action} {data.resource}")
