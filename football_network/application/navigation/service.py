"""Navigation resolution: match a frontend path, run its guards, decide.

This is where a guard denial turns into an action. When the decision is
a redirect to the login page, the originally requested URL is kept in
the intended-URL store so the login response can send the user back.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional

from football_network.application.authorization.models import AuthUser
from football_network.application.authorization.service import AuthorizationService
from football_network.application.navigation.guards import (
    LOGIN_PATH,
    AdminGuard,
    AuthGuard,
    GuardDecision,
    GuardOutcome,
    PermissionGuard,
    ResourceGuard,
    RoleGuard,
    RouteGuard,
)
from football_network.application.navigation.routes import (
    DEFAULT_LANDING_PATH,
    DEFAULT_ROUTES,
    NOT_FOUND_PATH,
    GuardKind,
    RouteTable,
)

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5


class IIntendedUrlStore(ABC):
    """Remembers the URL a visitor wanted before being sent to login."""

    @abstractmethod
    def remember(self, session_key: str, url: str) -> None:
        pass

    @abstractmethod
    def pop(self, session_key: str) -> Optional[str]:
        """Return and forget the stored URL."""
        pass


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of resolving a path.

    Attributes:
        requested_path: Path the client asked for
        target_path: Path the client should display
        decision: Decision of the first guard that denied, or allow
        params: Route parameters of the matched route
    """

    requested_path: str
    target_path: str
    decision: GuardDecision
    params: Dict[str, str] = field(default_factory=dict)
    title: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.decision.allowed


class NavigationService:
    """Resolve frontend paths against the route table.

    Example:
        >>> result = navigation.resolve("/admin", user=None, session_key="s1")
        >>> result.target_path
        '/login'
        >>> navigation.pop_intended_url("s1")
        '/admin'
    """

    def __init__(
        self,
        authorization: AuthorizationService,
        intended_urls: IIntendedUrlStore,
        routes: Optional[RouteTable] = None,
    ):
        self._intended_urls = intended_urls
        self._routes = routes or RouteTable(DEFAULT_ROUTES)
        self._guards: Dict[GuardKind, RouteGuard] = {
            GuardKind.AUTH: AuthGuard(),
            GuardKind.ADMIN: AdminGuard(authorization),
            GuardKind.ROLE: RoleGuard(authorization),
            GuardKind.PERMISSION: PermissionGuard(authorization),
            GuardKind.RESOURCE: ResourceGuard(authorization),
        }

    def resolve(
        self,
        path: str,
        user: Optional[AuthUser],
        session_key: Optional[str] = None,
    ) -> NavigationResult:
        current = path
        for _ in range(MAX_REDIRECTS):
            match = self._routes.match(current)
            if match is None:
                return NavigationResult(
                    requested_path=path,
                    target_path=NOT_FOUND_PATH,
                    decision=GuardDecision(GuardOutcome.REDIRECT, NOT_FOUND_PATH, "no such route"),
                )

            for kind in match.route.guards:
                decision = self._guards[kind].check(user, match.route.data)
                if not decision.allowed:
                    return self._deny(path, decision, kind, user, session_key)

            if match.route.redirect_to is None:
                return NavigationResult(
                    requested_path=path,
                    target_path=current,
                    decision=GuardDecision.allow(),
                    params=match.params,
                    title=match.route.data.title,
                )
            current = match.route.redirect_to

        raise RuntimeError(f"Too many route redirects resolving '{path}'")

    def pop_intended_url(self, session_key: Optional[str]) -> str:
        """URL to open after a successful login (dashboard by default)."""
        if not session_key:
            return DEFAULT_LANDING_PATH
        return self._intended_urls.pop(session_key) or DEFAULT_LANDING_PATH

    def _deny(
        self,
        path: str,
        decision: GuardDecision,
        kind: GuardKind,
        user: Optional[AuthUser],
        session_key: Optional[str],
    ) -> NavigationResult:
        logger.info(
            "Navigation denied",
            extra={
                "path": path,
                "guard": kind.value,
                "redirect_to": decision.redirect_to,
                "reason": decision.reason,
                "user_id": str(user.user_id) if user else None,
            },
        )
        if decision.redirect_to == LOGIN_PATH and session_key:
            self._intended_urls.remember(session_key, path)
        return NavigationResult(
            requested_path=path,
            target_path=decision.redirect_to or NOT_FOUND_PATH,
            decision=decision,
        )
