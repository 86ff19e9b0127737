"""Role/permission catalog and the authorization service."""

from football_network.application.authorization.models import AuthUser
from football_network.application.authorization.service import AuthorizationService

__all__ = ["AuthUser", "AuthorizationService"]
