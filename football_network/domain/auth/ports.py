"""Token service port.

Access tokens are short-lived signed JWTs; refresh tokens are opaque
random strings kept server-side so they can be revoked.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from football_network.domain.user.entities import User


@dataclass(frozen=True)
class AccessToken:
    value: str
    expires_at: datetime
    jti: str


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims of an access token."""

    user_id: UUID
    email: str
    name: str
    role: str
    jti: str
    issued_at: datetime
    expires_at: datetime


class ITokenService(ABC):
    """Issue and verify tokens."""

    @abstractmethod
    def create_access_token(self, user: User) -> AccessToken:
        pass

    @abstractmethod
    def decode_access_token(self, token: str) -> TokenClaims:
        """Verify signature, expiry, issuer and audience.

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        pass

    @abstractmethod
    async def issue_refresh_token(self, user_id: UUID) -> str:
        pass

    @abstractmethod
    async def consume_refresh_token(self, refresh_token: str) -> Optional[UUID]:
        """Invalidate refresh_token and return its owner.

        Returns:
            User ID, or None if the token is unknown or expired
        """
        pass

    @abstractmethod
    async def revoke_refresh_token(self, refresh_token: str) -> bool:
        """Returns True if the token existed."""
        pass
