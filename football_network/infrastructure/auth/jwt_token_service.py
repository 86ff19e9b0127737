"""JWT token service (PyJWT, HS256).

Access tokens carry ``sub``, ``email``, ``name``, ``role``, ``jti``,
``iat`` and ``exp`` plus issuer and audience. Refresh tokens are opaque
random strings kept in a TTLCache; they are single use.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

import jwt
from cachetools import TTLCache
from jwt.exceptions import ExpiredSignatureError
from jwt.exceptions import InvalidTokenError as JWTError

from football_network.application.authorization.catalog import role_id_for
from football_network.domain.auth.ports import AccessToken, ITokenService, TokenClaims
from football_network.domain.shared.clock import utc_now
from football_network.domain.shared.errors import AuthenticationError
from football_network.domain.user.entities import User
from football_network.infrastructure.config import AuthSettings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
MAX_REFRESH_TOKENS = 100_000


class JwtTokenService(ITokenService):
    """
    Examples:
        >>> service = JwtTokenService(get_auth_settings())
        >>> token = service.create_access_token(user)
        >>> service.decode_access_token(token.value).user_id == user.id
        True
    """

    def __init__(self, settings: AuthSettings):
        self._settings = settings
        self._access_ttl = timedelta(minutes=settings.access_token_minutes)
        self._refresh_tokens: TTLCache = TTLCache(
            maxsize=MAX_REFRESH_TOKENS,
            ttl=timedelta(days=settings.refresh_token_days).total_seconds(),
        )

    def create_access_token(self, user: User) -> AccessToken:
        issued_at = utc_now().replace(microsecond=0)
        expires_at = issued_at + self._access_ttl
        jti = uuid4().hex
        payload: Dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.full_name,
            "role": role_id_for(user.role),
            "jti": jti,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "iss": self._settings.jwt_issuer,
            "aud": self._settings.jwt_audience,
        }
        token = jwt.encode(payload, self._settings.jwt_secret, algorithm=ALGORITHM)
        return AccessToken(value=token, expires_at=expires_at, jti=jti)

    def decode_access_token(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[ALGORITHM],
                audience=self._settings.jwt_audience,
                issuer=self._settings.jwt_issuer,
                options={"require": ["sub", "exp", "iat", "jti"]},
            )
        except ExpiredSignatureError as e:
            raise AuthenticationError("Token has expired.") from e
        except JWTError as e:
            logger.info("Rejected access token", extra={"reason": str(e)})
            raise AuthenticationError("Invalid token.") from e

        try:
            user_id = UUID(payload["sub"])
        except ValueError as e:
            raise AuthenticationError("Invalid token subject.") from e

        return TokenClaims(
            user_id=user_id,
            email=payload.get("email", ""),
            name=payload.get("name", ""),
            role=payload.get("role", ""),
            jti=payload["jti"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    async def issue_refresh_token(self, user_id: UUID) -> str:
        token = secrets.token_urlsafe(48)
        self._refresh_tokens[token] = user_id
        return token

    async def consume_refresh_token(self, refresh_token: str) -> Optional[UUID]:
        user_id = self._refresh_tokens.pop(refresh_token, None)
        if user_id is None:
            logger.debug("Unknown or expired refresh token")
        return user_id

    async def revoke_refresh_token(self, refresh_token: str) -> bool:
        return self._refresh_tokens.pop(refresh_token, None) is not None
