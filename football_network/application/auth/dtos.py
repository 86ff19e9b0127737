"""Authentication results."""

from dataclasses import dataclass
from datetime import datetime

from football_network.application.authorization.models import AuthUser
from football_network.application.users.dtos import UserDto


@dataclass(frozen=True)
class AuthenticationResultDto:
    """Tokens issued on login or refresh.

    Attributes:
        redirect_to: Where the frontend should navigate next (the URL
            stored when the user was sent to the login page, or the
            dashboard)
    """

    token: str
    refresh_token: str
    expires_at: datetime
    user: UserDto
    token_type: str = "Bearer"
    redirect_to: str = "/dashboard"


@dataclass(frozen=True)
class TokenValidationDto:
    principal: AuthUser
    expires_at: datetime
