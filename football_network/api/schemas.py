"""Request bodies of the REST API."""

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from football_network.domain.club.enums import LeagueType
from football_network.domain.connection.enums import ConnectionStrength, ConnectionType
from football_network.domain.user.enums import UserRole


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""
    session_key: Optional[str] = None


class RefreshRequest(BaseModel):
    refresh_token: str = ""


class LogoutRequest(BaseModel):
    refresh_token: Optional[str] = None


class ClubRequest(BaseModel):
    """Club attributes for create and update.

    Field rules are enforced by the command validators so that all
    messages come back in one response.
    """

    name: str = ""
    short_name: str = ""
    league: Optional[LeagueType] = None
    city: str = ""
    country: Optional[str] = None
    region: Optional[str] = None
    slug: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    founded: Optional[int] = None
    stadium: Optional[str] = None
    website: Optional[str] = None
    colors: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    nickname: Optional[str] = None
    motto: Optional[str] = None


class ClubStatusRequest(BaseModel):
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_featured: Optional[bool] = None


class CreateConnectionRequest(BaseModel):
    source_club_id: UUID
    target_club_id: UUID
    type: Optional[ConnectionType] = None
    strength: Optional[ConnectionStrength] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    notes: Optional[str] = None


class UpdateConnectionRequest(BaseModel):
    type: Optional[ConnectionType] = None
    strength: Optional[ConnectionStrength] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    reliability_score: Optional[float] = None


class CreateUserRequest(BaseModel):
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    password: str = ""
    role: UserRole = UserRole.USER


class UpdateUserRoleRequest(BaseModel):
    role: UserRole


class SetUserActiveRequest(BaseModel):
    is_active: bool
