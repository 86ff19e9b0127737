"""Navigation endpoint: runs the route guards for a frontend path."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from football_network.api.dependencies import get_container, get_current_user
from football_network.api.responses import envelope
from football_network.application.authorization.models import AuthUser
from football_network.infrastructure.container import Container

router = APIRouter(prefix="/api/v1/navigation", tags=["navigation"])


@router.get("/resolve")
async def resolve(
    path: str = Query(..., min_length=1),
    session_key: Optional[str] = None,
    user: Optional[AuthUser] = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    result = container.navigation.resolve(path, user, session_key=session_key)
    return envelope(
        {
            "requested_path": result.requested_path,
            "target_path": result.target_path,
            "allowed": result.allowed,
            "reason": result.decision.reason,
            "params": result.params,
            "title": result.title,
        }
    )
