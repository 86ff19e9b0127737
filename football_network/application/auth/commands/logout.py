"""Logout command: revoke a refresh token."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from football_network.application.common.handler import RequestHandler
from football_network.application.common.requests import Command
from football_network.application.common.result import Result
from football_network.domain.auth.ports import ITokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogoutCommand(Command):
    """
    Command: Revoke a refresh token.

    Logging out with an unknown or already revoked token is not an
    error; the result value is then False.
    """

    refresh_token: Optional[str] = field(default=None, repr=False)


class LogoutCommandHandler(RequestHandler[LogoutCommand, bool]):
    operation = "logging out"

    def __init__(self, tokens: ITokenService):
        self._tokens = tokens

    async def _execute(self, command: LogoutCommand) -> Result[bool]:
        logger.info("Processing logout request")
        revoked = await self._tokens.revoke_refresh_token(command.refresh_token or "")
        if revoked:
            logger.info("User logged out")
        else:
            logger.warning("Logout with invalid or already revoked token")
        return Result.success(revoked)
