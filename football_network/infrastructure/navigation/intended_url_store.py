"""Intended URL store backed by a cachetools TTLCache."""

import logging
from typing import Optional

from cachetools import TTLCache

from football_network.application.navigation.service import IIntendedUrlStore

logger = logging.getLogger(__name__)

INTENDED_URL_TTL_SECONDS = 30 * 60
MAX_SESSIONS = 10_000


class TTLIntendedUrlStore(IIntendedUrlStore):
    """Remembers, per browser session, the page a visitor wanted before
    being sent to the login page. Entries expire after 30 minutes."""

    def __init__(self, ttl_seconds: int = INTENDED_URL_TTL_SECONDS, maxsize: int = MAX_SESSIONS):
        self._urls: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds)

    def remember(self, session_key: str, url: str) -> None:
        self._urls[session_key] = url
        logger.debug("Intended URL stored", extra={"session_key": session_key, "url": url})

    def pop(self, session_key: str) -> Optional[str]:
        return self._urls.pop(session_key, None)
