"""Where: src/flacfolders/platform/musicbrainz/client.py
What: Facade exposing MusicBrainz WS2 recording and release searches.
Why: Delegate specialised responsibilities to focused collaborators.

This module delegates to smaller helpers:
- ``http_client`` provides rate-limited HTTP access
- ``parsing`` reduces search payloads to a single best hit
- ``rate_limit`` spaces requests by the configured interval
- ``user_agent`` centralises etiquette for outbound requests
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from flacfolders.platform.logging import logger

from .http_client import HTTPClient, HTTPResult, MusicBrainzHTTPClient
from .parsing import MusicBrainzHit, parse_recording_payload, parse_release_payload
from .rate_limit import RateLimiter
from .user_agent import format_user_agent

MB_BASE_URL: Final[str] = "https://musicbrainz.org/ws/2/"
RECORDING_SEARCH_LIMIT: Final[int] = 5
RELEASE_SEARCH_LIMIT: Final[int] = 1


@dataclass(frozen=True, slots=True)
class SearchResponse:
    """A search outcome: a hit, no hit, or a transport/parse error."""

    hit: MusicBrainzHit | None = None
    error: str | None = None


def lucene_phrase(value: str) -> str:
    """Quote ``value`` as a Lucene phrase, escaping quotes and backslashes."""

    escaped = value.strip().replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class MusicBrainzClient:
    """Lightweight MusicBrainz WS2 search client.

    Every request goes through one ``RateLimiter``, so the client is also the
    serialization point for network access.
    """

    def __init__(
        self,
        app_name: str,
        app_version: str,
        contact: str,
        *,
        base_url: str = MB_BASE_URL,
        rate_limit_seconds: float = 1.0,
        http_client: HTTPClient | None = None,
    ) -> None:
        self.user_agent: str = format_user_agent(app_name, app_version, contact)
        self.base_url: str = base_url if base_url.endswith("/") else f"{base_url}/"
        self._http: HTTPClient = http_client or MusicBrainzHTTPClient(
            self.user_agent, RateLimiter(rate_limit_seconds)
        )

    def _search(self, entity: str, query: str, limit: int) -> HTTPResult:
        logger.debug("MusicBrainz %s search: %s", entity, query)
        return self._http.get_json(
            f"{self.base_url}{entity}",
            {"query": query, "fmt": "json", "limit": str(limit)},
        )

    def search_recording(self, artist: str, title: str) -> SearchResponse:
        """Search recordings by artist and title and keep the first result."""

        query = f"artist:{lucene_phrase(artist)} AND recording:{lucene_phrase(title)}"
        result = self._search("recording", query, RECORDING_SEARCH_LIMIT)
        if not result.ok or result.data is None:
            return SearchResponse(error=result.error or "empty response")
        return SearchResponse(hit=parse_recording_payload(result.data))

    def search_release(self, artist: str, album: str) -> SearchResponse:
        """Search releases by artist and album title and keep the first result."""

        query = f"artist:{lucene_phrase(artist)} AND release:{lucene_phrase(album)}"
        result = self._search("release", query, RELEASE_SEARCH_LIMIT)
        if not result.ok or result.data is None:
            return SearchResponse(error=result.error or "empty response")
        return SearchResponse(hit=parse_release_payload(result.data))


__all__ = [
    "MB_BASE_URL",
    "MusicBrainzClient",
    "SearchResponse",
    "lucene_phrase",
]
