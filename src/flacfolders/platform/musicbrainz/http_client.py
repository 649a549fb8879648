"""Where: src/flacfolders/platform/musicbrainz/http_client.py
What: HTTP adapter for MusicBrainz WS2 JSON requests.
Why: Decouple network concerns from payload parsing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, cast

import requests

from flacfolders.platform.logging import logger

from .rate_limit import RateLimiter


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response payload relevant to the MusicBrainz client."""

    status: int
    headers: dict[str, str]
    data: dict[str, Any] | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch JSON payloads."""

    def get_json(self, url: str, params: dict[str, str]) -> HTTPResult:
        ...


class MusicBrainzHTTPClient:
    """Perform rate-limited GET requests; every failure becomes an ``HTTPResult``.

    Failed requests are not retried.
    """

    TIMEOUT: tuple[float, float] = (5.0, 15.0)

    def __init__(self, user_agent: str, rate_limiter: RateLimiter) -> None:
        self._user_agent: str = user_agent
        self._rate_limiter: RateLimiter = rate_limiter

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def get_json(self, url: str, params: dict[str, str]) -> HTTPResult:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

        _ = self._rate_limiter.respect()
        try:
            response = requests.get(url, params=params, headers=headers, timeout=self.TIMEOUT)
        except requests.RequestException as exc:
            logger.warning("MusicBrainz request error: %s", exc)
            return HTTPResult(status=0, headers={}, data=None, error=str(exc))

        status = int(response.status_code)
        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        response_headers = {str(key): str(value) for key, value in header_items}

        if not 200 <= status < 300:
            logger.warning("MusicBrainz HTTP error: status=%s", status)
            return HTTPResult(
                status=status,
                headers=response_headers,
                data=None,
                error=f"HTTP {status}",
            )

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("MusicBrainz JSON parse error: %s", exc)
            return HTTPResult(
                status=status,
                headers=response_headers,
                data=None,
                error=f"invalid JSON: {exc}",
            )

        if not isinstance(data, dict):
            logger.warning("MusicBrainz returned unexpected payload type: %s", type(data).__name__)
            return HTTPResult(
                status=status,
                headers=response_headers,
                data=None,
                error="unexpected payload",
            )

        return HTTPResult(status=status, headers=response_headers, data=cast(dict[str, Any], data))


__all__ = [
    "HTTPClient",
    "HTTPResult",
    "MusicBrainzHTTPClient",
]
