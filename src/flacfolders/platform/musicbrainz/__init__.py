"""MusicBrainz infrastructure package.

This package provides minimal client utilities to interact with the
MusicBrainz Web Service (WS2) search endpoints for recordings and releases.
"""

from .client import MusicBrainzClient, SearchResponse
from .parsing import MusicBrainzHit
from .rate_limit import RateLimiter
from .user_agent import format_user_agent

__all__ = [
    "MusicBrainzClient",
    "MusicBrainzHit",
    "RateLimiter",
    "SearchResponse",
    "format_user_agent",
]
