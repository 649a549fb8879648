"""Where: src/flacfolders/platform/musicbrainz/user_agent.py
What: Build MusicBrainz-compliant User-Agent strings.
Why: MusicBrainz asks every client to identify itself as ``App/Version (contact)``.
"""

from __future__ import annotations


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


__all__ = ["format_user_agent"]
