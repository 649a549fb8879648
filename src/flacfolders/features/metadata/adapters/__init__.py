"""
Summary: Package marker for metadata adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .musicbrainz_lookup import MusicBrainzLookupAdapter

__all__ = ["MusicBrainzLookupAdapter"]
