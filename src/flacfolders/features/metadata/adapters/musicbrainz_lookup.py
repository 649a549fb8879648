"""Summary: MusicBrainz lookup adapter bridging the platform client.
Why: Provide a MetadataLookupPort implementation without leaking WS2 types into use cases."""

from __future__ import annotations

from flacfolders.platform.musicbrainz.client import MusicBrainzClient, SearchResponse

from ..usecases.ports import LookupMatch, LookupResult, LookupStatus, MetadataLookupPort


def _to_lookup_result(response: SearchResponse, *, with_track: bool) -> LookupResult:
    if response.error is not None:
        return LookupResult.failed(response.error)
    hit = response.hit
    if hit is None:
        return LookupResult.no_match()
    match = LookupMatch(
        artist=hit.artist,
        album=hit.album,
        year=hit.year,
        track_number=hit.track_number if with_track else None,
    )
    if match.is_empty:
        return LookupResult.no_match()
    return LookupResult(status=LookupStatus.MATCH, match=match)


class MusicBrainzLookupAdapter(MetadataLookupPort):
    """Delegate lookups to the MusicBrainz platform client."""

    def __init__(self, client: MusicBrainzClient) -> None:
        self._client: MusicBrainzClient = client

    def search_by_recording(self, artist: str, title: str) -> LookupResult:
        return _to_lookup_result(self._client.search_recording(artist, title), with_track=True)

    def search_by_release(self, artist: str, album: str) -> LookupResult:
        return _to_lookup_result(self._client.search_release(artist, album), with_track=False)


__all__ = ["MusicBrainzLookupAdapter"]
