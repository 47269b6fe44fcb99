"""The music search service."""

from __future__ import annotations

from typing import Sequence, TypeVar

from catalogsim.ports import MusicProvider, SearchParameters, SearchResults, SearchResultType

_T = TypeVar("_T")


class SearchError(Exception):
    """Raised when the provider fails during a search."""


def _capped(items: Sequence[_T], limit: int) -> list[_T]:
    if len(items) > limit:
        if limit < 0:
            raise ValueError("limit must not be negative")
        return list(items[:limit])
    return list(items)


class MusicService:
    """Runs searches against a music provider."""

    def __init__(self, music_provider: MusicProvider) -> None:
        self.music_provider = music_provider

    def search(self, params: SearchParameters) -> SearchResults:
        """Search each requested kind in turn, capping every list at the limit."""
        results = SearchResults()
        provider = self.music_provider
        for search_type in params.types:
            if search_type == SearchResultType.SONGS:
                try:
                    songs = provider.search_songs(params.term, params.limit, params.offset)
                except Exception as exc:
                    raise SearchError(f"error searching songs: {exc}") from exc
                results.songs = _capped(songs, params.limit)
            elif search_type == SearchResultType.ALBUMS:
                try:
                    albums = provider.search_albums(params.term, params.limit, params.offset)
                except Exception as exc:
                    raise SearchError(f"error searching albums: {exc}") from exc
                results.albums = _capped(albums, params.limit)
            elif search_type == SearchResultType.ARTISTS:
                try:
                    artists = provider.search_artists(params.term, params.limit, params.offset)
                except Exception as exc:
                    raise SearchError(f"error searching artists: {exc}") from exc
                results.artists = _capped(artists, params.limit)
        return results