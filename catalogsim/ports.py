"""Boundaries between the music service and its callers and providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from catalogsim.domain import Album, Artist, Song, Track


class SearchResultType(str, Enum):
    """Kinds of result a search can return."""

    ARTISTS = "artists"
    SONGS = "songs"
    ALBUMS = "albums"


@dataclass
class SearchParameters:
    """What to search for and which page of each kind to return."""

    term: str
    limit: int = 0
    offset: int = 0
    types: list[SearchResultType] = field(default_factory=list)


@dataclass
class SearchResults:
    """Results of a search, grouped by kind."""

    artists: list[Artist] = field(default_factory=list)
    songs: list[Song] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)


@dataclass
class ProviderSearchResults:
    """Results as a data provider delivers them."""

    tracks: list[Track] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)


@runtime_checkable
class MusicProvider(Protocol):
    """A source of catalogue data."""

    def search_songs(self, term: str, limit: int, offset: int) -> list[Song]:
        """Return songs matching the term."""

    def search_albums(self, term: str, limit: int, offset: int) -> list[Album]:
        """Return albums matching the term."""

    def search_artists(self, term: str, limit: int, offset: int) -> list[Artist]:
        """Return artists matching the term."""


@runtime_checkable
class MusicServicePort(Protocol):
    """The search operation offered to callers."""

    def search(self, params: SearchParameters) -> SearchResults:
        """Search for songs, albums and artists."""