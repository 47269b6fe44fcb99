"""Catalogue entities and the JSON shapes they serialise to."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any

MAX_TRACKS_PER_PLAYLIST = 100


class PlaylistFullError(Exception):
    """Raised when a track is added to a playlist that is already full."""


def _json(name: str, *, omitempty: bool = False, **kwargs: Any) -> Any:
    return field(metadata={"json": name, "omitempty": omitempty}, **kwargs)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, int, float, bool, list, tuple, dict)):
        return not value
    return False


def _encode(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    return value


def to_dict(entity: Any) -> dict[str, Any]:
    """Return the JSON-ready dictionary for an entity.

    Keys follow the catalogue's wire names; fields marked as optional are
    left out when they hold an empty value.
    """
    if isinstance(entity, CatalogSearchResults):
        return entity._as_json()
    if not is_dataclass(entity) or isinstance(entity, type):
        raise TypeError(f"cannot serialise {type(entity).__name__}")
    result: dict[str, Any] = {}
    for spec in fields(entity):
        value = getattr(entity, spec.name)
        if spec.metadata.get("omitempty") and _is_empty(value):
            continue
        result[spec.metadata.get("json", spec.name)] = _encode(value)
    return result


@dataclass
class Track:
    """A single music track."""

    id: str = _json("id", default="")
    title: str = _json("title", default="")
    artist: str = _json("artist", default="")
    duration: int = _json("duration", omitempty=True, default=0)  # milliseconds
    description: str = _json("description", omitempty=True, default="")
    cover_url: str = _json("coverUrl", omitempty=True, default="")


@dataclass
class Artwork:
    width: int = _json("width", default=0)
    height: int = _json("height", default=0)
    url: str = _json("url", default="")
    bg_color: str = _json("bgColor", default="")
    text_color1: str = _json("textColor1", default="")
    text_color2: str = _json("textColor2", default="")
    text_color3: str = _json("textColor3", default="")
    text_color4: str = _json("textColor4", default="")


@dataclass
class PlayParams:
    id: str = _json("id", default="")
    kind: str = _json("kind", default="")


@dataclass
class Preview:
    url: str = _json("url", default="")


@dataclass
class EditorialNotes:
    standard: str = _json("standard", omitempty=True, default="")
    short: str = _json("short", omitempty=True, default="")


@dataclass
class SongAttributes:
    album_name: str = _json("albumName", default="")
    genre_names: list[str] = _json("genreNames", default_factory=list)
    track_number: int = _json("trackNumber", default=0)
    release_date: str = _json("releaseDate", default="")
    duration_in_millis: int = _json("durationInMillis", default=0)
    isrc: str = _json("isrc", default="")
    artwork: Artwork = _json("artwork", default_factory=Artwork)
    url: str = _json("url", default="")
    play_params: PlayParams = _json("playParams", default_factory=PlayParams)
    disc_number: int = _json("discNumber", default=0)
    is_apple_digital_master: bool = _json("isAppleDigitalMaster", default=False)
    has_lyrics: bool = _json("hasLyrics", default=False)
    name: str = _json("name", default="")
    previews: list[Preview] = _json("previews", default_factory=list)
    artist_name: str = _json("artistName", default="")
    composer_name: str = _json("composerName", omitempty=True, default="")


@dataclass
class Song:
    """A song in the catalogue."""

    id: str = _json("id", default="")
    type: str = _json("type", default="")
    href: str = _json("href", default="")
    attributes: SongAttributes = _json("attributes", default_factory=SongAttributes)


@dataclass
class AlbumAttributes:
    copyright: str = _json("copyright", default="")
    genre_names: list[str] = _json("genreNames", default_factory=list)
    release_date: str = _json("releaseDate", default="")
    is_mastered_for_itunes: bool = _json("isMasteredForItunes", default=False)
    upc: str = _json("upc", default="")
    artwork: Artwork = _json("artwork", default_factory=Artwork)
    url: str = _json("url", default="")
    play_params: PlayParams = _json("playParams", default_factory=PlayParams)
    record_label: str = _json("recordLabel", default="")
    track_count: int = _json("trackCount", default=0)
    is_compilation: bool = _json("isCompilation", default=False)
    is_single: bool = _json("isSingle", default=False)
    name: str = _json("name", default="")
    artist_name: str = _json("artistName", default="")
    editorial_notes: EditorialNotes = _json(
        "editorialNotes", omitempty=True, default_factory=EditorialNotes
    )
    is_complete: bool = _json("isComplete", default=False)
    content_rating: str = _json("contentRating", omitempty=True, default="")


@dataclass
class Album:
    """An album in the catalogue."""

    id: str = _json("id", default="")
    type: str = _json("type", default="")
    href: str = _json("href", default="")
    attributes: AlbumAttributes = _json("attributes", default_factory=AlbumAttributes)


@dataclass
class ArtistAttributes:
    name: str = _json("name", default="")
    genre_names: list[str] = _json("genreNames", default_factory=list)
    artwork: Artwork = _json("artwork", default_factory=Artwork)
    url: str = _json("url", default="")


@dataclass
class AlbumReference:
    """A pointer from an artist to one of its albums."""

    id: str = _json("id", default="")
    type: str = _json("type", default="")
    href: str = _json("href", default="")


@dataclass
class ArtistAlbums:
    href: str = _json("href", default="")
    data: list[AlbumReference] = _json("data", default_factory=list)


@dataclass
class ArtistRelationships:
    albums: ArtistAlbums = _json("albums", default_factory=ArtistAlbums)


@dataclass
class Artist:
    """An artist in the catalogue."""

    id: str = _json("id", default="")
    type: str = _json("type", default="")
    href: str = _json("href", default="")
    attributes: ArtistAttributes = _json("attributes", default_factory=ArtistAttributes)
    relationships: ArtistRelationships = _json(
        "relationships", omitempty=True, default_factory=ArtistRelationships
    )


@dataclass
class CatalogSearchResults:
    """Search results in the catalogue's response layout.

    A section left as ``None`` is absent from the serialised form.
    """

    artists: list[Artist] | None = None
    artists_href: str = ""
    songs: list[Song] | None = None
    songs_href: str = ""
    songs_next: str = ""
    albums: list[Album] | None = None
    albums_href: str = ""
    albums_next: str = ""
    order: list[str] = field(default_factory=list)
    raw_order: list[str] = field(default_factory=list)

    @staticmethod
    def _section(href: str, next_href: str | None, data: list[Any]) -> dict[str, Any]:
        section: dict[str, Any] = {"href": href}
        if next_href:
            section["next"] = next_href
        section["data"] = [to_dict(item) for item in data]
        return section

    def _as_json(self) -> dict[str, Any]:
        results: dict[str, Any] = {}
        if self.artists is not None:
            results["artists"] = self._section(self.artists_href, None, self.artists)
        if self.songs is not None:
            results["songs"] = self._section(self.songs_href, self.songs_next, self.songs)
        if self.albums is not None:
            results["albums"] = self._section(self.albums_href, self.albums_next, self.albums)
        return {
            "results": results,
            "meta": {
                "results": {"order": list(self.order), "rawOrder": list(self.raw_order)}
            },
        }


@dataclass
class Playlist:
    """A named, bounded list of tracks."""

    id: str = _json("id", default="")
    name: str = _json("name", default="")
    description: str = _json("description", omitempty=True, default="")
    cover_url: str = _json("coverUrl", omitempty=True, default="")
    tracks: list[Track] = _json("tracks", omitempty=True, default_factory=list)

    def add_track(self, track: Track) -> None:
        """Append a track, refusing once the playlist holds the maximum."""
        if len(self.tracks) >= MAX_TRACKS_PER_PLAYLIST:
            raise PlaylistFullError("playlist has reached the maximum number of tracks")
        self.tracks.append(track)

    def remove_track(self, track_id: str) -> bool:
        """Remove every track with the given id; return whether any went."""
        before = len(self.tracks)
        self.tracks = [track for track in self.tracks if track.id != track_id]
        return len(self.tracks) < before


@dataclass
class Station:
    """A radio station."""

    id: str = _json("id", default="")
    name: str = _json("name", default="")
    description: str = _json("description", omitempty=True, default="")
    cover_url: str = _json("coverUrl", omitempty=True, default="")


@dataclass
class Activity:
    """A music activity."""

    id: str = _json("id", default="")
    name: str = _json("name", default="")
    description: str = _json("description", omitempty=True, default="")
    cover_url: str = _json("coverUrl", omitempty=True, default="")


@dataclass
class Curator:
    """A content curator."""

    id: str = _json("id", default="")
    name: str = _json("name", default="")
    description: str = _json("description", omitempty=True, default="")
    image_url: str = _json("imageUrl", omitempty=True, default="")