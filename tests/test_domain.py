import json

import pytest

from catalogsim.domain import (
    MAX_TRACKS_PER_PLAYLIST,
    Album,
    AlbumAttributes,
    AlbumReference,
    Artist,
    ArtistAlbums,
    ArtistAttributes,
    ArtistRelationships,
    CatalogSearchResults,
    Curator,
    EditorialNotes,
    Playlist,
    PlaylistFullError,
    Preview,
    Song,
    SongAttributes,
    Station,
    Track,
    to_dict,
)


def _full_playlist():
    playlist = Playlist(id="p1", name="Mix")
    for number in range(MAX_TRACKS_PER_PLAYLIST):
        playlist.add_track(Track(id=str(number), title=f"T{number}"))
    return playlist


def test_playlist_holds_exactly_one_hundred_tracks():
    playlist = Playlist(id="p1", name="Mix")
    for number in range(100):
        playlist.add_track(Track(id=str(number)))
    assert len(playlist.tracks) == 100
    with pytest.raises(PlaylistFullError):
        playlist.add_track(Track(id="100"))
    assert MAX_TRACKS_PER_PLAYLIST == 100


def test_add_track_appends_in_order():
    playlist = Playlist(id="p1", name="Mix")
    playlist.add_track(Track(id="a"))
    playlist.add_track(Track(id="b"))
    assert [t.id for t in playlist.tracks] == ["a", "b"]


def test_add_track_refuses_when_full():
    playlist = _full_playlist()
    with pytest.raises(PlaylistFullError, match="maximum number of tracks"):
        playlist.add_track(Track(id="extra"))
    assert len(playlist.tracks) == MAX_TRACKS_PER_PLAYLIST


def test_remove_track_removes_every_match():
    playlist = Playlist(tracks=[Track(id="x"), Track(id="y"), Track(id="x")])
    assert playlist.remove_track("x") is True
    assert [t.id for t in playlist.tracks] == ["y"]


def test_remove_missing_track_returns_false():
    playlist = Playlist(tracks=[Track(id="y")])
    assert playlist.remove_track("nope") is False
    assert [t.id for t in playlist.tracks] == ["y"]


def test_removal_makes_room_in_full_playlist():
    playlist = _full_playlist()
    assert playlist.remove_track("0")
    playlist.add_track(Track(id="new"))
    assert playlist.tracks[-1].id == "new"


def test_track_omits_empty_optional_fields():
    assert to_dict(Track(id="1", title="Song", artist="Band")) == {
        "id": "1",
        "title": "Song",
        "artist": "Band",
    }


def test_track_includes_set_optional_fields():
    data = to_dict(Track(id="1", duration=180000, description="d", cover_url="c"))
    assert data["duration"] == 180000
    assert data["description"] == "d"
    assert data["coverUrl"] == "c"


def test_playlist_tracks_omitted_when_empty():
    assert "tracks" not in to_dict(Playlist(id="p", name="n"))
    data = to_dict(Playlist(id="p", name="n", tracks=[Track(id="t")]))
    assert data["tracks"] == [{"id": "t", "title": "", "artist": ""}]


def test_album_editorial_notes_always_present():
    data = to_dict(Album(id="2", type="albums", attributes=AlbumAttributes(name="A")))
    assert data["attributes"]["editorialNotes"] == {}
    assert "contentRating" not in data["attributes"]
    notes = to_dict(EditorialNotes(standard="Test Description"))
    assert notes == {"standard": "Test Description"}


def test_song_uses_wire_names():
    song = Song(
        id="1",
        type="songs",
        attributes=SongAttributes(
            name="Test Track",
            artist_name="Test Artist",
            duration_in_millis=180000,
            previews=[Preview(url="p")],
        ),
    )
    attrs = to_dict(song)["attributes"]
    assert attrs["name"] == "Test Track"
    assert attrs["artistName"] == "Test Artist"
    assert attrs["durationInMillis"] == 180000
    assert attrs["previews"] == [{"url": "p"}]
    assert attrs["playParams"] == {"id": "", "kind": ""}
    assert "composerName" not in attrs


def test_artist_relationships_serialised():
    artist = Artist(
        id="3",
        type="artists",
        attributes=ArtistAttributes(name="Test Artist", genre_names=["Pop"]),
        relationships=ArtistRelationships(
            albums=ArtistAlbums(href="h", data=[AlbumReference(id="2", type="albums")])
        ),
    )
    data = to_dict(artist)
    assert data["attributes"]["genreNames"] == ["Pop"]
    assert data["relationships"]["albums"]["data"][0]["id"] == "2"
    assert data["relationships"]["albums"]["href"] == "h"


def test_to_dict_output_is_json_serialisable():
    artist = Artist(id="3")
    assert json.loads(json.dumps(to_dict(artist))) == to_dict(artist)


def test_catalog_results_omit_absent_sections():
    results = CatalogSearchResults(songs=[Song(id="1")], songs_href="h", order=["songs"])
    data = to_dict(results)
    assert list(data["results"]) == ["songs"]
    assert "next" not in data["results"]["songs"]
    assert data["meta"]["results"]["order"] == ["songs"]
    assert data["meta"]["results"]["rawOrder"] == []


def test_catalog_results_next_included_when_set():
    results = CatalogSearchResults(albums=[], albums_href="h", albums_next="n")
    assert to_dict(results)["results"]["albums"] == {"href": "h", "next": "n", "data": []}


def test_other_entities():
    assert to_dict(Station(id="s", name="Radio")) == {"id": "s", "name": "Radio"}
    assert to_dict(Curator(id="c", name="C", image_url="i"))["imageUrl"] == "i"


def test_to_dict_rejects_non_entities():
    with pytest.raises(TypeError):
        to_dict({"id": "1"})