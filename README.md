# catalogsim

`catalogsim` simulates the search endpoint of a music catalog API as a
WSGI application. It answers `/v1/catalog/us/search` with a JSON document
shaped like the catalog's own: result groups for artists, songs and
albums, each with `href`, `next` and `data`, and a `meta.results.order`
list naming the groups in the order they were requested.

The data comes from a music provider that you supply, so the simulator
can sit in front of any source of songs, albums and artists.

It has no dependencies outside the standard library.

## Modules

- `catalogsim.domain` — the catalog entities as dataclasses: `Song`,
  `Album`, `Artist` with their `SongAttributes`, `AlbumAttributes`,
  `ArtistAttributes`, `ArtistRelationships`, `ArtistAlbums` and
  `AlbumReference`; `Artwork`, `PlayParams`, `Preview`, `EditorialNotes`;
  `Track`, `Playlist`, `Station`, `Activity`, `Curator`; and
  `CatalogSearchResults`. `to_dict(entity)` turns any of them into the
  JSON-ready dictionary with the catalog's camel-case key names, leaving
  out optional fields that are empty.
  `Playlist.add_track` raises `PlaylistFullError` once the playlist holds
  `MAX_TRACKS_PER_PLAYLIST` (100) tracks; `Playlist.remove_track(track_id)`
  removes every track with that id and returns whether any was removed.
- `catalogsim.ports` — `SearchResultType` (`ARTISTS`, `SONGS`, `ALBUMS`),
  `SearchParameters`, `SearchResults`, `ProviderSearchResults`, and two
  protocols: `MusicProvider` (`search_songs`, `search_albums`,
  `search_artists`, each taking `term, limit, offset`) and
  `MusicServicePort` (`search(params)`).
- `catalogsim.services` — `MusicService(music_provider)`. Its
  `search(params)` asks the provider for each type in `params.types`, in
  that order, and trims each list to `params.limit`. An exception from the
  provider is re-raised as `SearchError`, e.g.
  `"error searching songs: <reason>"`.
- `catalogsim.web.search_handler` — `SearchHandler(music_service)`, a
  WSGI application for the search endpoint, and `Response`, the status,
  headers and body it produces. `SearchHandler.search(query_string)`
  returns the `Response` directly, without a server.
- `catalogsim.web.routes` — `router(search_handler)`,
  `setup_routes(music_service)`, `cors_middleware(app)` and
  `logging_middleware(app)`.

## Query parameters

| Parameter | Meaning | Default |
|-----------|---------|---------|
| `term`    | search term; required, a missing or empty term is a 400 | — |
| `limit`   | results per type; below 1 becomes 5, above 25 becomes 25; not an integer is a 400 | 5 |
| `offset`  | results to skip; negative becomes 0; not an integer is a 400 | 0 |
| `types`   | comma-separated `artists`, `songs`, `albums`; unknown names are ignored | all three |

Each requested group carries
`href` = `/v1/catalog/us/search?term=<term>&types=<type>&limit=<limit>&offset=<offset>`
and `next` with the offset advanced by the limit. The term is placed into
these links as given, without URL encoding.

Error responses are plain text ending in a newline:
`term parameter is required`, `invalid limit parameter`,
`invalid offset parameter` (all 400), and
`error performing search: <reason>` (500) when the service raises.
Successful responses are `application/json`, with `<`, `>` and `&`
escaped as `\u003c`, `\u003e` and `\u0026`.

## Routing and middleware

- `router(search_handler)` sends the search path to the handler for any
  method and answers every other path with `404 page not found`.
- `setup_routes(music_service)` builds its own `SearchHandler`, serves the
  search path on `GET` only (other methods get 405) and answers other
  paths with 404.
- `cors_middleware(app)` adds `Access-Control-Allow-Origin: *` and the
  allowed methods and headers to every response, and answers `OPTIONS`
  requests itself with 200.
- `logging_middleware(app)` logs `METHOD PATH -> STATUS` at INFO level on
  the `catalogsim.web.routes` logger.

## Example

```python
from wsgiref.simple_server import make_server

from catalogsim.domain import Artist, ArtistAttributes
from catalogsim.ports import MusicProvider
from catalogsim.services import MusicService
from catalogsim.web.routes import cors_middleware, setup_routes


class InMemoryProvider(MusicProvider):
    def search_songs(self, term, limit, offset):
        return []

    def search_albums(self, term, limit, offset):
        return []

    def search_artists(self, term, limit, offset):
        return [
            Artist(
                id="3",
                type="artists",
                href="/v1/catalog/us/artists/3",
                attributes=ArtistAttributes(name="Test Artist", genre_names=["Pop"]),
            )
        ]


app = cors_middleware(setup_routes(MusicService(InMemoryProvider())))

with make_server("", 8080, app) as server:
    server.serve_forever()
```

Requesting `/v1/catalog/us/search?term=test&types=artists` returns the
artist under `results.artists.data`, with `meta.results.order` equal to
`["artists"]`.

Without a server:

```python
from catalogsim.services import MusicService
from catalogsim.web.search_handler import SearchHandler

handler = SearchHandler(MusicService(InMemoryProvider()))
response = handler.search("term=test&types=artists&limit=10")
print(response.status, response.header("Content-Type"))
print(response.body.decode())
```

## What it does not do

- It ships no music provider: there is no built-in source of songs,
  albums or artists, and no connection to any online music service. You
  supply an object with `search_songs`, `search_albums` and
  `search_artists`.
- It has no command and does not start a server by itself; serve the
  application from `setup_routes` or `router` with any WSGI server, as in
  the example above.
- Playlists, stations, activities and curators exist only as entities in
  `catalogsim.domain`; no endpoint serves them and nothing stores them.