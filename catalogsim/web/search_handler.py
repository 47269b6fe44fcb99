"""HTTP handler for catalogue search requests."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Callable, Iterable, Sequence
from urllib.parse import parse_qs

from catalogsim.domain import to_dict
from catalogsim.ports import MusicServicePort, SearchParameters, SearchResults, SearchResultType

SEARCH_PATH = "/v1/catalog/us/search"
DEFAULT_LIMIT = 5
MAX_LIMIT = 25

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TYPE_NAMES = {kind.value: kind for kind in SearchResultType}
_ALL_TYPES = (SearchResultType.ARTISTS, SearchResultType.SONGS, SearchResultType.ALBUMS)

# Characters escaped inside JSON strings so the body is safe to embed in HTML.
_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


class _InvalidParameter(ValueError):
    """A query parameter that could not be read as an integer."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


@dataclass
class Response:
    """A complete HTTP response: status code, headers and body bytes."""

    status: int
    body: bytes = b""
    headers: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def error(cls, message: str, status: int) -> Response:
        """A plain-text error response."""
        return cls(
            status=status,
            body=(message + "\n").encode("utf-8"),
            headers=[
                ("Content-Type", "text/plain; charset=utf-8"),
                ("X-Content-Type-Options", "nosniff"),
            ],
        )

    @classmethod
    def from_json(cls, payload: Any, status: int = HTTPStatus.OK) -> Response:
        """A JSON response; the body ends with a newline."""
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        for char, escape in _JSON_ESCAPES:
            text = text.replace(char, escape)
        return cls(
            status=int(status),
            body=(text + "\n").encode("utf-8"),
            headers=[("Content-Type", "application/json")],
        )

    @property
    def status_line(self) -> str:
        """The status as a WSGI status string, e.g. ``"200 OK"``."""
        try:
            phrase = HTTPStatus(self.status).phrase
        except ValueError:
            phrase = ""
        return f"{self.status} {phrase}".rstrip()

    def header(self, name: str) -> str | None:
        """Return the first header with the given name, ignoring case."""
        wanted = name.lower()
        return next((value for key, value in self.headers if key.lower() == wanted), None)

    def send(self, start_response: Callable[..., Any]) -> Iterable[bytes]:
        """Deliver this response through a WSGI ``start_response``."""
        start_response(self.status_line, list(self.headers))
        return [self.body]


def _first(query: dict[str, list[str]], key: str) -> str:
    values = query.get(key)
    return values[0] if values else ""


def _parse_int(raw: str, name: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise _InvalidParameter(name)
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise _InvalidParameter(name)
    return value


def _parse_limit(raw: str) -> int:
    if not raw:
        return DEFAULT_LIMIT
    limit = _parse_int(raw, "limit")
    if limit < 1:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def _parse_offset(raw: str) -> int:
    if not raw:
        return 0
    return max(_parse_int(raw, "offset"), 0)


def _parse_types(raw: str) -> list[SearchResultType]:
    if not raw:
        return list(_ALL_TYPES)
    return [_TYPE_NAMES[name] for name in (part.strip() for part in raw.split(",")) if name in _TYPE_NAMES]


def _section(
    kind: SearchResultType, term: str, limit: int, offset: int, data: Sequence[Any] | None
) -> dict[str, Any]:
    base = f"{SEARCH_PATH}?term={term}&types={kind.value}&limit={limit}"
    return {
        "href": f"{base}&offset={offset}",
        "next": f"{base}&offset={offset + limit}",
        "data": None if data is None else [to_dict(item) for item in data],
    }


class SearchHandler:
    """Answers catalogue search requests using a music service."""

    def __init__(self, music_service: MusicServicePort) -> None:
        self.music_service = music_service

    def search(self, query_string: str) -> Response:
        """Handle a search given the raw query string of the request."""
        query = parse_qs(query_string, keep_blank_values=True)

        term = _first(query, "term")
        if not term:
            return Response.error("term parameter is required", HTTPStatus.BAD_REQUEST)

        try:
            limit = _parse_limit(_first(query, "limit"))
            offset = _parse_offset(_first(query, "offset"))
        except _InvalidParameter as exc:
            return Response.error(f"invalid {exc.name} parameter", HTTPStatus.BAD_REQUEST)

        types = _parse_types(_first(query, "types"))
        params = SearchParameters(term=term, limit=limit, offset=offset, types=types)

        try:
            results = self.music_service.search(params)
        except Exception as exc:
            return Response.error(
                f"error performing search: {exc}", HTTPStatus.INTERNAL_SERVER_ERROR
            )

        return Response.from_json(self._payload(results, params))

    @staticmethod
    def _payload(results: SearchResults, params: SearchParameters) -> dict[str, Any]:
        data_by_type = {
            SearchResultType.ARTISTS: results.artists,
            SearchResultType.SONGS: results.songs,
            SearchResultType.ALBUMS: results.albums,
        }
        sections: dict[str, Any] = {}
        order: list[str] = []
        for kind in params.types:
            sections[kind.value] = _section(
                kind, params.term, params.limit, params.offset, data_by_type[kind]
            )
            order.append(kind.value)
        return {
            "results": dict(sorted(sections.items())),
            "meta": {"results": {"order": order}},
        }

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        """Serve the search as a WSGI application."""
        return self.search(environ.get("QUERY_STRING", "")).send(start_response)