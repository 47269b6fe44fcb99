"""Routing and middleware for the catalogue's WSGI application."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Callable, Iterable

from catalogsim.ports import MusicServicePort
from catalogsim.web.search_handler import SEARCH_PATH, Response, SearchHandler

WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]

logger = logging.getLogger(__name__)

_CORS_HEADERS = (
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS"),
    ("Access-Control-Allow-Headers", "Content-Type, Authorization"),
)


def _not_found() -> Response:
    return Response.error("404 page not found", HTTPStatus.NOT_FOUND)


def router(search_handler: SearchHandler) -> WSGIApp:
    """Route the search path to the handler; anything else is not found."""

    def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        if environ.get("PATH_INFO", "") == SEARCH_PATH:
            return search_handler(environ, start_response)
        return _not_found().send(start_response)

    return app


def logging_middleware(app: WSGIApp) -> WSGIApp:
    """Log each request's method, path and response status."""

    def wrapped(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "")

        def logged_start_response(status: str, headers: list, *args: Any) -> Any:
            logger.info("%s %s -> %s", method, path, status)
            return start_response(status, headers, *args)

        return app(environ, logged_start_response)

    return wrapped


def cors_middleware(app: WSGIApp) -> WSGIApp:
    """Add CORS headers to every response and answer preflight requests."""

    def wrapped(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        if environ.get("REQUEST_METHOD") == "OPTIONS":
            start_response(Response(HTTPStatus.OK).status_line, list(_CORS_HEADERS))
            return [b""]

        def cors_start_response(status: str, headers: list, *args: Any) -> Any:
            present = {name.lower() for name, _ in headers}
            merged = [pair for pair in _CORS_HEADERS if pair[0].lower() not in present]
            return start_response(status, merged + list(headers), *args)

        return app(environ, cors_start_response)

    return wrapped


def setup_routes(music_service: MusicServicePort) -> WSGIApp:
    """Build an application that serves search on GET only."""
    handler = SearchHandler(music_service)

    def app(environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        if environ.get("PATH_INFO", "") != SEARCH_PATH:
            return _not_found().send(start_response)
        if environ.get("REQUEST_METHOD", "GET") != "GET":
            return Response(HTTPStatus.METHOD_NOT_ALLOWED).send(start_response)
        return handler(environ, start_response)

    return app