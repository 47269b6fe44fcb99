"""Music catalog search API simulator: entities, search service and WSGI front end over a supplied provider."""

__version__ = "0.1.0"