"""WSGI search handler, routing and middleware for the catalog search API."""