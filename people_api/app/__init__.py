"""
Application package initializer.

The package is split into layers: ``models`` holds the domain record,
``core`` the store, settings, logging and error handling, ``services``
the business rules and ``api/<version>/`` the HTTP routers.  Schemas
for request and response bodies live in ``schemas``.
"""

from .main import app  # noqa: F401
