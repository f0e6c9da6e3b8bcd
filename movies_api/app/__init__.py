"""
Application package initializer.

The application is split into ``core`` (settings, logging, database
helpers, exceptions), ``models`` (entities), ``schemas`` (API
payloads), ``services`` (store and business logic) and ``api``
(versioned routers).
"""

from .main import app  # noqa: F401
