"""
Top‑level package for the Movies API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``movies_api.app.main:app``.
"""

__all__ = []
