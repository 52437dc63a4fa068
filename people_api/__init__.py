"""
Top-level package for the People API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``people_api.app.main:app``.
"""

__all__ = []
