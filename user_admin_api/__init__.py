"""
Top-level package for the User Admin API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``user_admin_api.app.main:app``.
"""

__all__ = []
