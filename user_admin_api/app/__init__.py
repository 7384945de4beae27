"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging in ``core``, request and
response models in ``schemas``, the in-memory user store in
``services`` and versioned routers under ``api/<version>/``.
"""

from .main import app  # noqa: F401
