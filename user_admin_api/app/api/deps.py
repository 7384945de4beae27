"""
Shared FastAPI dependencies.

The user store is created once by ``create_app`` and kept on
``app.state``; endpoints obtain it through ``get_user_service``.
"""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service
