"""
User endpoints for API v1.

Provide listing, lookup, creation, update and deletion of users.  All
responses use the ``ApiResponse`` envelope.  Validation here is limited
to rejecting a missing or blank ``name`` or ``email``; there is no
duplicate-email check and no role validation.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from user_admin_api.app.api.deps import get_user_service
from user_admin_api.app.schemas.response import ApiResponse
from user_admin_api.app.schemas.user import User, UserPayload
from user_admin_api.app.services.user_service import UserService


logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User not found with id: {user_id}",
    )


def _validate_payload(payload: UserPayload) -> None:
    """Reject a blank name or email.  Name is checked first."""
    if payload.name is None or not payload.name.strip():
        logger.warning("Rejected user payload: missing name")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User name is required")
    if payload.email is None or not payload.email.strip():
        logger.warning("Rejected user payload: missing email")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User email is required")


@router.get("", response_model=ApiResponse[List[User]])
async def list_users(service: UserService = Depends(get_user_service)) -> ApiResponse[List[User]]:
    """Return every user in creation order."""
    return ApiResponse.ok("Users retrieved successfully", service.list_users())


@router.get("/{user_id}", response_model=ApiResponse[User])
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> ApiResponse[User]:
    user = service.get_user(user_id)
    if user is None:
        raise _not_found(user_id)
    return ApiResponse.ok("User found", user)


@router.post("", response_model=ApiResponse[User], status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Create a user and return it with its newly assigned id."""
    _validate_payload(payload)
    return ApiResponse.ok("User created successfully", service.create_user(payload))


@router.put("/{user_id}", response_model=ApiResponse[User])
async def update_user(
    user_id: int,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Replace the name, email and role of an existing user.

    Validation runs before the lookup, so a blank name on an unknown id
    yields 400 rather than 404.
    """
    _validate_payload(payload)
    user = service.update_user(user_id, payload)
    if user is None:
        raise _not_found(user_id)
    return ApiResponse.ok("User updated successfully", user)


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> ApiResponse[None]:
    if not service.delete_user(user_id):
        raise _not_found(user_id)
    return ApiResponse.ok("User deleted successfully")
