"""
Health endpoint for API v1.

A liveness check for load balancers and the frontend.  It does not
touch the user store.
"""

from fastapi import APIRouter

from user_admin_api.app.schemas.response import ApiResponse


router = APIRouter()


@router.get("", response_model=ApiResponse[None])
async def health() -> ApiResponse[None]:
    return ApiResponse.ok("Application is running!")
