"""
Uniform response envelope.

Every endpoint answers with ``{"success", "message", "data"}``.  Error
responses drop the ``data`` key; see ``ApiResponse.error_content``.
"""

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, message: str, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, message=message)

    @staticmethod
    def error_content(message: str) -> Dict[str, Any]:
        """JSON body of an error envelope."""
        return ApiResponse.error(message).model_dump(exclude={"data"})
