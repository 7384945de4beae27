"""
Pydantic schemas for sign-up and profile payloads.

``SignUpRequest`` validates registration data at the API boundary
before it reaches any domain logic.  ``UserResponse`` is the public
view of a ``UserProfile``; it never carries the password and renders
role and status by their symbolic names.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, validate_email
from pydantic_core import PydanticCustomError


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


def _require(value: Optional[str], message: str) -> str:
    if value is None or not value.strip():
        raise ValueError(message)
    return value


class SignUpRequest(BaseModel):
    """Schema for registering an account."""

    email: str = Field(..., examples=["jane@example.com"])
    username: str = Field(..., examples=["jane"])
    password: str = Field(..., examples=["s3cret!"])
    first_name: str = Field(..., examples=["Jane"])
    last_name: str = Field(..., examples=["Smith"])

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        v = _require(v, "Email is required")
        try:
            validate_email(v)
        except PydanticCustomError:
            raise ValueError("Email must be valid") from None
        return v

    @field_validator("username")
    @classmethod
    def check_username(cls, v: str) -> str:
        v = _require(v, "Username is required")
        if not 3 <= len(v) <= 50:
            raise ValueError("Username must be between 3 and 50 characters")
        return v

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        v = _require(v, "Password is required")
        if not 6 <= len(v) <= 100:
            raise ValueError("Password must be between 6 and 100 characters")
        return v

    @field_validator("first_name")
    @classmethod
    def check_first_name(cls, v: str) -> str:
        v = _require(v, "First name is required")
        if len(v) > 100:
            raise ValueError("First name must be at most 100 characters")
        return v

    @field_validator("last_name")
    @classmethod
    def check_last_name(cls, v: str) -> str:
        v = _require(v, "Last name is required")
        if len(v) > 100:
            raise ValueError("Last name must be at most 100 characters")
        return v


@dataclass
class UserProfile:
    """Account record behind ``UserResponse``."""

    id: int
    email: str
    username: str
    first_name: str
    last_name: str
    password: Optional[str] = None
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.now)


class UserResponse(BaseModel):
    """Public profile view.  Never includes the password."""

    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    role: str
    status: str
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserResponse":
        return cls(
            id=str(profile.id),
            email=profile.email,
            username=profile.username,
            first_name=profile.first_name,
            last_name=profile.last_name,
            role=profile.role.name,
            status=profile.status.name,
            created_at=profile.created_at,
        )
