"""
Pydantic models for user data.

``User`` is the record held by the user store and returned by the
API.  ``UserPayload`` is the request body accepted by the create and
update endpoints.  Its ``name`` and ``email`` fields are optional at
the schema level so that the endpoints can report missing or blank
values with their own field-specific messages.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    # Free-form tag, e.g. "USER" or "ADMIN".  Not validated.
    role: Optional[str] = Field(None, examples=["USER"])


class User(UserBase):
    """A stored user.  ``id`` is assigned by the store on creation."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class UserPayload(BaseModel):
    """Body of ``POST /users`` and ``PUT /users/{id}``.

    Updates replace name, email and role wholesale.  An omitted role is
    stored as null, including on update.
    """

    name: Optional[str] = Field(None, examples=["John Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])
    role: Optional[str] = Field(None, examples=["USER"])
