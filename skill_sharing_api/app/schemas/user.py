"""
Pydantic models for user data.

``UserRecord`` is the persisted document.  ``UserView`` is what the
read endpoint returns: role and following are deliberately left out.
The remaining models describe the bodies of the create endpoint.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Roles a user can hold."""

    USER = "USER"
    ADMIN = "ADMIN"


class UserRecord(BaseModel):
    """A user as kept by the user store."""

    id: str = Field(..., min_length=1, example="u1")
    name: str = Field(..., min_length=1, example="Ana")
    email: str = Field(..., min_length=1, example="ana@example.com")
    role: Role = Role.USER
    # Identifiers of the users this user follows, in insertion order.
    following: List[str] = Field(default_factory=list)

    model_config = {
        "from_attributes": True,
    }


class UserView(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., example="u1")
    name: str = Field(..., example="Ana")
    email: str = Field(..., example="ana@example.com")


class UserCreateResult(BaseModel):
    """Outcome of a create request.

    ``created`` is ``False`` when a user with the same id already
    existed; that case is a success, not an error.
    """

    created: bool
    id: str
    name: str


class MessageResponse(BaseModel):
    message: str = Field(..., example="User already exists")


class UserCreatedResponse(MessageResponse):
    id: str = Field(..., example="u1")
    name: str = Field(..., example="Ana")
