# taskhub/schemas/auth.py
"""
Pydantic schemas for authentication and user profile endpoints.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from taskhub.domain.records import UserRecord


class RegisterIn(BaseModel):
    """
    Request model for account registration.
    """
    name: str = Field(min_length=1, max_length=128)  # Display name
    email: str = Field(min_length=3, max_length=256)  # Login email (stored lower-cased)
    password: str = Field(min_length=6, max_length=128)  # Plain text, hashed server-side


class LoginIn(BaseModel):
    """
    Request model for user login endpoint.
    """
    email: str
    password: str


class UserOut(BaseModel):
    """
    User information returned by the API. Never includes the password hash.
    """
    id: str
    name: str
    email: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserOut":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            createdAt=user.created_at,
            updatedAt=user.updated_at,
        )
