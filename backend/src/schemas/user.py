"""Pydantic schemas for user profile endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserPublic(BaseModel):
    """
    Public view of a user.

    Deliberately has no password hash field, so building it from a User model
    can never carry the hash out of the service layer.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime


class UserUpdate(BaseModel):
    """
    Schema for editing the current user's profile.

    Only fields present in the request body are applied. There is no id field:
    the target is always the authenticated user.
    """

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def check_email_not_null(cls, v: str | None) -> str:
        """Email can be changed but not cleared."""
        if v is None:
            raise ValueError("Email cannot be null")
        return v
