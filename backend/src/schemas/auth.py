"""Pydantic schemas for signup/signin endpoints."""
from pydantic import BaseModel, EmailStr, field_validator

from schemas.validators import validate_password


class AuthCredentials(BaseModel):
    """Email and password, used by both signup and signin."""

    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, v: str) -> str:
        """Validate password is present and hashable."""
        return validate_password(v)


class TokenResponse(BaseModel):
    """
    Access token returned by signup and signin.

    Send it back as `Authorization: Bearer <access_token>`.
    """

    access_token: str
    token_type: str = "bearer"
