"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from schemas.validators import (
    validate_description_length,
    validate_link,
    validate_not_blank,
    validate_title_length,
)


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    title: str
    link: str
    description: str | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        """Require a non-empty title within the length limit."""
        return validate_title_length(validate_not_blank(v, "Title"))

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str) -> str:
        """Require a well-formed http(s) URL."""
        return validate_link(v)

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str | None) -> str | None:
        """Validate description length."""
        return validate_description_length(v)


class BookmarkUpdate(BaseModel):
    """
    Schema for updating an existing bookmark.

    Fields left out of the request body are not touched. title and link cannot
    be cleared; description can be set to null.
    """

    title: str | None = None
    link: str | None = None
    description: str | None = None

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str:
        """Require a non-empty title within the length limit if provided."""
        if v is None:
            raise ValueError("Title cannot be null")
        return validate_title_length(validate_not_blank(v, "Title"))

    @field_validator("link")
    @classmethod
    def check_link(cls, v: str | None) -> str:
        """Require a well-formed http(s) URL if provided."""
        if v is None:
            raise ValueError("Link cannot be null")
        return validate_link(v)

    @field_validator("description")
    @classmethod
    def check_description_length(cls, v: str | None) -> str | None:
        """Validate description length."""
        return validate_description_length(v)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    link: str
    description: str | None
    created_at: datetime
    updated_at: datetime
