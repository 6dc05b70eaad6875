"""
Shared validation functions for Pydantic schemas.

Request schemas call these from field validators, so every rule lives in one
place and raises ValueError (which FastAPI reports as a 400 response).
"""
from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.config import get_settings

# bcrypt only looks at the first 72 bytes of a password (and bcrypt>=5 rejects longer input)
MAX_PASSWORD_BYTES = 72

_http_url_adapter = TypeAdapter(HttpUrl)


def validate_not_blank(value: str, field_name: str) -> str:
    """Strip surrounding whitespace and reject empty strings."""
    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{field_name} cannot be empty")
    return stripped


def validate_link(link: str) -> str:
    """
    Validate that a link is a well-formed http(s) URL.

    Returns the stripped link exactly as given. The URL is parsed only to check
    it; pydantic's normalized form (e.g. the trailing slash it adds to bare
    domains) is not stored.
    """
    stripped = validate_not_blank(link, "Link")
    try:
        _http_url_adapter.validate_python(stripped)
    except PydanticValidationError:
        raise ValueError(f"Invalid URL: '{stripped}'. Use a full http(s) URL.") from None
    return stripped


def validate_password(password: str) -> str:
    """Reject empty passwords and passwords bcrypt cannot hash in full."""
    if not password:
        raise ValueError("Password cannot be empty")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes")
    return password


def validate_title_length(title: str | None) -> str | None:
    """Validate that title doesn't exceed maximum length."""
    settings = get_settings()
    if title is not None and len(title) > settings.max_title_length:
        raise ValueError(
            f"Title exceeds maximum length of {settings.max_title_length:,} characters "
            f"(got {len(title):,} characters).",
        )
    return title


def validate_description_length(description: str | None) -> str | None:
    """Validate that description doesn't exceed maximum length."""
    settings = get_settings()
    if description is not None and len(description) > settings.max_description_length:
        max_len = settings.max_description_length
        raise ValueError(
            f"Description exceeds maximum length of {max_len:,} characters "
            f"(got {len(description):,} characters).",
        )
    return description
