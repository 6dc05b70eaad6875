"""Tests for access token creation and verification."""
from datetime import datetime, timedelta, UTC

import jwt
import pytest

from core.config import Settings
from services.exceptions import UnauthenticatedError
from services.token_service import TokenClaims, create_access_token, decode_access_token


def test__create_access_token__round_trips_claims(settings: Settings) -> None:
    """A freshly issued token decodes to the same user id."""
    token = create_access_token(42, "user@testing.com", settings)

    assert decode_access_token(token, settings) == TokenClaims(user_id=42)


def test__create_access_token__sets_expiry_from_settings(settings: Settings) -> None:
    """exp is issue time plus the configured lifetime, and sub is a string."""
    issued_at = datetime(2026, 1, 1, tzinfo=UTC)
    token = create_access_token(7, "user@testing.com", settings, now=issued_at)

    payload = jwt.decode(token, options={"verify_signature": False})
    assert payload["sub"] == "7"
    assert payload["email"] == "user@testing.com"
    assert payload["exp"] - payload["iat"] == settings.access_token_expire_minutes * 60


def test__decode_access_token__expired_raises(settings: Settings) -> None:
    """Tokens past their expiry are rejected."""
    token = create_access_token(
        1, "user@testing.com", settings, now=datetime.now(UTC) - timedelta(hours=1),
    )

    with pytest.raises(UnauthenticatedError, match="Token has expired"):
        decode_access_token(token, settings)


def test__decode_access_token__wrong_secret_raises(settings: Settings) -> None:
    """A token signed with a different secret is rejected."""
    other = settings.model_copy(update={"jwt_secret": "x" * 40})
    token = create_access_token(1, "user@testing.com", other)

    with pytest.raises(UnauthenticatedError, match="Invalid token"):
        decode_access_token(token, settings)


def test__decode_access_token__tampered_payload_raises(settings: Settings) -> None:
    """Changing the payload invalidates the signature."""
    header, _, signature = create_access_token(1, "a@testing.com", settings).split(".")
    forged_payload = jwt.encode(
        {"sub": "2", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "irrelevant-secret-irrelevant-secret",
        algorithm="HS256",
    ).split(".")[1]

    with pytest.raises(UnauthenticatedError):
        decode_access_token(f"{header}.{forged_payload}.{signature}", settings)


def test__decode_access_token__missing_sub_raises(settings: Settings) -> None:
    """Tokens without a subject are rejected."""
    token = jwt.encode(
        {"email": "user@testing.com", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(UnauthenticatedError):
        decode_access_token(token, settings)


def test__decode_access_token__non_numeric_sub_raises(settings: Settings) -> None:
    """A subject that is not a user id is rejected."""
    token = jwt.encode(
        {"sub": "not-a-number", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    with pytest.raises(UnauthenticatedError, match="malformed sub"):
        decode_access_token(token, settings)


def test__decode_access_token__rejects_none_algorithm(settings: Settings) -> None:
    """Unsigned tokens are never accepted."""
    token = jwt.encode(
        {"sub": "1", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        None,
        algorithm="none",
    )

    with pytest.raises(UnauthenticatedError):
        decode_access_token(token, settings)
