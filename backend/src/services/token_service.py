"""Service layer for signed access tokens (JWT)."""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC

import jwt

from core.config import Settings
from services.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)


@dataclass
class TokenClaims:
    """The identity an access token is bound to."""

    user_id: int


def create_access_token(
    user_id: int,
    email: str,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """
    Create a signed, time-bound access token.

    Args:
        user_id: ID of the user the token is issued to (stored as the 'sub' claim).
        email: Email of the user at issue time.
        settings: Application settings (secret, algorithm, lifetime).
        now: Issue time; defaults to the current time.

    Returns:
        The encoded JWT.
    """
    issued_at = now or datetime.now(UTC)
    payload = {
        # JWT requires 'sub' to be a string
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    """
    Verify an access token and return the identity it is bound to.

    Raises:
        UnauthenticatedError: If the token is malformed, expired, has a bad
            signature, or its claims are missing or unusable.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthenticatedError("Token has expired") from None
    except jwt.PyJWTError as e:
        # Log details server-side only; the client gets a generic message
        logger.warning("Access token validation failed: %s", e)
        raise UnauthenticatedError("Invalid token") from None

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise UnauthenticatedError("Invalid token: malformed sub claim") from None

    return TokenClaims(user_id=user_id)
