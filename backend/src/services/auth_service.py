"""Service layer for signup, signin, and resolving bearer tokens to users."""
import logging
from functools import lru_cache

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from models.user import User
from schemas.auth import AuthCredentials, TokenResponse
from schemas.user import UserPublic
from services import token_service, user_service
from services.exceptions import ConflictError, InvalidCredentialsError, UnauthenticatedError

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with bcrypt using a fresh salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a bcrypt hash (constant-time comparison)."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


@lru_cache
def _dummy_hash(rounds: int) -> str:
    """A throwaway hash checked when the email is unknown, so both failure paths cost the same."""
    return hash_password("not-a-real-password", rounds)


def _issue_token(user: User, settings: Settings) -> TokenResponse:
    return TokenResponse(
        access_token=token_service.create_access_token(user.id, user.email, settings),
    )


async def signup(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> TokenResponse:
    """
    Register a new user and return an access token for it.

    Raises:
        ConflictError: If the email is already registered.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    if await user_service.get_user_by_email(db, data.email) is not None:
        raise ConflictError("Email already registered")

    user = User(
        email=data.email,
        hashed_password=hash_password(data.password, settings.bcrypt_rounds),
    )
    try:
        # Savepoint keeps the request transaction usable if the unique index fires
        async with db.begin_nested():
            db.add(user)
            await db.flush()
    except IntegrityError as e:
        # Race condition: a concurrent signup registered the email after our check
        raise ConflictError("Email already registered") from e

    logger.info("Registered user %s", user.id)
    return _issue_token(user, settings)


async def signin(
    db: AsyncSession,
    data: AuthCredentials,
    settings: Settings,
) -> TokenResponse:
    """
    Verify credentials and return an access token.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong.
            Both cases raise the same error.
    """
    user = await user_service.get_user_by_email(db, data.email)

    if user is None:
        verify_password(data.password, _dummy_hash(settings.bcrypt_rounds))
        logger.warning("Signin failed: unknown email")
        raise InvalidCredentialsError()

    if not verify_password(data.password, user.hashed_password):
        logger.warning("Signin failed: wrong password for user %s", user.id)
        raise InvalidCredentialsError()

    return _issue_token(user, settings)


async def resolve_session(
    db: AsyncSession,
    token: str | None,
    settings: Settings,
) -> UserPublic:
    """
    Resolve a bearer token to the user it was issued for.

    Args:
        db: Database session.
        token: The raw bearer token, or None if the request carried none.
        settings: Application settings (token secret and algorithm).

    Returns:
        The user as a public projection (no password hash).

    Raises:
        UnauthenticatedError: If the token is missing or invalid, or its user no
            longer exists.
    """
    if not token:
        raise UnauthenticatedError()

    claims = token_service.decode_access_token(token, settings)

    user = await user_service.get_user(db, claims.user_id)
    if user is None:
        logger.warning("Valid token for missing user %s", claims.user_id)
        raise UnauthenticatedError("User not found")

    return UserPublic.model_validate(user)
