"""Service layer for user lookup and profile edits."""
import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserPublic, UserUpdate
from services.exceptions import ConflictError

logger = logging.getLogger(__name__)


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Get a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Get a user by email address."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def edit_profile(
    db: AsyncSession,
    user_id: int,
    data: UserUpdate,
) -> UserPublic:
    """
    Apply a partial profile update to the given user.

    Only fields explicitly set in the request are written. The row is selected by
    user_id alone, which callers take from the authenticated session, never from
    request input.

    Args:
        db: Database session.
        user_id: ID of the authenticated user.
        data: Fields to change.

    Returns:
        The updated user as a public projection.

    Raises:
        ConflictError: If the new email is already used by another account.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    values = data.model_dump(exclude_unset=True)

    if not values:
        user = await get_user(db, user_id)
        return UserPublic.model_validate(user)

    email = values.get("email")
    if email is not None:
        existing = await get_user_by_email(db, email)
        if existing is not None and existing.id != user_id:
            raise ConflictError("Email already registered")

    stmt = (
        update(User)
        .where(User.id == user_id)
        .values(**values, updated_at=func.clock_timestamp())
        .returning(User)
        .execution_options(synchronize_session=False, populate_existing=True)
    )
    try:
        # Savepoint keeps the request transaction usable if the unique index fires
        async with db.begin_nested():
            result = await db.execute(stmt)
            user = result.scalar_one()
    except IntegrityError as e:
        # Race condition: another account took the email after our check
        raise ConflictError("Email already registered") from e

    logger.info("Updated profile for user %s (fields: %s)", user_id, sorted(values))
    return UserPublic.model_validate(user)
