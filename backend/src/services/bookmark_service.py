"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """
    Create a new bookmark for a user.

    Args:
        db: Database session.
        user_id: User ID that will own the bookmark.
        data: Bookmark creation data.

    Returns:
        The created bookmark.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        user_id=user_id,
        title=data.title,
        link=data.link,
        description=data.description,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def get_bookmarks(db: AsyncSession, user_id: int) -> list[Bookmark]:
    """Get all bookmarks owned by a user, newest first."""
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.user_id == user_id)
        .order_by(Bookmark.created_at.desc(), Bookmark.id.desc()),
    )
    return list(result.scalars().all())


async def get_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark | None:
    """
    Get a bookmark by ID, scoped to user.

    Returns:
        The bookmark if it exists and belongs to the user, None otherwise. A
        bookmark owned by someone else looks exactly like a missing one.
    """
    result = await db.execute(
        select(Bookmark).where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        ),
    )
    return result.scalar_one_or_none()


async def update_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Apply a partial update to a bookmark the user owns.

    The ownership check and the write are one conditional UPDATE
    (WHERE id = :bookmark_id AND user_id = :user_id), so nothing can change the
    owner between the check and the mutation.

    Args:
        db: Database session.
        user_id: ID of the acting user.
        bookmark_id: ID of the bookmark to update.
        data: Fields to change; fields not set in the request are left as-is.

    Returns:
        The updated bookmark.

    Raises:
        ForbiddenError: If the bookmark does not exist or belongs to another user.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    values = data.model_dump(exclude_unset=True)
    stmt = (
        update(Bookmark)
        .where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        )
        # updated_at has no onupdate hook, so set it here
        .values(**values, updated_at=func.clock_timestamp())
        .returning(Bookmark)
        .execution_options(synchronize_session=False, populate_existing=True)
    )
    result = await db.execute(stmt)
    bookmark = result.scalar_one_or_none()
    if bookmark is None:
        logger.warning(
            "Denied update of bookmark %s by user %s", bookmark_id, user_id,
        )
        raise ForbiddenError()
    return bookmark


async def delete_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> None:
    """
    Permanently delete a bookmark the user owns.

    Uses the same single-statement owner guard as update_bookmark.

    Raises:
        ForbiddenError: If the bookmark does not exist or belongs to another user.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    result = await db.execute(
        delete(Bookmark)
        .where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        )
        .returning(Bookmark.id),
    )
    if result.scalar_one_or_none() is None:
        logger.warning(
            "Denied delete of bookmark %s by user %s", bookmark_id, user_id,
        )
        raise ForbiddenError()
    logger.info("Deleted bookmark %s for user %s", bookmark_id, user_id)
