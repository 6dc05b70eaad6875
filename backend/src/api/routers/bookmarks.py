"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from schemas.user import UserPublic
from services import bookmark_service
from services.exceptions import ForbiddenError

# Largest value the SERIAL primary key can hold; larger path ids are rejected as 400
MAX_BOOKMARK_ID = 2**31 - 1

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: UserPublic = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark."""
    bookmark = await bookmark_service.create_bookmark(db, current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: UserPublic = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks for the current user, newest first."""
    bookmarks = await bookmark_service.get_bookmarks(db, current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int = Path(..., ge=1, le=MAX_BOOKMARK_ID),
    current_user: UserPublic = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, current_user.id, bookmark_id)
    if bookmark is None:
        raise HTTPException(status_code=404, detail="Bookmark not found")
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    data: BookmarkUpdate,
    bookmark_id: int = Path(..., ge=1, le=MAX_BOOKMARK_ID),
    current_user: UserPublic = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update a bookmark. Omitted fields are unchanged."""
    try:
        bookmark = await bookmark_service.update_bookmark(
            db, current_user.id, bookmark_id, data,
        )
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int = Path(..., ge=1, le=MAX_BOOKMARK_ID),
    current_user: UserPublic = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Permanently delete a bookmark."""
    try:
        await bookmark_service.delete_bookmark(db, current_user.id, bookmark_id)
    except ForbiddenError as e:
        raise HTTPException(status_code=403, detail=str(e))
