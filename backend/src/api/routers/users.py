"""Endpoints for the authenticated user's own profile."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from schemas.user import UserPublic, UserUpdate
from services import user_service
from services.exceptions import ConflictError


router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserPublic)
async def get_me(current_user: UserPublic = Depends(get_current_user)) -> UserPublic:
    """Get the current authenticated user's info."""
    return current_user


@router.patch("", response_model=UserPublic)
async def edit_me(
    data: UserUpdate,
    current_user: UserPublic = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> UserPublic:
    """Update the current user's email and/or name. Omitted fields are unchanged."""
    try:
        return await user_service.edit_profile(db, current_user.id, data)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
