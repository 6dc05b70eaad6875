"""Authentication dependency: bearer token to current user."""
import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from db.session import get_async_session
from schemas.user import UserPublic
from services import auth_service
from services.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)


# HTTP Bearer token scheme (auto_error=False so we return 401 instead of 403)
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> UserPublic:
    """
    Dependency that validates the bearer token and returns the current user.

    Runs before any route logic, so every authenticated route sees a resolved
    user or never runs at all.
    """
    token = credentials.credentials if credentials is not None else None
    try:
        return await auth_service.resolve_session(db, token, settings)
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
