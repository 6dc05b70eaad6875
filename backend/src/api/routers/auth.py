"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_settings
from core.config import Settings
from schemas.auth import AuthCredentials, TokenResponse
from services import auth_service
from services.exceptions import ConflictError, InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=TokenResponse, status_code=201)
async def signup(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """Register a new account and return an access token."""
    try:
        return await auth_service.signup(db, data, settings)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/signin", response_model=TokenResponse)
async def signin(
    data: AuthCredentials,
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    """
    Exchange email and password for an access token.

    Returns 403 with the same message whether the email or the password was wrong.
    """
    try:
        return await auth_service.signin(db, data, settings)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=403, detail=str(e))
