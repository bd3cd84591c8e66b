"""Auth Routes — login (token issuance) and logout.

Invariants:
    - Unknown user and wrong password produce the same 401
    - Logout is stateless: tokens simply expire
"""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.api.dependencies import get_token_ttl
from ordering_api.config import Settings, get_settings
from ordering_api.infrastructure.database import get_db
from ordering_api.infrastructure.security import create_access_token
from ordering_api.schemas.user import LoginRequest, LoginResponse
from ordering_api.services.accounts import authenticate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    ttl: timedelta = Depends(get_token_ttl),
):
    """Exchange username/password for a bearer token."""
    user = await authenticate(db, body.username, body.password)
    token = create_access_token(
        user.username, user.role, settings.jwt_secret,
        algorithm=settings.jwt_algorithm, expires_in=ttl,
    )
    logger.info("User logged in", extra={"username": user.username})
    return LoginResponse(token=token)


@router.post("/logout")
async def logout():
    return {"message": "Logged out successfully"}
