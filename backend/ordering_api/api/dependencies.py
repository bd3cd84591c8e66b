"""Shared Dependencies — auth, clock, and coordinator wiring for routes.

Invariants:
    - get_current_user raises AuthenticationError (401) for missing/invalid tokens
    - require_role raises PermissionDeniedError (403) for the wrong role
    - The coordinator's logger comes from app.state (set by the entry point)

Design Decisions:
    - Clock and zone are dependencies so tests can pin the instant
"""

from datetime import timedelta, timezone

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.config import Settings, get_settings
from ordering_api.core.domain_types import UserRole
from ordering_api.core.errors import AuthenticationError, PermissionDeniedError
from ordering_api.core.repository_protocols import Clock
from ordering_api.infrastructure.clock import FixedOffsetClock, restaurant_timezone
from ordering_api.infrastructure.database import DatabaseSessionManager, get_db, get_storage
from ordering_api.infrastructure.security import decode_access_token
from ordering_api.models import User
from ordering_api.services.composite_writes import CompositeWriteCoordinator

_bearer = HTTPBearer(auto_error=False)


def get_restaurant_tz(settings: Settings = Depends(get_settings)) -> timezone:
    return restaurant_timezone(settings.restaurant_utc_offset_minutes)


def get_clock(tz: timezone = Depends(get_restaurant_tz)) -> Clock:
    return FixedOffsetClock(tz)


def get_token_ttl(settings: Settings = Depends(get_settings)) -> timedelta:
    return timedelta(hours=settings.jwt_expiry_hours)


def get_coordinator(
    request: Request, storage: DatabaseSessionManager = Depends(get_storage),
) -> CompositeWriteCoordinator:
    return CompositeWriteCoordinator(storage, request.app.state.logger)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Resolve the bearer token to a stored user."""
    if credentials is None:
        raise AuthenticationError("Missing authorization header")
    claims = decode_access_token(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )
    result = await db.execute(select(User).where(User.username == claims["sub"]))
    user = result.scalar_one_or_none()
    if user is None:
        raise AuthenticationError("Token subject no longer exists")
    return user


def require_role(role: UserRole):
    """Dependency factory: the current user must hold role."""

    async def dependency(user: User = Depends(get_current_user)) -> User:
        if user.role != role.value:
            raise PermissionDeniedError(role.value)
        return user

    return dependency


require_admin = require_role(UserRole.ADMIN)
