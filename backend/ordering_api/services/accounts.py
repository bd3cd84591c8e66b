"""Accounts — login verification and first-run admin bootstrap.

Invariants:
    - authenticate() gives the same error for unknown user and wrong password
    - ensure_admin_user() creates an account only when the users table is empty
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.core.domain_types import UserRole
from ordering_api.core.errors import AuthenticationError
from ordering_api.infrastructure.security import hash_password, verify_password
from ordering_api.models import User

logger = logging.getLogger(__name__)


async def authenticate(db: AsyncSession, username: str, password: str) -> User:
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError("Invalid username or password")
    return user


async def ensure_admin_user(
    db: AsyncSession, username: str, password: str, email: str,
) -> User | None:
    """Create the bootstrap admin if no account exists yet."""
    count = await db.scalar(select(func.count()).select_from(User))
    if count:
        return None
    user = User(
        username=username, email=email,
        password_hash=hash_password(password), role=UserRole.ADMIN.value,
    )
    db.add(user)
    await db.commit()
    logger.info("Bootstrap admin account created", extra={"username": username})
    return user
