"""User Routes — admin-only account management.

Invariants:
    - Every route requires the admin role
    - Passwords are stored as bcrypt hashes only
    - Duplicate username/email -> 409
    - An admin cannot delete their own account
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.api.dependencies import require_admin
from ordering_api.core.errors import ConflictError, ResourceNotFoundError
from ordering_api.infrastructure.database import get_db
from ordering_api.infrastructure.security import hash_password
from ordering_api.models import User
from ordering_api.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/users", tags=["users"], dependencies=[Depends(require_admin)],
)


async def _get_user_or_404(user_id: int, db: AsyncSession) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return user


async def _commit_unique(db: AsyncSession) -> None:
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Username or email already in use")


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User).order_by(User.id))
    return result.scalars().all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_user_or_404(user_id, db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    user = User(
        username=body.username,
        email=body.email,
        password_hash=hash_password(body.password),
        role=body.role.value,
    )
    db.add(user)
    await _commit_unique(db)
    await db.refresh(user)
    logger.info("User created", extra={"username": user.username})
    return user


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int, body: UserUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update: only fields present in the body change."""
    user = await _get_user_or_404(user_id, db)
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "password" in changes:
        user.password_hash = hash_password(changes.pop("password"))
    if "role" in changes:
        changes["role"] = changes["role"].value
    for key, value in changes.items():
        setattr(user, key, value)
    await _commit_unique(db)
    await db.refresh(user)
    return user


@router.delete("/{user_id}")
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
    current: User = Depends(require_admin),
):
    if current.id == user_id:
        raise ConflictError("You cannot delete your own account")
    user = await _get_user_or_404(user_id, db)
    await db.delete(user)
    await db.commit()
    logger.info("User deleted", extra={"username": user.username})
    return {"message": "User deleted successfully"}
