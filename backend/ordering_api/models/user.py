"""User ORM — staff and admin accounts.

Invariants:
    - username and email are unique
    - password_hash is a bcrypt hash, never the plain password
    - role is one of UserRole values
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ordering_api.core.domain_types import UserRole
from ordering_api.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """Account able to log in and act according to its role."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=UserRole.STAFF.value,
    )
