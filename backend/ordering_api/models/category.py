"""Category ORM — menu sections shown in display_order."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ordering_api.db.base import Base, TimestampMixin


class Category(TimestampMixin, Base):
    """Menu category. Cannot be deleted while menu items reference it."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
