"""MenuItem / AddOn ORM — catalog entries and their optional extras.

Invariants:
    - An AddOn always belongs to an existing MenuItem (menu_item_id FK, NOT NULL)
    - On update the add-on set is replaced wholesale, never diffed
    - add_ons is never lazy-loaded: callers load it explicitly (selectinload)

Design Decisions:
    - lazy="raise": an unloaded collection can't silently go stale inside a
      coordinator transaction that bulk-deletes dependents
    - ondelete="CASCADE" is a database-level backstop; the coordinator still
      deletes add-ons explicitly inside its transaction
"""

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ordering_api.db.base import Base, TimestampMixin

Money = Numeric(10, 2, asdecimal=False)


class MenuItem(TimestampMixin, Base):
    """Menu item — composite root owning its add-ons."""
    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Money, nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    add_ons: Mapped[list["AddOn"]] = relationship(
        "AddOn", order_by="AddOn.id", lazy="raise",
    )


class AddOn(TimestampMixin, Base):
    """Optional extra for one menu item, e.g. "extra cheese"."""
    __tablename__ = "add_ons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    menu_item_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Money, nullable=False)
