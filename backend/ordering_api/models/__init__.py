"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - MenuItem and Order are composite roots; their dependents are written
      only through the CompositeWriteCoordinator

Design Decisions:
    - One file per aggregate for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from ordering_api.models.user import User  # noqa: F401
from ordering_api.models.category import Category  # noqa: F401
from ordering_api.models.menu_item import MenuItem, AddOn  # noqa: F401
from ordering_api.models.order import Order, OrderLine, SelectedAddOn  # noqa: F401
from ordering_api.models.restaurant_info import RestaurantInfo  # noqa: F401
