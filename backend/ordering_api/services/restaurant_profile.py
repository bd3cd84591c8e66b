"""Restaurant Profile — configuration reader and in-place upsert for RestaurantInfo.

Invariants:
    - The current profile is the most recently updated row
    - The first write creates the row; later writes update it in place,
      preserving id and created_at
    - Opening hours are validated BEFORE anything is written
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.core.opening_hours import OpeningHours
from ordering_api.core.schedule import validate_opening_hours
from ordering_api.models import RestaurantInfo


async def load_current_restaurant_info(db: AsyncSession) -> RestaurantInfo | None:
    result = await db.execute(
        select(RestaurantInfo)
        .order_by(RestaurantInfo.updated_at.desc(), RestaurantInfo.id.desc())
        .limit(1),
    )
    return result.scalar_one_or_none()


async def upsert_restaurant_info(
    db: AsyncSession, fields: Mapping[str, Any], opening_hours: OpeningHours,
) -> RestaurantInfo:
    validate_opening_hours(opening_hours)
    info = await load_current_restaurant_info(db)
    if info is None:
        info = RestaurantInfo(**fields, opening_hours=opening_hours)
        db.add(info)
    else:
        for key, value in fields.items():
            setattr(info, key, value)
        info.opening_hours = opening_hours
    await db.commit()
    await db.refresh(info)
    return info
