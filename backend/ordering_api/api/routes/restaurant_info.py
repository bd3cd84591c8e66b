"""Restaurant Info Routes — public profile, admin upsert, and open/closed status.

Invariants:
    - GET is public; PUT requires the admin role
    - PUT validates opening hours before writing (400 on bad bounds or dates)
    - GET /open evaluates the CURRENT profile in the configured restaurant zone;
      with no profile configured the restaurant is reported closed
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ordering_api.api.dependencies import get_clock, get_restaurant_tz, require_admin
from ordering_api.core.errors import ResourceNotFoundError
from ordering_api.core.opening_hours import OpeningHours
from ordering_api.core.repository_protocols import Clock
from ordering_api.core.schedule import is_open, schedule_for, to_local
from ordering_api.infrastructure.database import get_db
from ordering_api.schemas.opening_hours import DayScheduleSchema, OpenStatusResponse
from ordering_api.schemas.restaurant_info import (
    RestaurantInfoResponse, RestaurantInfoUpdate,
)
from ordering_api.services.restaurant_profile import (
    load_current_restaurant_info, upsert_restaurant_info,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/restaurant-info", tags=["restaurant-info"])


@router.get("", response_model=RestaurantInfoResponse)
async def get_restaurant_info(db: AsyncSession = Depends(get_db)):
    info = await load_current_restaurant_info(db)
    if info is None:
        raise ResourceNotFoundError("RestaurantInfo", "current")
    return RestaurantInfoResponse.from_model(info)


@router.put(
    "", response_model=RestaurantInfoResponse,
    dependencies=[Depends(require_admin)],
)
async def update_restaurant_info(
    body: RestaurantInfoUpdate, db: AsyncSession = Depends(get_db),
):
    """Create the profile on first call, update it in place afterwards."""
    info = await upsert_restaurant_info(
        db,
        body.model_dump(exclude={"opening_hours"}),
        body.opening_hours.to_domain(),
    )
    logger.info(f"Restaurant info {info.id} saved")
    return RestaurantInfoResponse.from_model(info)


@router.get("/open", response_model=OpenStatusResponse)
async def get_open_status(
    at: datetime | None = Query(
        None, description="Instant to evaluate (ISO 8601); defaults to now",
    ),
    db: AsyncSession = Depends(get_db),
    clock: Clock = Depends(get_clock),
    tz: timezone = Depends(get_restaurant_tz),
):
    info = await load_current_restaurant_info(db)
    hours = info.opening_hours if info is not None else OpeningHours()
    instant = at if at is not None else clock.now()
    local = to_local(instant, tz)
    today = schedule_for(hours, local.date())
    return OpenStatusResponse(
        is_open=is_open(hours, instant, tz),
        checked_at=local.isoformat(),
        today=DayScheduleSchema.model_validate(today.to_dict()),
    )
