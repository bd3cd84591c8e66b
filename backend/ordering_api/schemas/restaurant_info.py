"""Restaurant Info Schemas — profile update payload and response."""

from datetime import datetime

from pydantic import BaseModel, Field

from ordering_api.schemas.opening_hours import OpeningHoursInput, OpeningHoursSchema


class RestaurantInfoUpdate(BaseModel):
    """Full replacement of the restaurant profile."""
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    address: str = Field("", max_length=255)
    phone: str = Field("", max_length=50)
    email: str = Field("", max_length=100)
    logo_url: str = Field("", max_length=255)
    banner_url: str = Field("", max_length=255)
    opening_hours: OpeningHoursInput = Field(default_factory=OpeningHoursInput)


class RestaurantInfoResponse(BaseModel):
    id: int
    name: str
    description: str
    address: str
    phone: str
    email: str
    logo_url: str
    banner_url: str
    opening_hours: OpeningHoursSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, info) -> "RestaurantInfoResponse":
        return cls(
            id=info.id,
            name=info.name,
            description=info.description,
            address=info.address,
            phone=info.phone,
            email=info.email,
            logo_url=info.logo_url,
            banner_url=info.banner_url,
            opening_hours=OpeningHoursSchema.from_domain(info.opening_hours),
            created_at=info.created_at,
            updated_at=info.updated_at,
        )
