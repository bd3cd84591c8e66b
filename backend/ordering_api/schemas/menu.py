"""Menu Schemas — categories, menu items, and add-ons.

Invariants:
    - Prices are non-negative
    - MenuItemWrite.add_ons is the COMPLETE add-on set (replace, never merge)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryWrite(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    display_order: int = Field(0, ge=0)


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    display_order: int
    created_at: datetime
    updated_at: datetime


class AddOnWrite(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    price: float = Field(ge=0)


class AddOnResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    menu_item_id: int
    name: str
    price: float


class MenuItemWrite(BaseModel):
    """Create/update payload. On update, add_ons replaces the existing set."""
    category_id: int | None = None
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    price: float = Field(ge=0)
    image_url: str = Field("", max_length=255)
    is_available: bool = True
    add_ons: list[AddOnWrite] = Field(default_factory=list)

    def item_fields(self) -> dict:
        return self.model_dump(exclude={"add_ons"})


class MenuItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int | None
    name: str
    description: str
    price: float
    image_url: str
    is_available: bool
    add_ons: list[AddOnResponse]
    created_at: datetime
    updated_at: datetime
