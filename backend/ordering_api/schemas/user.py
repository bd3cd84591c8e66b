"""User & Auth Schemas — account management and login.

Invariants:
    - Passwords are accepted on input only; no response schema carries one
    - UserUpdate is partial: omitted fields keep their current value
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ordering_api.core.domain_types import UserRole

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(max_length=100, pattern=_EMAIL_PATTERN)
    password: str = Field(min_length=8, max_length=72)
    role: UserRole = UserRole.STAFF

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserUpdate(BaseModel):
    username: str | None = Field(None, min_length=3, max_length=50)
    email: str | None = Field(None, max_length=100, pattern=_EMAIL_PATTERN)
    password: str | None = Field(None, min_length=8, max_length=72)
    role: UserRole | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: UserRole
    created_at: datetime


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
