"""Data contracts for users and authentication."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """Public view of a user record; the password hash never leaves the store."""

    id: int
    name: str
    email: str
    createdAt: datetime


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=8, max_length=256)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str
    password: str
