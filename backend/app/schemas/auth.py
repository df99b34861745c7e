"""Authentication schemas."""
import json
from typing import Any

from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


class UserRegister(BaseModel):
    """User registration request."""

    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    household_id: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        return v


class UserLogin(BaseModel):
    """User login request."""

    email: str
    password: str


class UserResponse(BaseModel):
    """Signed-in user info."""

    id: str
    email: str
    first_name: str
    last_name: str
    household_id: str
    settings: dict[str, Any] = Field(default_factory=dict)

    @field_validator("settings", mode="before")
    @classmethod
    def parse_settings(cls, v: Any) -> dict:
        if v is None:
            return {}
        if isinstance(v, str):
            return json.loads(v) if v else {}
        return v

    class Config:
        from_attributes = True


class Token(BaseModel):
    """Token response."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
