"""User schemas."""
from pydantic import BaseModel


class UserSummary(BaseModel):
    """Public user fields, safe to show to other household members."""

    id: str
    first_name: str
    last_name: str
    email: str

    class Config:
        from_attributes = True
