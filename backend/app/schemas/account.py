"""Account schemas."""
from decimal import Decimal

from pydantic import BaseModel, field_serializer

from app.models.account import AccountType


class AccountSummary(BaseModel):
    """Account fields shown alongside a transaction."""

    id: str
    name: str
    type: AccountType
    institution: str | None = None
    last_four: str | None = None

    class Config:
        from_attributes = True


class AccountResponse(AccountSummary):
    """Full account listing entry."""

    balance: Decimal
    is_active: bool
    household_id: str

    @field_serializer("balance")
    def serialize_balance(self, value: Decimal) -> float:
        return float(value)
