"""Transaction schemas."""
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, field_serializer

from app.schemas.account import AccountSummary
from app.schemas.category import CategorySummary
from app.schemas.user import UserSummary


class TransactionCreate(BaseModel):
    """Normalized transaction payload, produced by the validation rules."""

    account_id: str
    date: date
    amount: Decimal
    merchant: str | None = None
    description: str | None = None
    category_id: str | None = None
    owner_user_id: str | None = None
    card_id: str | None = None


class TransactionRecord(BaseModel):
    """Stored transaction with its related records denormalized for display."""

    id: str
    account_id: str
    date: date
    amount: Decimal
    merchant: str | None
    description: str | None
    category_id: str | None
    added_by_user_id: str
    owner_user_id: str | None
    card_id: str | None
    created_at: str
    updated_at: str

    account: AccountSummary | None = None
    category: CategorySummary | None = None
    added_by_user: UserSummary | None = None
    owner_user: UserSummary | None = None

    class Config:
        from_attributes = True

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> float:
        return float(value)
