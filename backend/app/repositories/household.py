"""Household membership lookups for arbitrary household-scoped rows."""
from sqlalchemy.orm import Session

from app.models.account import Account
from app.models.category import Category
from app.models.user import User

HouseholdScoped = type[Account] | type[Category] | type[User]


def household_of(db: Session, model: HouseholdScoped, record_id: str) -> str | None:
    """Return the household id owning a row, or None if the row does not exist."""
    row = db.query(model.household_id).filter(model.id == record_id).first()
    return row.household_id if row else None
