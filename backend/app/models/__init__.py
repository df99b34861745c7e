"""SQLAlchemy models package."""
from app.models.household import Household
from app.models.user import User
from app.models.account import Account, AccountType
from app.models.category import Category
from app.models.transaction import Transaction

__all__ = [
    "Household",
    "User",
    "Account",
    "AccountType",
    "Category",
    "Transaction",
]
