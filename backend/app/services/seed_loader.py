"""Service to load seed data (household, users, categories, accounts) from YAML."""
from decimal import Decimal
import json
import logging
from pathlib import Path
from typing import Any

import yaml
from sqlalchemy.orm import Session

from app.models.account import Account, AccountType
from app.models.category import Category
from app.models.household import Household
from app.models.user import User
from app.services.auth import get_password_hash

logger = logging.getLogger(__name__)


def load_seed(db: Session, seed_path: Path) -> Household | None:
    """Load a seed file and upsert its contents.

    Rows are matched by natural key (household name, user email, category or
    account name within the household), so running the same file twice
    creates nothing new. Returns the seeded household.
    """
    if not seed_path.exists():
        logger.warning(f"Seed file not found: {seed_path}")
        return None

    with open(seed_path, "r") as f:
        data = yaml.safe_load(f) or {}

    household_name = (data.get("household") or {}).get("name")
    if not household_name:
        logger.warning(f"Seed file missing household name: {seed_path}")
        return None

    household = _get_or_create_household(db, household_name)

    for user_data in data.get("users") or []:
        _get_or_create_user(db, household, user_data)

    for category_data in data.get("categories") or []:
        _get_or_create_category_tree(db, household, category_data, parent_id=None)

    for account_data in data.get("accounts") or []:
        _get_or_create_account(db, household, account_data)

    db.commit()
    logger.info(f"Seeded household {household.name} ({household.id})")
    return household


def _get_or_create_household(db: Session, name: str) -> Household:
    existing = db.query(Household).filter(Household.name == name).first()
    if existing:
        logger.debug(f"Household {name!r} already exists")
        return existing

    household = Household(name=name)
    db.add(household)
    db.flush()
    logger.info(f"Created household: {name}")
    return household


def _get_or_create_user(db: Session, household: Household, data: dict[str, Any]) -> User:
    email = data["email"].lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        logger.debug(f"User {email} already exists")
        return existing

    user = User(
        email=email,
        password_hash=get_password_hash(data["password"]),
        first_name=data["first_name"],
        last_name=data["last_name"],
        settings=json.dumps(data.get("settings", {})),
        household_id=household.id,
    )
    db.add(user)
    db.flush()
    logger.info(f"Created user: {user.first_name} {user.last_name}")
    return user


def _get_or_create_category_tree(
    db: Session,
    household: Household,
    data: dict[str, Any],
    parent_id: str | None,
) -> Category:
    category = db.query(Category).filter(
        Category.household_id == household.id,
        Category.name == data["name"],
    ).first()

    if category is None:
        category = Category(
            name=data["name"],
            description=data.get("description"),
            color=data.get("color"),
            icon=data.get("icon"),
            parent_id=parent_id,
            household_id=household.id,
        )
        db.add(category)
        db.flush()
        logger.debug(f"Created category: {category.name}")

    for child_data in data.get("children") or []:
        _get_or_create_category_tree(db, household, child_data, parent_id=category.id)

    return category


def _get_or_create_account(db: Session, household: Household, data: dict[str, Any]) -> Account:
    existing = db.query(Account).filter(
        Account.household_id == household.id,
        Account.name == data["name"],
    ).first()
    if existing:
        return existing

    account = Account(
        name=data["name"],
        institution=data.get("institution"),
        type=AccountType(data.get("type", AccountType.OTHER.value)),
        last_four=data.get("last_four"),
        balance=Decimal(str(data.get("balance", 0))),
        is_active=data.get("is_active", True),
        household_id=household.id,
    )
    db.add(account)
    db.flush()
    logger.debug(f"Created account: {account.name}")
    return account
