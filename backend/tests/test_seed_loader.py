from pathlib import Path

from app.config import get_settings
from app.models import Account, Category, Household, User
from app.services.auth import verify_password
from app.services.seed_loader import load_seed

SEED_FILE = Path(get_settings().base_dir) / "configs" / "seed.yaml"


def test_seed_creates_household_users_categories_and_accounts(db):
    household = load_seed(db, SEED_FILE)

    assert household.name == "Family"
    users = db.query(User).order_by(User.email).all()
    assert [u.email for u in users] == ["jane@family.com", "john@family.com"]
    assert all(u.household_id == household.id for u in users)
    assert verify_password("password123", users[0].password_hash)

    food = db.query(Category).filter(Category.name == "Food").one()
    groceries = db.query(Category).filter(Category.name == "Groceries").one()
    assert food.parent_id is None
    assert groceries.parent_id == food.id

    assert db.query(Account).filter(Account.household_id == household.id).count() == 3


def test_seed_is_idempotent(db):
    load_seed(db, SEED_FILE)
    counts = (
        db.query(Household).count(),
        db.query(User).count(),
        db.query(Category).count(),
        db.query(Account).count(),
    )

    load_seed(db, SEED_FILE)

    assert (
        db.query(Household).count(),
        db.query(User).count(),
        db.query(Category).count(),
        db.query(Account).count(),
    ) == counts


def test_missing_seed_file_is_skipped(db, tmp_path):
    assert load_seed(db, tmp_path / "absent.yaml") is None
    assert db.query(Household).count() == 0


def test_seed_file_without_household_is_skipped(db, tmp_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text("users: []\n")

    assert load_seed(db, seed) is None


def test_seed_sections_left_empty_are_skipped(db, tmp_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text(
        "household:\n"
        "  name: Empty\n"
        "users:\n"
        "accounts:\n"
        "categories:\n"
        "  - name: Food\n"
        "    children:\n"
    )

    household = load_seed(db, seed)

    assert household.name == "Empty"
    assert db.query(User).count() == 0
    assert db.query(Account).count() == 0
    assert [c.name for c in db.query(Category).all()] == ["Food"]
