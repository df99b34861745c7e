"""Transaction service: create and read household transactions."""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import PersistenceError, ValidationError
from app.models.account import Account
from app.models.category import Category
from app.models.user import User
from app.repositories.household import household_of
from app.repositories.transactions import get_transaction, insert_transaction, list_transactions
from app.schemas.common import FieldViolation
from app.schemas.transaction import TransactionCreate, TransactionRecord
from app.services.month_range import resolve_month_range

logger = logging.getLogger(__name__)

_REFERENCES = (
    ("account_id", Account, "Account"),
    ("category_id", Category, "Category"),
    ("owner_user_id", User, "Owner user"),
)


class TransactionService:
    """Household-scoped transaction operations.

    Built per request with the caller's session and household, e.g.
    ``TransactionService(db, identity.household_id)``.
    """

    def __init__(self, db: Session, household_id: str):
        self.db = db
        self.household_id = household_id

    def create(self, payload: TransactionCreate, acting_user_id: str) -> TransactionRecord:
        """Persist a validated transaction recorded by ``acting_user_id``.

        Raises:
            ValidationError: a referenced account, category or owner belongs
                to another household.
            PersistenceError: the database rejected the insert, e.g. a
                reference to a row that does not exist.
        """
        self._check_household_references(payload)

        try:
            txn = insert_transaction(self.db, payload, added_by_user_id=acting_user_id)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(f"Transaction insert rejected for user {acting_user_id}: {exc.orig}")
            raise PersistenceError("Transaction references a missing account, category or user") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Transaction insert failed for user {acting_user_id}: {exc}")
            raise PersistenceError("Could not save transaction") from exc

        logger.info(f"Created transaction {txn.id} on account {txn.account_id} by user {acting_user_id}")
        stored = get_transaction(self.db, self.household_id, txn.id)
        return TransactionRecord.model_validate(stored)

    def find_all(self, month: str | None = None) -> list[TransactionRecord]:
        """List transactions newest first, restricted to a "YYYY-MM" month if given."""
        start_date = end_date = None
        if month:
            start_date, end_date = resolve_month_range(month)

        rows = list_transactions(self.db, self.household_id, start_date=start_date, end_date=end_date)
        return [TransactionRecord.model_validate(row) for row in rows]

    def find_one(self, transaction_id: str) -> TransactionRecord | None:
        """Get a single transaction, or None when it does not exist in this household."""
        row = get_transaction(self.db, self.household_id, transaction_id)
        if row is None:
            return None
        return TransactionRecord.model_validate(row)

    def _check_household_references(self, payload: TransactionCreate) -> None:
        violations = []
        for field, model, label in _REFERENCES:
            record_id = getattr(payload, field)
            if record_id is None:
                continue
            owner = household_of(self.db, model, record_id)
            # Missing rows are left to the foreign keys
            if owner is not None and owner != self.household_id:
                violations.append(FieldViolation(
                    field=field,
                    constraint="household",
                    message=f"{label} belongs to another household",
                ))
        if violations:
            raise ValidationError(violations)
