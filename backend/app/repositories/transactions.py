"""Transaction persistence and lookup."""
from datetime import date

from sqlalchemy.orm import Query, Session, contains_eager, joinedload

from app.models.account import Account
from app.models.transaction import Transaction
from app.schemas.transaction import TransactionCreate


def _household_transactions(db: Session, household_id: str) -> Query:
    """Transactions whose account belongs to the household, with display relations loaded."""
    return (
        db.query(Transaction)
        .join(Account, Transaction.account_id == Account.id)
        .filter(Account.household_id == household_id)
        .options(
            contains_eager(Transaction.account),
            joinedload(Transaction.category),
            joinedload(Transaction.added_by_user),
            joinedload(Transaction.owner_user),
        )
    )


def insert_transaction(
    db: Session,
    data: TransactionCreate,
    added_by_user_id: str,
) -> Transaction:
    """Stage a new transaction and flush it so the database assigns defaults.

    Raises sqlalchemy errors from the flush unchanged; the caller owns the
    transaction boundary.
    """
    txn = Transaction(**data.model_dump(), added_by_user_id=added_by_user_id)
    db.add(txn)
    db.flush()
    return txn


def list_transactions(
    db: Session,
    household_id: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Transaction]:
    """Get household transactions, newest first, optionally within [start_date, end_date]."""
    query = _household_transactions(db, household_id)

    if start_date:
        query = query.filter(Transaction.date >= start_date)

    if end_date:
        query = query.filter(Transaction.date <= end_date)

    return query.order_by(
        Transaction.date.desc(),
        Transaction.created_at.desc(),
        Transaction.id.desc(),
    ).all()


def get_transaction(db: Session, household_id: str, transaction_id: str) -> Transaction | None:
    """Get one household transaction with its relations, or None."""
    return _household_transactions(db, household_id).filter(Transaction.id == transaction_id).first()
