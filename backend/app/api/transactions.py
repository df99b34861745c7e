"""Transactions API endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_identity, get_db
from app.errors import ValidationError
from app.schemas.transaction import TransactionRecord
from app.services.auth import Identity
from app.services.transaction_validation import validate_transaction_payload
from app.services.transactions import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=TransactionRecord, status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Record a transaction. The adding user is always the caller."""
    result = validate_transaction_payload(payload)
    if not result.is_valid:
        raise ValidationError(result.violations)

    service = TransactionService(db, identity.household_id)
    return service.create(result.record, acting_user_id=identity.user_id)


@router.get("", response_model=list[TransactionRecord])
def list_transactions(
    month: str | None = Query(None, description="Month to show (YYYY-MM)"),
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List household transactions, newest first."""
    return TransactionService(db, identity.household_id).find_all(month)


@router.get("/{transaction_id}", response_model=TransactionRecord)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Get a single transaction."""
    record = TransactionService(db, identity.household_id).find_one(transaction_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )
    return record
