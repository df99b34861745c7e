"""Accounts API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_identity, get_db
from app.models.account import Account
from app.schemas.account import AccountResponse
from app.services.auth import Identity

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List active household accounts by name."""
    return (
        db.query(Account)
        .filter(Account.household_id == identity.household_id, Account.is_active.is_(True))
        .order_by(Account.name)
        .all()
    )
