"""Household users API endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_identity, get_db
from app.models.user import User
from app.schemas.user import UserSummary
from app.services.auth import Identity

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserSummary])
def list_users(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """List members of the caller's household (for owner pickers)."""
    return (
        db.query(User)
        .filter(User.household_id == identity.household_id)
        .order_by(User.first_name, User.last_name)
        .all()
    )
