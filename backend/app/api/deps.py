"""Shared FastAPI dependencies."""
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.services.auth import Identity, decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")

__all__ = ["get_db", "get_current_identity", "get_current_user"]


def _credentials_exception(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a user that still exists."""
    identity = decode_access_token(token)
    if identity is None:
        raise _credentials_exception("Could not validate credentials")

    user = db.query(User).filter(User.id == identity.user_id).first()
    if user is None:
        raise _credentials_exception("User not found")

    # Household is fixed at registration, so the token and row must agree
    if user.household_id != identity.household_id:
        raise _credentials_exception("Could not validate credentials")

    return user


def get_current_identity(user: User = Depends(get_current_user)) -> Identity:
    """Caller identity used to scope queries and stamp new records."""
    return Identity(user_id=user.id, household_id=user.household_id, email=user.email)
