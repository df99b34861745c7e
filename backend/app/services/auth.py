"""Credential checks and access-token handling."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging

import bcrypt
from jose import JWTError, jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.errors import DuplicateUser, InvalidCredentials, ValidationError
from app.models.household import Household
from app.models.user import User
from app.schemas.auth import MAX_PASSWORD_BYTES, Token, UserLogin, UserRegister, UserResponse
from app.schemas.common import FieldViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Verified caller identity carried by an access token."""

    user_id: str
    household_id: str
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Over-long passwords never match."""
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(
        password_bytes,
        hashed_password.encode("utf-8"),
    )


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return bcrypt.hashpw(
        password.encode("utf-8"),
        bcrypt.gensalt(rounds=get_settings().bcrypt_rounds),
    ).decode("utf-8")


def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token scoped to the user's household."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode = {
        "sub": user.id,
        "email": user.email,
        "household_id": user.household_id,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Identity | None:
    """Return the identity in a valid access token, or None if it is unusable."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    if payload.get("type") != "access":
        return None

    user_id = payload.get("sub")
    household_id = payload.get("household_id")
    if not user_id or not household_id:
        return None

    return Identity(user_id=user_id, household_id=household_id, email=payload.get("email", ""))


def _token_for(user: User) -> Token:
    return Token(access_token=create_access_token(user), user=UserResponse.model_validate(user))


def login(db: Session, credentials: UserLogin) -> Token:
    """Check email/password and issue an access token.

    Raises:
        InvalidCredentials: unknown email or wrong password.
    """
    user = db.query(User).filter(User.email == credentials.email.lower()).first()

    if not user or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Rejected login for {credentials.email}")
        raise InvalidCredentials()

    return _token_for(user)


def register(db: Session, user_data: UserRegister) -> Token:
    """Create a user in an existing household and sign them in.

    Raises:
        DuplicateUser: the email is already registered.
        ValidationError: the household does not exist.
    """
    email = user_data.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise DuplicateUser(email)

    if db.get(Household, user_data.household_id) is None:
        raise ValidationError([
            FieldViolation(field="household_id", constraint="exists", message="Household not found"),
        ])

    user = User(
        email=email,
        password_hash=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        household_id=user_data.household_id,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise DuplicateUser(email) from exc
    db.refresh(user)

    logger.info(f"Registered user {user.id} in household {user.household_id}")
    return _token_for(user)
