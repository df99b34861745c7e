"""User model."""
import uuid

from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.database import Base, utc_now_iso


class User(Base):
    """Household member who can sign in and record transactions."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    settings = Column(Text, default="{}")  # JSON for theme, notification prefs, etc.
    household_id = Column(String(36), ForeignKey("households.id"), nullable=False, index=True)
    created_at = Column(String(26), default=utc_now_iso)
    updated_at = Column(String(26), default=utc_now_iso, onupdate=utc_now_iso)

    # Relationships
    household = relationship("Household", back_populates="users")
