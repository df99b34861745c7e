"""Household model."""
import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.database import Base, utc_now_iso


class Household(Base):
    """Tenancy boundary grouping users, accounts and categories."""

    __tablename__ = "households"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    created_at = Column(String(26), default=utc_now_iso)
    updated_at = Column(String(26), default=utc_now_iso, onupdate=utc_now_iso)

    # Relationships
    users = relationship("User", back_populates="household")
    accounts = relationship("Account", back_populates="household")
    categories = relationship("Category", back_populates="household")
