"""Category model."""
import uuid

from sqlalchemy import Column, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.database import Base, utc_now_iso


class Category(Base):
    """Spending/income category. Categories form a tree through parent_id."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    description = Column(Text)
    color = Column(String(50))  # Hex color for display
    icon = Column(String(50))  # Icon name for display
    parent_id = Column(String(36), ForeignKey("categories.id"), index=True)
    household_id = Column(String(36), ForeignKey("households.id"), nullable=False, index=True)
    created_at = Column(String(26), default=utc_now_iso)
    updated_at = Column(String(26), default=utc_now_iso, onupdate=utc_now_iso)

    # Relationships
    household = relationship("Household", back_populates="categories")
