"""Transaction model."""
import uuid

from sqlalchemy import Column, Date, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.database import Base, utc_now_iso


class Transaction(Base):
    """A single income (positive) or expense (negative) entry on an account."""

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_account_date", "account_id", "date"),
        Index("ix_transactions_date", "date"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    account_id = Column(String(36), ForeignKey("accounts.id"), nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Negative = expense, positive = income
    merchant = Column(String(255))
    description = Column(Text)
    category_id = Column(String(36), ForeignKey("categories.id"), index=True)

    # Who recorded it vs. whose expense it is
    added_by_user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    owner_user_id = Column(String(36), ForeignKey("users.id"))

    # Cards are not modeled yet, so no foreign key
    card_id = Column(String(36))

    # Timestamps
    created_at = Column(String(26), default=utc_now_iso)
    updated_at = Column(String(26), default=utc_now_iso, onupdate=utc_now_iso)

    # Relationships
    account = relationship("Account")
    category = relationship("Category")
    added_by_user = relationship("User", foreign_keys=[added_by_user_id])
    owner_user = relationship("User", foreign_keys=[owner_user_id])
