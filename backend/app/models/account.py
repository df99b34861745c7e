"""Account model."""
import enum
import uuid

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from app.database import Base, utc_now_iso


class AccountType(str, enum.Enum):
    """Kinds of financial accounts a household can track."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT_CARD = "credit_card"
    INVESTMENT = "investment"
    LOAN = "loan"
    OTHER = "other"


class Account(Base):
    """Bank, card or investment account owned by a household."""

    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    institution = Column(String(255))
    type = Column(
        Enum(AccountType, name="account_type", values_callable=lambda members: [m.value for m in members]),
        nullable=False,
    )
    last_four = Column(String(4))
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    household_id = Column(String(36), ForeignKey("households.id"), nullable=False, index=True)
    created_at = Column(String(26), default=utc_now_iso)
    updated_at = Column(String(26), default=utc_now_iso, onupdate=utc_now_iso)

    # Relationships
    household = relationship("Household", back_populates="accounts")
