"""
Savings goal model.
"""
from decimal import Decimal
from sqlalchemy import Column, String, Numeric, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from fabudget.db.base import BaseModel
import enum


class SavingMethod(str, enum.Enum):
    """How money is moved into the goal."""
    MANUAL = "Manual"
    AUTO_DEDUCTION = "Auto-deduction"
    BANK_TRANSFER = "Bank Transfer"
    OTHER = "Other"


class Savings(BaseModel):
    """Savings goal attached to a budget; does not feed budget totals."""
    __tablename__ = "savings"

    target_amount = Column(Numeric(15, 2), nullable=False)
    actual_amount = Column(Numeric(15, 2), nullable=False, default=Decimal(0))
    saving_method = Column(SQLEnum(SavingMethod, values_callable=lambda e: [m.value for m in e]),
                           default=SavingMethod.MANUAL, nullable=False)
    goal = Column(String(200), nullable=False)
    progress_percentage = Column(Numeric(5, 2), nullable=False, default=Decimal(0))
    notes = Column(Text, nullable=True)
    budget_id = Column(Integer, ForeignKey("budgets.id"), nullable=False, index=True)

    # Relationships
    budget = relationship("Budget", back_populates="savings")
