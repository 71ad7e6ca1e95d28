"""
Expense model for planned and actual spending.
"""
from decimal import Decimal
from sqlalchemy import Column, String, Numeric, Date, Boolean, Enum as SQLEnum, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from fabudget.db.base import BaseModel
import enum


class ExpenseStatus(str, enum.Enum):
    """Expense payment status."""
    PAID = "Paid"
    UNPAID = "Unpaid"
    PARTIAL = "Partial"


class ExpensePriority(str, enum.Enum):
    """Expense priority."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# Statuses whose actual amount counts toward actual expenses
SPENT_STATUSES = frozenset({ExpenseStatus.PAID, ExpenseStatus.PARTIAL})


class Expense(BaseModel):
    """Expense line item owned by a budget."""
    __tablename__ = "expenses"

    name = Column(String(200), nullable=False)
    budgeted_amount = Column(Numeric(15, 2), nullable=False)
    actual_amount = Column(Numeric(15, 2), nullable=False, default=Decimal(0))
    priority = Column(SQLEnum(ExpensePriority, values_callable=lambda e: [m.value for m in e]),
                      default=ExpensePriority.MEDIUM, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    expected_purchase_date = Column(Date, nullable=False)
    actual_purchase_date = Column(Date, nullable=True)
    status = Column(SQLEnum(ExpenseStatus, values_callable=lambda e: [m.value for m in e]),
                    default=ExpenseStatus.UNPAID, nullable=False, index=True)
    recurring = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
    budget_id = Column(Integer, ForeignKey("budgets.id"), nullable=False, index=True)

    # Relationships
    budget = relationship("Budget", back_populates="expenses")
