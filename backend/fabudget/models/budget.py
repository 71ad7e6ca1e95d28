"""
Budget model for monthly budget tracking.
"""
from decimal import Decimal
from sqlalchemy import Column, String, Numeric, ForeignKey, Integer, Boolean, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from fabudget.db.base import BaseModel


class Budget(BaseModel):
    """Monthly budget per user with incrementally maintained totals."""
    __tablename__ = "budgets"

    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    title = Column(String(200), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Derived totals, only written through the aggregate service
    total_income = Column(Numeric(15, 2), nullable=False, default=Decimal(0))
    total_budgeted_expenses = Column(Numeric(15, 2), nullable=False, default=Decimal(0))
    total_actual_expenses = Column(Numeric(15, 2), nullable=False, default=Decimal(0))
    balance_projected = Column(Numeric(15, 2), nullable=False, default=Decimal(0))
    balance_actual = Column(Numeric(15, 2), nullable=False, default=Decimal(0))

    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    version = Column(Integer, nullable=False)

    # Relationships
    user = relationship("User", back_populates="budgets")
    incomes = relationship("Income", back_populates="budget", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="budget", cascade="all, delete-orphan")
    savings = relationship("Savings", back_populates="budget", cascade="all, delete-orphan")

    # Unique constraint: one budget per user per month
    __table_args__ = (
        UniqueConstraint('month', 'year', 'user_id', name='uq_budget_month_year_user'),
    )
    __mapper_args__ = {"version_id_col": version}
