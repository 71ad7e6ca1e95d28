"""
Income model for money expected or received within a budget.
"""
from sqlalchemy import Column, String, Numeric, Date, Boolean, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from fabudget.db.base import BaseModel


class Income(BaseModel):
    """Income line item owned by a budget."""
    __tablename__ = "incomes"

    type = Column(String(100), nullable=False)  # salary, gift, loan...
    amount = Column(Numeric(15, 2), nullable=False)
    source = Column(String(200), nullable=False)
    expected_date = Column(Date, nullable=False)
    received_date = Column(Date, nullable=True)
    week_of_arrival = Column(Integer, nullable=False)  # 1-5
    received = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
    budget_id = Column(Integer, ForeignKey("budgets.id"), nullable=False, index=True)

    # Relationships
    budget = relationship("Budget", back_populates="incomes")
