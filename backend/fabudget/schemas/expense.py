"""
Pydantic schemas for Expense entity.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import AliasChoices, Field

from fabudget.models.expense import ExpensePriority, ExpenseStatus
from fabudget.schemas.common import CamelModel, Money, MoneyInput, PartialUpdate


class ExpenseCreate(CamelModel):
    """Schema for expense creation."""
    name: str = Field(min_length=1, max_length=200)
    budgeted_amount: MoneyInput
    actual_amount: MoneyInput = Decimal(0)
    priority: ExpensePriority = ExpensePriority.MEDIUM
    category: str = Field(min_length=1, max_length=100)
    expected_purchase_date: date
    actual_purchase_date: Optional[date] = None
    status: ExpenseStatus = ExpenseStatus.UNPAID
    recurring: bool = False
    notes: Optional[str] = None
    budget_id: int = Field(validation_alias=AliasChoices("budgetId", "budget", "budget_id"))


class ExpenseUpdate(PartialUpdate):
    """Schema for expense update."""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"actual_purchase_date", "notes"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    budgeted_amount: Optional[MoneyInput] = None
    actual_amount: Optional[MoneyInput] = None
    priority: Optional[ExpensePriority] = None
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    expected_purchase_date: Optional[date] = None
    actual_purchase_date: Optional[date] = None
    status: Optional[ExpenseStatus] = None
    recurring: Optional[bool] = None
    notes: Optional[str] = None


class ExpenseResponse(CamelModel):
    """Schema for expense response."""
    id: int
    name: str
    budgeted_amount: Money
    actual_amount: Money
    priority: ExpensePriority
    category: str
    expected_purchase_date: date
    actual_purchase_date: Optional[date] = None
    status: ExpenseStatus
    recurring: bool
    notes: Optional[str] = None
    budget_id: int
    created_at: datetime
    updated_at: datetime
