"""
Pydantic schemas for Budget entity.
"""
from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import AliasChoices, Field, field_validator

from fabudget.schemas.common import CamelModel, Money, PartialUpdate
from fabudget.schemas.income import IncomeResponse
from fabudget.schemas.expense import ExpenseResponse
from fabudget.schemas.savings import SavingsResponse


class BudgetCreate(CamelModel):
    """Schema for budget creation. Totals always start at zero."""
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=2020)
    title: str = Field(min_length=1, max_length=200)
    user_id: int = Field(validation_alias=AliasChoices("userId", "user", "user_id"))
    notes: Optional[str] = None
    is_active: bool = True

    @field_validator("title", "notes")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class BudgetUpdate(PartialUpdate):
    """Schema for budget update; derived totals are not client-writable."""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"notes"})

    month: Optional[int] = Field(default=None, ge=1, le=12)
    year: Optional[int] = Field(default=None, ge=2020)
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class BudgetResponse(CamelModel):
    """Schema for budget response."""
    id: int
    month: int
    year: int
    title: str
    user_id: int
    total_income: Money
    total_budgeted_expenses: Money
    total_actual_expenses: Money
    balance_projected: Money
    balance_actual: Money
    notes: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    version: int = Field(serialization_alias="__v")


class BudgetDetailResponse(BudgetResponse):
    """Budget with its incomes, expenses and savings goals joined in."""
    incomes: List[IncomeResponse] = []
    expenses: List[ExpenseResponse] = []
    savings: List[SavingsResponse] = []
