"""
Pydantic schemas for Income entity.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import AliasChoices, Field

from fabudget.schemas.common import CamelModel, Money, MoneyInput, PartialUpdate


class IncomeCreate(CamelModel):
    """Schema for income creation."""
    type: str = Field(min_length=1, max_length=100)
    amount: MoneyInput
    source: str = Field(min_length=1, max_length=200)
    expected_date: date
    received_date: Optional[date] = None
    week_of_arrival: int = Field(ge=1, le=5)
    received: bool = False
    notes: Optional[str] = None
    budget_id: int = Field(validation_alias=AliasChoices("budgetId", "budget", "budget_id"))


class IncomeUpdate(PartialUpdate):
    """Schema for income update."""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"received_date", "notes"})

    type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    amount: Optional[MoneyInput] = None
    source: Optional[str] = Field(default=None, min_length=1, max_length=200)
    expected_date: Optional[date] = None
    received_date: Optional[date] = None
    week_of_arrival: Optional[int] = Field(default=None, ge=1, le=5)
    received: Optional[bool] = None
    notes: Optional[str] = None


class IncomeResponse(CamelModel):
    """Schema for income response."""
    id: int
    type: str
    amount: Money
    source: str
    expected_date: date
    received_date: Optional[date] = None
    week_of_arrival: int
    received: bool
    notes: Optional[str] = None
    budget_id: int
    created_at: datetime
    updated_at: datetime
