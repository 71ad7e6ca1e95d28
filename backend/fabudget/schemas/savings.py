"""
Pydantic schemas for Savings entity.
"""
from datetime import datetime
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional

from pydantic import AliasChoices, Field

from fabudget.models.savings import SavingMethod
from fabudget.schemas.common import CamelModel, Money, MoneyInput, PartialUpdate


class SavingsCreate(CamelModel):
    """Schema for savings goal creation. Progress is derived, never accepted."""
    target_amount: MoneyInput
    actual_amount: MoneyInput = Decimal(0)
    saving_method: SavingMethod = SavingMethod.MANUAL
    goal: str = Field(min_length=1, max_length=200)
    notes: Optional[str] = None
    budget_id: int = Field(validation_alias=AliasChoices("budgetId", "budget", "budget_id"))


class SavingsUpdate(PartialUpdate):
    """Schema for savings goal update."""
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"notes"})

    target_amount: Optional[MoneyInput] = None
    actual_amount: Optional[MoneyInput] = None
    saving_method: Optional[SavingMethod] = None
    goal: Optional[str] = Field(default=None, min_length=1, max_length=200)
    notes: Optional[str] = None


class SavingsResponse(CamelModel):
    """Schema for savings goal response."""
    id: int
    target_amount: Money
    actual_amount: Money
    saving_method: SavingMethod
    goal: str
    progress_percentage: Money
    notes: Optional[str] = None
    budget_id: int
    created_at: datetime
    updated_at: datetime
