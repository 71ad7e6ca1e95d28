"""
Budget management routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fabudget.core.utils import format_list_response, format_response
from fabudget.db.session import get_db
from fabudget.schemas.budget import BudgetCreate, BudgetResponse, BudgetUpdate
from fabudget.services import budget_service

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _dump(budget) -> dict:
    return BudgetResponse.model_validate(budget).model_dump(mode="json", by_alias=True)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_budget(budget_data: BudgetCreate, db: Session = Depends(get_db)):
    """Create a budget for a user and month."""
    budget = budget_service.create_budget(budget_data, db)
    return format_response(_dump(budget))


@router.get("")
def list_budgets(
    user_id: Optional[int] = Query(default=None, alias="userId"),
    db: Session = Depends(get_db)
):
    """List budgets, optionally for a single user."""
    budgets = budget_service.list_budgets(db, user_id=user_id)
    return format_list_response([_dump(budget) for budget in budgets])


@router.get("/{budget_id}")
def get_budget(budget_id: int, db: Session = Depends(get_db)):
    """Get a budget with its incomes, expenses and savings goals."""
    detail = budget_service.get_budget_detail(budget_id, db)
    return format_response(detail.model_dump(mode="json", by_alias=True))


@router.put("/{budget_id}")
def update_budget(budget_id: int, budget_data: BudgetUpdate, db: Session = Depends(get_db)):
    """Update a budget's descriptive fields."""
    budget = budget_service.update_budget(budget_id, budget_data, db)
    return format_response(_dump(budget))


@router.delete("/{budget_id}")
def delete_budget(budget_id: int, db: Session = Depends(get_db)):
    """Delete a budget and everything recorded under it."""
    budget_service.delete_budget(budget_id, db)
    return format_response({})
