"""
Expense management routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fabudget.core.utils import format_list_response, format_response
from fabudget.db.session import get_db
from fabudget.models.expense import ExpenseStatus
from fabudget.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from fabudget.services import expense_service

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _dump(expense) -> dict:
    return ExpenseResponse.model_validate(expense).model_dump(mode="json", by_alias=True)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_expense(expense_data: ExpenseCreate, db: Session = Depends(get_db)):
    """Create an expense and update its budget totals."""
    return format_response(_dump(expense_service.create_expense(expense_data, db)))


@router.get("")
def list_expenses(
    budget_id: Optional[int] = Query(default=None, alias="budgetId"),
    category: Optional[str] = None,
    status: Optional[ExpenseStatus] = None,
    db: Session = Depends(get_db)
):
    """List expenses filtered by budget, category and status."""
    expenses = expense_service.list_expenses(db, budget_id=budget_id, category=category, status=status)
    return format_list_response([_dump(expense) for expense in expenses])


@router.get("/{expense_id}")
def get_expense(expense_id: int, db: Session = Depends(get_db)):
    return format_response(_dump(expense_service.get_expense_or_404(expense_id, db)))


@router.put("/{expense_id}")
def update_expense(expense_id: int, expense_data: ExpenseUpdate, db: Session = Depends(get_db)):
    """Update an expense; budgeted and actual totals move by the difference."""
    return format_response(_dump(expense_service.update_expense(expense_id, expense_data, db)))


@router.delete("/{expense_id}")
def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    expense_service.delete_expense(expense_id, db)
    return format_response({})
