"""
Income management routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fabudget.core.utils import format_list_response, format_response
from fabudget.db.session import get_db
from fabudget.schemas.income import IncomeCreate, IncomeResponse, IncomeUpdate
from fabudget.services import income_service

router = APIRouter(prefix="/incomes", tags=["incomes"])


def _dump(income) -> dict:
    return IncomeResponse.model_validate(income).model_dump(mode="json", by_alias=True)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_income(income_data: IncomeCreate, db: Session = Depends(get_db)):
    """Create an income and update its budget totals."""
    return format_response(_dump(income_service.create_income(income_data, db)))


@router.get("")
def list_incomes(
    budget_id: Optional[int] = Query(default=None, alias="budgetId"),
    db: Session = Depends(get_db)
):
    """List incomes, optionally for one budget."""
    incomes = income_service.list_incomes(db, budget_id=budget_id)
    return format_list_response([_dump(income) for income in incomes])


@router.get("/{income_id}")
def get_income(income_id: int, db: Session = Depends(get_db)):
    return format_response(_dump(income_service.get_income_or_404(income_id, db)))


@router.put("/{income_id}")
def update_income(income_id: int, income_data: IncomeUpdate, db: Session = Depends(get_db)):
    """Update an income; the budget moves by the difference."""
    return format_response(_dump(income_service.update_income(income_id, income_data, db)))


@router.delete("/{income_id}")
def delete_income(income_id: int, db: Session = Depends(get_db)):
    income_service.delete_income(income_id, db)
    return format_response({})
