"""
Savings goal routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from fabudget.core.utils import format_list_response, format_response
from fabudget.db.session import get_db
from fabudget.schemas.savings import SavingsCreate, SavingsResponse, SavingsUpdate
from fabudget.services import savings_service

router = APIRouter(prefix="/savings", tags=["savings"])


def _dump(savings) -> dict:
    return SavingsResponse.model_validate(savings).model_dump(mode="json", by_alias=True)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_savings(savings_data: SavingsCreate, db: Session = Depends(get_db)):
    """Create a savings goal."""
    return format_response(_dump(savings_service.create_savings(savings_data, db)))


@router.get("")
def list_savings(
    budget_id: Optional[int] = Query(default=None, alias="budgetId"),
    db: Session = Depends(get_db)
):
    goals = savings_service.list_savings(db, budget_id=budget_id)
    return format_list_response([_dump(goal) for goal in goals])


@router.get("/{savings_id}")
def get_savings(savings_id: int, db: Session = Depends(get_db)):
    return format_response(_dump(savings_service.get_savings_or_404(savings_id, db)))


@router.put("/{savings_id}")
def update_savings(savings_id: int, savings_data: SavingsUpdate, db: Session = Depends(get_db)):
    """Update a savings goal; progress is recomputed before saving."""
    return format_response(_dump(savings_service.update_savings(savings_id, savings_data, db)))


@router.delete("/{savings_id}")
def delete_savings(savings_id: int, db: Session = Depends(get_db)):
    savings_service.delete_savings(savings_id, db)
    return format_response({})
