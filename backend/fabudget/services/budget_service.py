"""
Budget service for budget-related business logic.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fabudget.core.errors import NotFoundError, ValidationFailed
from fabudget.db.session import commit_or_conflict
from fabudget.models.budget import Budget
from fabudget.models.expense import Expense
from fabudget.models.income import Income
from fabudget.models.savings import Savings
from fabudget.models.user import User
from fabudget.schemas.budget import BudgetCreate, BudgetDetailResponse, BudgetResponse, BudgetUpdate
from fabudget.schemas.expense import ExpenseResponse
from fabudget.schemas.income import IncomeResponse
from fabudget.schemas.savings import SavingsResponse

logger = logging.getLogger(__name__)

DUPLICATE_BUDGET = "Budget already exists for this month and year"


def get_budget_or_404(budget_id: int, db: Session, lock: bool = False) -> Budget:
    """
    Load a budget or raise NotFoundError.

    With ``lock`` the row is read ``FOR UPDATE`` so the read-modify-write of
    its totals is serialized on backends that support row locks.
    """
    query = db.query(Budget).filter(Budget.id == budget_id)
    if lock:
        query = query.with_for_update()
    budget = query.first()
    if not budget:
        raise NotFoundError("Budget not found")
    return budget


def _ensure_unique_period(db: Session, month: int, year: int, user_id: int, exclude_id: Optional[int] = None):
    query = db.query(Budget.id).filter(
        Budget.month == month,
        Budget.year == year,
        Budget.user_id == user_id
    )
    if exclude_id is not None:
        query = query.filter(Budget.id != exclude_id)
    if query.first():
        raise ValidationFailed(DUPLICATE_BUDGET)


def _commit_budget(db: Session) -> None:
    # The unique index still guards against a racing insert
    try:
        commit_or_conflict(db)
    except IntegrityError as exc:
        db.rollback()
        raise ValidationFailed(DUPLICATE_BUDGET) from exc


def create_budget(data: BudgetCreate, db: Session) -> Budget:
    """Create an empty budget for a user and month."""
    if not db.query(User.id).filter(User.id == data.user_id).first():
        raise NotFoundError("User not found")
    _ensure_unique_period(db, data.month, data.year, data.user_id)

    budget = Budget(
        month=data.month,
        year=data.year,
        title=data.title,
        user_id=data.user_id,
        notes=data.notes,
        is_active=data.is_active
    )
    db.add(budget)
    _commit_budget(db)
    db.refresh(budget)
    logger.info("Created budget id=%s for user=%s (%s/%s)", budget.id, budget.user_id, budget.month, budget.year)
    return budget


def list_budgets(db: Session, user_id: Optional[int] = None) -> List[Budget]:
    query = db.query(Budget)
    if user_id is not None:
        query = query.filter(Budget.user_id == user_id)
    return query.order_by(Budget.year, Budget.month, Budget.id).all()


def get_budget_detail(budget_id: int, db: Session) -> BudgetDetailResponse:
    """Fetch a budget and join its incomes, expenses and savings goals."""
    budget = get_budget_or_404(budget_id, db)
    incomes = db.query(Income).filter(Income.budget_id == budget_id).order_by(Income.id).all()
    expenses = db.query(Expense).filter(Expense.budget_id == budget_id).order_by(Expense.id).all()
    savings = db.query(Savings).filter(Savings.budget_id == budget_id).order_by(Savings.id).all()

    summary = BudgetResponse.model_validate(budget)
    return BudgetDetailResponse.model_validate({
        **summary.model_dump(),
        "incomes": [IncomeResponse.model_validate(item) for item in incomes],
        "expenses": [ExpenseResponse.model_validate(item) for item in expenses],
        "savings": [SavingsResponse.model_validate(item) for item in savings],
    })


def update_budget(budget_id: int, data: BudgetUpdate, db: Session) -> Budget:
    """Update descriptive budget fields; totals are left to the aggregate service."""
    budget = get_budget_or_404(budget_id, db, lock=True)
    changes = data.changes()

    month = changes.get("month", budget.month)
    year = changes.get("year", budget.year)
    if (month, year) != (budget.month, budget.year):
        _ensure_unique_period(db, month, year, budget.user_id, exclude_id=budget.id)

    if "title" in changes:
        changes["title"] = changes["title"].strip()
    for field, value in changes.items():
        setattr(budget, field, value)

    _commit_budget(db)
    db.refresh(budget)
    return budget


def delete_budget(budget_id: int, db: Session) -> None:
    """Delete a budget together with its incomes, expenses and savings goals."""
    budget = get_budget_or_404(budget_id, db, lock=True)
    db.delete(budget)
    commit_or_conflict(db)
    logger.info("Deleted budget id=%s and its line items", budget_id)
