"""
Income service: income writes and the budget totals they drive.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from fabudget.core.errors import NotFoundError
from fabudget.db.session import commit_or_conflict
from fabudget.models.income import Income
from fabudget.schemas.income import IncomeCreate, IncomeUpdate
from fabudget.services.aggregate_service import (
    BudgetTotals,
    IncomeState,
    apply_income_create,
    apply_income_delete,
    apply_income_update,
)
from fabudget.services.budget_service import get_budget_or_404

logger = logging.getLogger(__name__)


def get_income_or_404(income_id: int, db: Session) -> Income:
    income = db.query(Income).filter(Income.id == income_id).first()
    if not income:
        raise NotFoundError("Income not found")
    return income


def list_incomes(db: Session, budget_id: Optional[int] = None) -> List[Income]:
    query = db.query(Income)
    if budget_id is not None:
        query = query.filter(Income.budget_id == budget_id)
    return query.order_by(Income.id).all()


def create_income(data: IncomeCreate, db: Session) -> Income:
    """Create an income and add it into its budget's totals."""
    budget = get_budget_or_404(data.budget_id, db, lock=True)

    income = Income(**data.model_dump())
    totals = apply_income_create(BudgetTotals.from_budget(budget), IncomeState.from_income(income))
    totals.write_to(budget)

    db.add(income)
    commit_or_conflict(db)
    db.refresh(income)
    logger.info("Created income id=%s on budget=%s", income.id, budget.id)
    return income


def update_income(income_id: int, data: IncomeUpdate, db: Session) -> Income:
    """Apply a partial update and move the budget totals by the difference."""
    income = get_income_or_404(income_id, db)
    budget = get_budget_or_404(income.budget_id, db, lock=True)

    old = IncomeState.from_income(income)
    for field, value in data.changes().items():
        setattr(income, field, value)
    new = IncomeState.from_income(income)

    before = BudgetTotals.from_budget(budget)
    after = apply_income_update(before, old, new)
    if after != before:
        after.write_to(budget)

    commit_or_conflict(db)
    db.refresh(income)
    return income


def delete_income(income_id: int, db: Session) -> None:
    """Delete an income and subtract its contribution from the budget."""
    income = get_income_or_404(income_id, db)
    budget = get_budget_or_404(income.budget_id, db, lock=True)

    totals = apply_income_delete(BudgetTotals.from_budget(budget), IncomeState.from_income(income))
    totals.write_to(budget)

    db.delete(income)
    commit_or_conflict(db)
    logger.info("Deleted income id=%s from budget=%s", income_id, budget.id)
