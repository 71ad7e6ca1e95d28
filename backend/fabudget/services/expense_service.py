"""
Expense service for expense-related business logic.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from fabudget.core.errors import NotFoundError
from fabudget.db.session import commit_or_conflict
from fabudget.models.expense import Expense, ExpenseStatus
from fabudget.schemas.expense import ExpenseCreate, ExpenseUpdate
from fabudget.services.aggregate_service import (
    BudgetTotals,
    ExpenseState,
    apply_expense_create,
    apply_expense_delete,
    apply_expense_update,
)
from fabudget.services.budget_service import get_budget_or_404

logger = logging.getLogger(__name__)


def get_expense_or_404(expense_id: int, db: Session) -> Expense:
    expense = db.query(Expense).filter(Expense.id == expense_id).first()
    if not expense:
        raise NotFoundError("Expense not found")
    return expense


def list_expenses(
    db: Session,
    budget_id: Optional[int] = None,
    category: Optional[str] = None,
    status: Optional[ExpenseStatus] = None
) -> List[Expense]:
    """List expenses, optionally filtered by budget, category and status."""
    query = db.query(Expense)
    if budget_id is not None:
        query = query.filter(Expense.budget_id == budget_id)
    if category:
        query = query.filter(Expense.category == category)
    if status:
        query = query.filter(Expense.status == status)
    return query.order_by(Expense.id).all()


def create_expense(data: ExpenseCreate, db: Session) -> Expense:
    """Create an expense and add it into its budget's totals."""
    budget = get_budget_or_404(data.budget_id, db, lock=True)

    expense = Expense(**data.model_dump())
    totals = apply_expense_create(BudgetTotals.from_budget(budget), ExpenseState.from_expense(expense))
    totals.write_to(budget)

    db.add(expense)
    commit_or_conflict(db)
    db.refresh(expense)
    logger.info("Created expense id=%s on budget=%s status=%s", expense.id, budget.id, expense.status.value)
    return expense


def update_expense(expense_id: int, data: ExpenseUpdate, db: Session) -> Expense:
    """Apply a partial update and move the budget totals by the difference."""
    expense = get_expense_or_404(expense_id, db)
    budget = get_budget_or_404(expense.budget_id, db, lock=True)

    old = ExpenseState.from_expense(expense)
    for field, value in data.changes().items():
        setattr(expense, field, value)
    new = ExpenseState.from_expense(expense)

    before = BudgetTotals.from_budget(budget)
    after = apply_expense_update(before, old, new)
    if after != before:
        after.write_to(budget)

    commit_or_conflict(db)
    db.refresh(expense)
    return expense


def delete_expense(expense_id: int, db: Session) -> None:
    """Delete an expense and reverse its contribution to the budget."""
    expense = get_expense_or_404(expense_id, db)
    budget = get_budget_or_404(expense.budget_id, db, lock=True)

    totals = apply_expense_delete(BudgetTotals.from_budget(budget), ExpenseState.from_expense(expense))
    totals.write_to(budget)

    db.delete(expense)
    commit_or_conflict(db)
    logger.info("Deleted expense id=%s from budget=%s", expense_id, budget.id)
