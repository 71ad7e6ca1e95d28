"""
Budget aggregate maintenance.

A budget carries five derived fields that are kept in step with its incomes
and expenses by delta arithmetic: each mutation of a child adjusts the totals
by the amount that changed instead of re-summing every child. The functions
here are pure. They take a ``BudgetTotals`` snapshot plus the old and/or new
child state and return the next snapshot; the caller writes it back to the
budget row once, in the same commit as the child.
"""
from dataclasses import dataclass, replace
from decimal import Decimal

from fabudget.models.expense import ExpenseStatus, SPENT_STATUSES

ZERO = Decimal(0)


def _money(value) -> Decimal:
    return ZERO if value is None else Decimal(value)


@dataclass(frozen=True)
class BudgetTotals:
    """Snapshot of a budget's derived fields."""
    total_income: Decimal = ZERO
    total_budgeted_expenses: Decimal = ZERO
    total_actual_expenses: Decimal = ZERO
    balance_projected: Decimal = ZERO
    balance_actual: Decimal = ZERO

    @classmethod
    def from_budget(cls, budget) -> "BudgetTotals":
        return cls(
            total_income=_money(budget.total_income),
            total_budgeted_expenses=_money(budget.total_budgeted_expenses),
            total_actual_expenses=_money(budget.total_actual_expenses),
            balance_projected=_money(budget.balance_projected),
            balance_actual=_money(budget.balance_actual),
        )

    def write_to(self, budget) -> None:
        budget.total_income = self.total_income
        budget.total_budgeted_expenses = self.total_budgeted_expenses
        budget.total_actual_expenses = self.total_actual_expenses
        budget.balance_projected = self.balance_projected
        budget.balance_actual = self.balance_actual

    def with_projected(self, **changes) -> "BudgetTotals":
        """Apply ``changes`` and recompute the projected balance."""
        updated = replace(self, **changes)
        return replace(
            updated,
            balance_projected=updated.total_income - updated.total_budgeted_expenses,
        )


@dataclass(frozen=True)
class IncomeState:
    amount: Decimal
    received: bool

    def __post_init__(self):
        assert isinstance(self.amount, Decimal), "income amount must be a Decimal"
        assert isinstance(self.received, bool), "income received flag must be a bool"

    @classmethod
    def from_income(cls, income) -> "IncomeState":
        return cls(amount=_money(income.amount), received=bool(income.received))


@dataclass(frozen=True)
class ExpenseState:
    budgeted_amount: Decimal
    actual_amount: Decimal
    status: ExpenseStatus

    def __post_init__(self):
        assert isinstance(self.budgeted_amount, Decimal), "budgeted amount must be a Decimal"
        assert isinstance(self.actual_amount, Decimal), "actual amount must be a Decimal"
        # Accept raw strings from callers but store the enum
        object.__setattr__(self, "status", ExpenseStatus(self.status))

    @property
    def counts_as_spent(self) -> bool:
        return self.status in SPENT_STATUSES

    @classmethod
    def from_expense(cls, expense) -> "ExpenseState":
        return cls(
            budgeted_amount=_money(expense.budgeted_amount),
            actual_amount=_money(expense.actual_amount),
            status=expense.status or ExpenseStatus.UNPAID,
        )


# ---------------------------------------------------------------------------
# Incomes
# ---------------------------------------------------------------------------


def apply_income_create(budget: BudgetTotals, income: IncomeState) -> BudgetTotals:
    """Add a new income into the budget totals."""
    balance_actual = budget.balance_actual
    if income.received:
        balance_actual += income.amount
    return budget.with_projected(
        total_income=budget.total_income + income.amount,
        balance_actual=balance_actual,
    )


def apply_income_update(budget: BudgetTotals, old: IncomeState, new: IncomeState) -> BudgetTotals:
    """
    Apply the difference between two versions of an income.

    Returns the snapshot unchanged when neither the amount nor the received
    flag moved.
    """
    if old.amount == new.amount and old.received == new.received:
        return budget

    balance_actual = budget.balance_actual
    if old.received and not new.received:
        balance_actual -= old.amount
    elif not old.received and new.received:
        balance_actual += new.amount
    elif old.received and new.received and old.amount != new.amount:
        balance_actual += new.amount - old.amount

    return budget.with_projected(
        total_income=budget.total_income + (new.amount - old.amount),
        balance_actual=balance_actual,
    )


def apply_income_delete(budget: BudgetTotals, income: IncomeState) -> BudgetTotals:
    """Remove an income's contribution from the budget totals."""
    balance_actual = budget.balance_actual
    if income.received:
        balance_actual -= income.amount
    return budget.with_projected(
        total_income=budget.total_income - income.amount,
        balance_actual=balance_actual,
    )


# ---------------------------------------------------------------------------
# Expenses
# ---------------------------------------------------------------------------


def _add_actual(budget: BudgetTotals, expense: ExpenseState, sign: int) -> BudgetTotals:
    if not expense.counts_as_spent:
        return budget
    delta = expense.actual_amount * sign
    return replace(
        budget,
        total_actual_expenses=budget.total_actual_expenses + delta,
        balance_actual=budget.balance_actual - delta,
    )


def apply_expense_create(budget: BudgetTotals, expense: ExpenseState) -> BudgetTotals:
    """Add a new expense into the budget totals."""
    budget = budget.with_projected(
        total_budgeted_expenses=budget.total_budgeted_expenses + expense.budgeted_amount,
    )
    return _add_actual(budget, expense, 1)


def apply_expense_update(budget: BudgetTotals, old: ExpenseState, new: ExpenseState) -> BudgetTotals:
    """
    Apply the difference between two versions of an expense.

    The budgeted and actual adjustments are independent and may both apply.
    For the actual side the old contribution is reversed before the new one
    is added, so any status transition is handled uniformly.
    """
    if old.budgeted_amount != new.budgeted_amount:
        budget = budget.with_projected(
            total_budgeted_expenses=(
                budget.total_budgeted_expenses + (new.budgeted_amount - old.budgeted_amount)
            ),
        )

    if old.status != new.status or old.actual_amount != new.actual_amount:
        budget = _add_actual(budget, old, -1)
        budget = _add_actual(budget, new, 1)

    return budget


def apply_expense_delete(budget: BudgetTotals, expense: ExpenseState) -> BudgetTotals:
    """Remove an expense's contribution from the budget totals."""
    budget = budget.with_projected(
        total_budgeted_expenses=budget.total_budgeted_expenses - expense.budgeted_amount,
    )
    return _add_actual(budget, expense, -1)
