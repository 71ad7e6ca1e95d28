"""Models package - Import all models for SQLAlchemy registration."""
from fabudget.models.user import User
from fabudget.models.budget import Budget
from fabudget.models.income import Income
from fabudget.models.expense import Expense, ExpenseStatus, ExpensePriority
from fabudget.models.savings import Savings, SavingMethod

__all__ = [
    "User",
    "Budget",
    "Income",
    "Expense",
    "ExpenseStatus",
    "ExpensePriority",
    "Savings",
    "SavingMethod",
]
