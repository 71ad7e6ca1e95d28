"""
Savings service: the progress rule and savings goal writes.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from fabudget.core.errors import NotFoundError
from fabudget.models.savings import Savings
from fabudget.schemas.savings import SavingsCreate, SavingsUpdate
from fabudget.services.budget_service import get_budget_or_404

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)
ZERO = Decimal(0)
PERCENT_PLACES = Decimal("0.01")


def recompute_progress(target_amount: Decimal, actual_amount: Decimal, current: Decimal) -> Decimal:
    """
    Return the progress percentage for a goal, clamped to [0, 100].

    A non-positive target leaves ``current`` untouched.
    """
    target = Decimal(target_amount or 0)
    if target <= ZERO:
        return current
    progress = Decimal(actual_amount or 0) / target * HUNDRED
    return min(HUNDRED, max(ZERO, progress))


def prepare_savings_for_save(savings: Savings) -> Savings:
    """Recompute derived fields on a savings goal right before it is persisted."""
    current = savings.progress_percentage if savings.progress_percentage is not None else ZERO
    progress = recompute_progress(savings.target_amount, savings.actual_amount, Decimal(current))
    # Column holds two decimal places
    savings.progress_percentage = progress.quantize(PERCENT_PLACES)
    return savings


def get_savings_or_404(savings_id: int, db: Session) -> Savings:
    savings = db.query(Savings).filter(Savings.id == savings_id).first()
    if not savings:
        raise NotFoundError("Savings goal not found")
    return savings


def list_savings(db: Session, budget_id: Optional[int] = None) -> List[Savings]:
    query = db.query(Savings)
    if budget_id is not None:
        query = query.filter(Savings.budget_id == budget_id)
    return query.order_by(Savings.id).all()


def create_savings(data: SavingsCreate, db: Session) -> Savings:
    """Create a savings goal under an existing budget."""
    get_budget_or_404(data.budget_id, db)

    savings = Savings(**data.model_dump())
    prepare_savings_for_save(savings)
    db.add(savings)
    db.commit()
    db.refresh(savings)
    logger.info("Created savings goal id=%s on budget=%s", savings.id, savings.budget_id)
    return savings


def update_savings(savings_id: int, data: SavingsUpdate, db: Session) -> Savings:
    savings = get_savings_or_404(savings_id, db)
    for field, value in data.changes().items():
        setattr(savings, field, value)
    prepare_savings_for_save(savings)
    db.commit()
    db.refresh(savings)
    return savings


def delete_savings(savings_id: int, db: Session) -> None:
    savings = get_savings_or_404(savings_id, db)
    db.delete(savings)
    db.commit()
    logger.info("Deleted savings goal id=%s", savings_id)
