"""
Database session management.
"""
import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.orm.exc import StaleDataError
from fabudget.core.config import settings
from fabudget.core.errors import ConflictError
from fabudget.db.base import Base

logger = logging.getLogger(__name__)

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    # Import models so SQLAlchemy registers them before create_all
    import fabudget.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def commit_or_conflict(db: Session) -> None:
    """
    Commit the session, turning a lost optimistic-lock race into ConflictError.

    Versioned rows (budgets, users) are updated with a version check; if
    another request wrote the row first SQLAlchemy raises StaleDataError.
    """
    try:
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        logger.warning("Concurrent update rejected: %s", exc)
        raise ConflictError("Record was modified by another request, please retry") from exc
