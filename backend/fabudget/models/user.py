"""
User model for account registration and login.
"""
from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import relationship
from fabudget.db.base import BaseModel


class User(BaseModel):
    """User model; email is stored normalized (trimmed, lowercased)."""
    __tablename__ = "users"

    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    version = Column(Integer, nullable=False)

    # Relationships
    budgets = relationship("Budget", back_populates="user", cascade="all, delete-orphan")

    __mapper_args__ = {"version_id_col": version}
