"""
User service: registration validation, normalization and credential checks.
"""
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from sqlalchemy.orm import Session

from fabudget.core.errors import AuthenticationError, ValidationFailed
from fabudget.core.security import get_password_hash, verify_password
from fabudget.models.user import User

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$")
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class ValidationResult:
    """Outcome of a validation pass; ``errors`` is empty when valid."""
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "; ".join(self.errors)


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def normalize_name(name: Optional[str]) -> str:
    """Collapse whitespace and capitalize each word: '  jOHN   doe ' -> 'John Doe'."""
    parts = (name or "").split()
    return " ".join(part[:1].upper() + part[1:].lower() for part in parts)


def validate_registration(name: Optional[str], email: Optional[str], password: Optional[str]) -> ValidationResult:
    """Check registration input against the account rules. Never raises."""
    result = ValidationResult()

    name = normalize_name(name)
    if not name:
        result.errors.append("Please add a name")
    elif len(name) < NAME_MIN_LENGTH:
        result.errors.append(f"Name must be at least {NAME_MIN_LENGTH} characters")
    elif len(name) > NAME_MAX_LENGTH:
        result.errors.append(f"Name cannot be more than {NAME_MAX_LENGTH} characters")

    email = normalize_email(email)
    if not email:
        result.errors.append("Please add an email")
    elif len(email) > EMAIL_MAX_LENGTH:
        result.errors.append(f"Email cannot be more than {EMAIL_MAX_LENGTH} characters")
    elif not EMAIL_PATTERN.match(email):
        result.errors.append("Please provide a valid email address")

    if not password:
        result.errors.append("Please add a password")
    else:
        if len(password) < PASSWORD_MIN_LENGTH:
            result.errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        elif len(password) > PASSWORD_MAX_LENGTH:
            result.errors.append(f"Password cannot be more than {PASSWORD_MAX_LENGTH} characters")
        if not (re.search(r"\d", password) and re.search(r"[a-z]", password) and re.search(r"[A-Z]", password)):
            result.errors.append(
                "Password must contain at least one uppercase letter, one lowercase letter, and one number"
            )

    return result


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    return get_password_hash("Unused-Passw0rd")


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def register_user(name: str, email: str, password: str, db: Session) -> User:
    """Validate, normalize, hash and persist a new user."""
    validation = validate_registration(name, email, password)
    if not validation.is_valid:
        raise ValidationFailed(validation.message)

    if get_user_by_email(email, db):
        raise ValidationFailed("User already exists")

    user = User(
        name=normalize_name(name),
        email=normalize_email(email),
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def authenticate_user(email: str, password: str, db: Session) -> User:
    """
    Return the user for valid credentials.

    Unknown email and wrong password raise the same error so callers cannot
    tell which one failed.
    """
    user = get_user_by_email(email, db)
    if not user:
        # Spend the same bcrypt work as a real check
        verify_password(password, _dummy_password_hash())
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not verify_password(password, user.hashed_password):
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user
