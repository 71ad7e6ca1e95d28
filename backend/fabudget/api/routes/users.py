"""
User routes: registration, login and lookups.
"""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from fabudget.core.errors import NotFoundError
from fabudget.core.utils import format_list_response, format_response
from fabudget.db.session import get_db
from fabudget.models.user import User
from fabudget.schemas.user import UserCreate, UserListItem, UserLogin, UserResponse
from fabudget.services.user_service import authenticate_user, get_user_by_email, register_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    user = register_user(user_data.name, user_data.email, user_data.password, db)
    return format_response(UserResponse.model_validate(user).model_dump())


@router.post("/login")
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Check credentials. No session or token is issued."""
    user = authenticate_user(credentials.email, credentials.password, db)
    return format_response(UserResponse.model_validate(user).model_dump())


@router.get("")
def list_users(db: Session = Depends(get_db)):
    """List all users without password hashes."""
    users = db.query(User).order_by(User.id).all()
    return format_list_response([
        UserListItem.model_validate(user).model_dump(mode="json", by_alias=True)
        for user in users
    ])


@router.get("/email/{email}")
def get_user_by_email_address(email: str, db: Session = Depends(get_db)):
    """Look up a user by email (case-insensitive)."""
    user = get_user_by_email(email, db)
    if not user:
        raise NotFoundError("User not found")
    return format_response(UserListItem.model_validate(user).model_dump(mode="json", by_alias=True))
