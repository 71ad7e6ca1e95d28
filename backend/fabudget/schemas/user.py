"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for user registration; rules are checked by the user service."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    """Schema for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Schema returned by register and login."""
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class UserListItem(BaseModel):
    """Schema for user listings; never includes the password hash."""
    id: int = Field(serialization_alias="_id")
    name: str
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")
    version: int = Field(serialization_alias="__v")

    model_config = ConfigDict(from_attributes=True)
