# schemas/user.py
"""
Pydantic schemas for users and login.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from models.user import UserRole
from schemas.common import CamelModel


class UserCreate(CamelModel):
     """Schema for creating a back-office user."""
     name: str = Field(..., min_length=1, max_length=150)
     email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
     password: str = Field(..., min_length=6)
     role: UserRole


class UserUpdate(CamelModel):
     """Schema for updating a user; only provided fields change."""
     name: Optional[str] = Field(None, min_length=1, max_length=150)
     email: Optional[str] = Field(None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
     password: Optional[str] = Field(None, min_length=6)
     role: Optional[UserRole] = None


class UserResponse(CamelModel):
     """User as returned by the API (never includes the password hash)."""
     id: int
     name: str
     email: str
     role: UserRole
     created_at: Optional[datetime] = None


class LoginRequest(CamelModel):
     email: str
     password: str


class LoginResponse(CamelModel):
     token: str
     user: UserResponse
