# routers/users.py
"""
User management API routes (admin-only writes).
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import require_caller
from schemas.common import Page, build_page
from schemas.user import UserCreate, UserResponse, UserUpdate
from services.access_control import Caller
from services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Create a user")
def create_user(
     body: UserCreate,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     """
     - **role**: admin, salesman or supervisor
     - **password**: at least 6 characters, stored as a bcrypt hash
     """
     return UserService.create_user(db, caller, body)


@router.get("", response_model=Page[UserResponse], summary="List users")
def list_users(
     page: Optional[int] = Query(None, ge=1),
     limit: Optional[int] = Query(None, ge=1),
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     return build_page(UserService.list_users(db, caller, page, limit), UserResponse.model_validate)


@router.get("/{user_id}", response_model=UserResponse, summary="Get user by ID")
def get_user(
     user_id: int,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     return UserService.get_user(db, caller, user_id)


@router.put("/{user_id}", response_model=UserResponse, summary="Update a user")
def update_user(
     user_id: int,
     body: UserUpdate,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     return UserService.update_user(db, caller, user_id, body)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a user")
def delete_user(
     user_id: int,
     db: Session = Depends(get_session),
     caller: Caller = Depends(require_caller),
):
     """Admins cannot delete themselves, nor salesmen who still own reservations."""
     UserService.delete_user(db, caller, user_id)
     return None
