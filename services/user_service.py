# services/user_service.py
"""
User Service - back-office accounts and password checks.

Passwords are hashed with passlib (bcrypt); hashes never leave this module
except through the User row.
"""
import logging
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from database import transaction
from models import Reservation, User
from schemas.user import UserCreate, UserUpdate
from services.access_control import ADMIN_ONLY, ANY_ROLE, Caller, authorize
from services.errors import BadRequest, Forbidden, NotFound, with_error_handling
from services.pagination import paginate

logger = logging.getLogger(__name__)

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _email_taken(db: Session, email: str, exclude_id: int = None) -> bool:
     query = db.query(User.id).filter(User.email == email)
     if exclude_id is not None:
          query = query.filter(User.id != exclude_id)
     return query.first() is not None


class UserService:
     """Service class for user management."""

     @staticmethod
     def authenticate(db: Session, email: str, password: str) -> Optional[User]:
          """Return the user for valid credentials, None otherwise."""
          user = db.query(User).filter(User.email == email).first()
          if user is None or not pwd_context.verify(password, user.password):
               return None
          return user

     @staticmethod
     @with_error_handling
     def list_users(db: Session, caller: Optional[Caller], page: Optional[int] = None, limit: Optional[int] = None) -> dict:
          authorize(caller, ANY_ROLE)
          query = db.query(User).order_by(User.created_at.desc(), User.id.desc())
          return paginate(query, page, limit)

     @staticmethod
     @with_error_handling
     def get_user(db: Session, caller: Optional[Caller], user_id: int) -> User:
          authorize(caller, ANY_ROLE)
          user = db.get(User, user_id)
          if user is None:
               raise NotFound("User not found")
          return user

     @staticmethod
     @with_error_handling
     def create_user(db: Session, caller: Optional[Caller], data: UserCreate) -> User:
          """
          Raises:
               BadRequest: the email is already used by another user
          """
          authorize(caller, ADMIN_ONLY)
          with transaction(db):
               if _email_taken(db, data.email):
                    raise BadRequest("Email already exists as a user")
               user = User(
                    name=data.name,
                    email=data.email,
                    password=pwd_context.hash(data.password),
                    role=data.role,
               )
               db.add(user)
               db.flush()
          logger.info("User %s created with role %s", user.id, user.role.value)
          return user

     @staticmethod
     @with_error_handling
     def update_user(db: Session, caller: Optional[Caller], user_id: int, data: UserUpdate) -> User:
          authorize(caller, ADMIN_ONLY)
          with transaction(db):
               user = db.get(User, user_id)
               if user is None:
                    raise NotFound("User not found")

               if data.email and _email_taken(db, data.email, exclude_id=user.id):
                    raise BadRequest("Email already exists as a user")

               if data.name:
                    user.name = data.name
               if data.email:
                    user.email = data.email
               if data.role:
                    user.role = data.role
               if data.password:
                    user.password = pwd_context.hash(data.password)
          return user

     @staticmethod
     @with_error_handling
     def delete_user(db: Session, caller: Optional[Caller], user_id: int) -> User:
          """
          Raises:
               Forbidden: the caller tries to delete their own account
          """
          caller = authorize(caller, ADMIN_ONLY)
          with transaction(db):
               user = db.get(User, user_id)
               if user is None:
                    raise NotFound("User not found")
               if user.id == caller.id:
                    raise Forbidden("You are not allowed to delete yourself")
               if db.query(Reservation.uuid).filter(Reservation.salesman_id == user.id).first() is not None:
                    raise BadRequest("User still has reservations")
               db.delete(user)
          logger.info("User %s deleted by %s", user_id, caller.id)
          return user
