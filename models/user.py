# models/user.py
import enum

from sqlalchemy import Column, Integer, String
from .base import Base, TimestampMixin, enum_type


class UserRole(str, enum.Enum):
     """Roles a back-office user can hold."""
     ADMIN = "admin"
     SALESMAN = "salesman"
     SUPERVISOR = "supervisor"


class User(TimestampMixin, Base):
     """
     User model - back-office staff account.
     Salesmen and supervisors create reservations; admins manage the catalog.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(150), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)  # bcrypt hash
     role = Column(enum_type(UserRole, "user_role"), nullable=False)

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role.value}')>"
