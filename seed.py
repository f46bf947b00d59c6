# seed.py
"""
Create the first admin account so the back-office can be logged into.

Usage:
     python seed.py

The email, password and name come from SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD
and SEED_ADMIN_NAME. Running it again leaves an existing account untouched.
"""
import logging
import os

from sqlalchemy.orm import Session

from database import get_session_context
from logging_config import configure_logging
from models import User, UserRole
from services.user_service import pwd_context

logger = logging.getLogger(__name__)


def seed_admin(db: Session, email: str, password: str, name: str = "Admin User") -> bool:
     """Add the admin user unless the email is taken. Returns True when a user was created."""
     if db.query(User.id).filter(User.email == email).first() is not None:
          logger.info("Admin user %s already exists", email)
          return False

     db.add(User(name=name, email=email, password=pwd_context.hash(password), role=UserRole.ADMIN))
     db.flush()
     logger.info("Admin user %s created", email)
     return True


if __name__ == "__main__":
     configure_logging()
     with get_session_context() as session:
          seed_admin(
               session,
               email=os.getenv("SEED_ADMIN_EMAIL", "admin@example.com"),
               password=os.getenv("SEED_ADMIN_PASSWORD", "admin123"),
               name=os.getenv("SEED_ADMIN_NAME", "Admin User"),
          )
