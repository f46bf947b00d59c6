# dependencies.py
"""
FastAPI dependencies shared by the routers: token handling and the caller.

`get_current_caller` never fails the request by itself: a missing, invalid or
expired token yields None. Protected routes depend on `require_caller`, which
rejects anonymous requests with 401 before any form field or upload is read.
Role checks stay in the service layer.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from azure_blob import get_blob_store
from config import ACCESS_TOKEN_EXPIRE_MINUTES, JWT_ALGORITHM, JWT_SECRET
from database import get_session
from models import User
from services.access_control import Caller
from services.errors import Unauthorized

logger = logging.getLogger(__name__)

__all__ = ["create_access_token", "get_blob_store", "get_current_caller", "read_bearer_token", "require_caller"]


def create_access_token(user: User) -> str:
     expires = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
     claims = {"sub": str(user.id), "role": user.role.value, "exp": expires}
     return jwt.encode(claims, JWT_SECRET, algorithm=JWT_ALGORITHM)


def read_bearer_token(request: Request) -> Optional[str]:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          return None
     return auth.split(" ", 1)[1].strip() or None


def get_current_caller(request: Request, db: Session = Depends(get_session)) -> Optional[Caller]:
     """
     Identify the caller from the bearer token.

     The role is read from the user row, not from the token, so role changes
     and deleted accounts take effect immediately.
     """
     token = read_bearer_token(request)
     if token is None:
          return None

     try:
          payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
          user_id = int(payload.get("sub"))
     except (JWTError, TypeError, ValueError):
          logger.info("Rejected bearer token for %s %s", request.method, request.url.path)
          return None

     user = db.get(User, user_id)
     if user is None:
          return None
     return Caller(id=user.id, role=user.role, email=user.email)


def require_caller(caller: Optional[Caller] = Depends(get_current_caller)) -> Caller:
     if caller is None:
          raise Unauthorized()
     return caller
