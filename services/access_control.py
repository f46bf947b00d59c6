# services/access_control.py
"""
Role-based access control.

Each operation declares the set of roles allowed to call it and passes the
caller through `authorize` before touching the database.
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from models.user import UserRole
from services.errors import Forbidden, Unauthorized


@dataclass(frozen=True)
class Caller:
     """Authenticated identity attached to a request."""
     id: int
     role: UserRole
     email: Optional[str] = None


ADMIN_ONLY = frozenset({UserRole.ADMIN})
SALES_ROLES = frozenset({UserRole.SALESMAN, UserRole.SUPERVISOR})
SUPERVISOR_ONLY = frozenset({UserRole.SUPERVISOR})
ANY_ROLE = frozenset(UserRole)


def _normalize_role(role: Union[UserRole, str]) -> Optional[UserRole]:
     try:
          return UserRole(role)
     except ValueError:
          return None


def authorize(caller: Optional[Caller], required_roles: Iterable[UserRole]) -> Caller:
     """
     Check that `caller` exists and holds one of `required_roles`.

     Raises:
          Unauthorized: no caller (missing or invalid session)
          Forbidden: caller's role is not in required_roles
     """
     if caller is None:
          raise Unauthorized()

     if _normalize_role(caller.role) not in frozenset(required_roles):
          raise Forbidden()

     return caller
