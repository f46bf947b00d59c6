import pytest

from models import UserRole
from services.access_control import ADMIN_ONLY, ANY_ROLE, SALES_ROLES, SUPERVISOR_ONLY, Caller, authorize
from services.errors import Forbidden, Unauthorized


def test_authorize_without_caller_is_unauthorized():
    with pytest.raises(Unauthorized) as exc:
        authorize(None, ADMIN_ONLY)

    assert exc.value.status_code == 401
    assert exc.value.message == "Authentication required"


def test_authorize_rejects_role_outside_required_set():
    caller = Caller(id=2, role=UserRole.SALESMAN)

    with pytest.raises(Forbidden) as exc:
        authorize(caller, ADMIN_ONLY)

    assert exc.value.status_code == 403


def test_authorize_returns_the_caller_when_role_matches():
    caller = Caller(id=3, role=UserRole.SUPERVISOR)

    assert authorize(caller, SALES_ROLES) is caller
    assert authorize(caller, SUPERVISOR_ONLY) is caller
    assert authorize(caller, ANY_ROLE) is caller


def test_authorize_accepts_plain_string_roles():
    assert authorize(Caller(id=1, role="admin"), ADMIN_ONLY).id == 1


def test_authorize_rejects_unknown_role():
    with pytest.raises(Forbidden):
        authorize(Caller(id=9, role="guest"), ANY_ROLE)


def test_salesman_cannot_decide_reservations():
    with pytest.raises(Forbidden):
        authorize(Caller(id=2, role=UserRole.SALESMAN), SUPERVISOR_ONLY)


def test_admin_is_not_a_sales_role():
    with pytest.raises(Forbidden):
        authorize(Caller(id=1, role=UserRole.ADMIN), SALES_ROLES)
