import pytest

from src.shift_tracker.shift_tracker.core.enums import Role
from src.shift_tracker.shift_tracker.core.exceptions import AuthenticationError, MissingField, ValidationError
from src.shift_tracker.shift_tracker.database.bootstrap import ensure_demo_manager
from src.shift_tracker.shift_tracker.users.model import User
from src.shift_tracker.shift_tracker.users.service import AuthService
from tests.fakes import InMemoryEmployees, InMemoryUsers


@pytest.fixture
def repos():
    return InMemoryUsers(), InMemoryEmployees()


def test_register_creates_account_and_roster_entry(repos):
    users, employees = repos
    service = AuthService(users, employees)

    s_user = service.register(name="Ana", email="Ana@Example.com", password="secret1")

    assert s_user.role == Role.EMPLOYEE
    assert s_user.email == "ana@example.com"
    roster_entry = employees.get_by_user_id(s_user.user_id)
    assert roster_entry.hourly_rate == 16
    assert s_user.employee_id == roster_entry.employee_id


def test_login_after_register(repos):
    service = AuthService(*repos)
    service.register(name="Ana", email="ana@example.com", password="secret1", role="manager")

    s_user = service.authenticate("ana@example.com", "secret1")

    assert s_user.role == Role.MANAGER


def test_wrong_password(repos):
    service = AuthService(*repos)
    service.register(name="Ana", email="ana@example.com", password="secret1")

    with pytest.raises(AuthenticationError):
        service.authenticate("ana@example.com", "nope")


def test_placeholder_hash_never_matches(repos):
    users, employees = repos
    users._by_id[1] = User(user_id=1, name="X", email="x@example.com", password_hash="CHANGE_ME", role=Role.ADMIN)

    with pytest.raises(AuthenticationError):
        AuthService(users, employees).authenticate("x@example.com", "CHANGE_ME")


def test_missing_credentials(repos):
    with pytest.raises(MissingField):
        AuthService(*repos).authenticate("", "")


def test_register_rejections(repos):
    service = AuthService(*repos)
    service.register(name="Ana", email="ana@example.com", password="secret1")

    with pytest.raises(ValidationError):
        service.register(name="Ana", email="ana@example.com", password="secret1")
    with pytest.raises(ValidationError):
        service.register(name="Bo", email="bo@example.com", password="123")
    with pytest.raises(ValidationError):
        service.register(name="Bo", email="bo@example.com", password="secret1", role="admin")


def test_demo_manager_is_created_once(repos):
    users, employees = repos

    assert ensure_demo_manager(users, employees, email="boss@example.com", password="password123") is True
    assert ensure_demo_manager(users, employees, email="boss@example.com", password="password123") is False

    assert len(employees.list_all()) == 1
    s_user = AuthService(users, employees).authenticate("boss@example.com", "password123")
    assert s_user.role == Role.MANAGER
