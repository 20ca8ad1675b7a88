import pytest
from django.db import IntegrityError

from accounts.auth import authenticate, register_user
from accounts.models import Identity
from core import queries
from core.core_models import User
from core.exceptions import DuplicateKey, InvalidCredentials, ValidationError

from tests.conftest import PASSWORD


def registration(**overrides):
    data = {
        "name": "Dave",
        "email": "dave@example.com",
        "username": "dave",
        "password": PASSWORD,
        "password2": PASSWORD,
        "role": "user",
    }
    data.update(overrides)
    return data


def test_authenticate_returns_identity(complainant):
    identity = authenticate("alice", PASSWORD)
    assert identity == Identity(id=complainant.id, username="alice", role="user", name="Alice")


def test_authenticate_normalizes_username(complainant):
    assert authenticate("  Alice ", PASSWORD).username == "alice"


def test_wrong_password_and_unknown_user_fail_the_same_way(complainant):
    with pytest.raises(InvalidCredentials) as wrong_password:
        authenticate("alice", "wrong-password")
    with pytest.raises(InvalidCredentials) as unknown_user:
        authenticate("mallory", "wrong-password")

    assert wrong_password.value.message == unknown_user.value.message == "Invalid credentials"


def test_authenticate_empty_password(complainant):
    with pytest.raises(InvalidCredentials):
        authenticate("alice", "")


def test_register_user_creates_hashed_user(db):
    user = register_user(registration(role="engineer"))

    stored = User.objects.get(username="dave")
    assert stored.pk == user.pk
    assert stored.role == "engineer"
    assert stored.password != PASSWORD
    assert stored.check_password(PASSWORD)


def test_register_user_reports_every_invalid_field(db):
    data = registration(name="", email="not-an-email", username="", password="123", password2="", role="")
    with pytest.raises(ValidationError) as exc:
        register_user(data)

    assert set(exc.value.errors) == {"name", "email", "username", "password", "role"}
    assert exc.value.errors["password"] == ["Password must be at least 6 characters"]
    assert User.objects.count() == 0


def test_register_user_password_mismatch(db):
    with pytest.raises(ValidationError) as exc:
        register_user(registration(password2="different-secret"))
    assert exc.value.errors == {"password2": ["Passwords do not match"]}


def test_register_user_rejects_unknown_role(db):
    with pytest.raises(ValidationError) as exc:
        register_user(registration(role="superuser"))
    assert "role" in exc.value.errors


def test_register_duplicate_username_creates_nothing(complainant):
    before = User.objects.count()
    with pytest.raises(ValidationError) as exc:
        register_user(registration(username="ALICE", email="someone-else@example.com"))

    assert "Username already in use" in exc.value.errors["username"]
    assert User.objects.count() == before


def test_register_duplicate_email(complainant):
    with pytest.raises(ValidationError) as exc:
        register_user(registration(email="Alice@Example.com"))
    assert exc.value.errors["email"] == ["Email already in use"]


def test_register_unique_index_violation_is_duplicate_key(db, monkeypatch):
    def add_user(**kwargs):
        raise IntegrityError("UNIQUE constraint failed: users.username")

    monkeypatch.setattr(queries, "add_user", add_user)
    with pytest.raises(DuplicateKey) as exc:
        register_user(registration())
    assert exc.value.message == "Registration failed"
