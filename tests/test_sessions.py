import pytest

from accounts.models import Identity
from accounts.sessions import SessionManager


@pytest.fixture
def manager():
    return SessionManager()


@pytest.fixture
def identity(complainant):
    return Identity.from_user(complainant)


def test_bind_then_restore_returns_same_identity(manager, identity):
    token = manager.bind(manager.open(), identity)

    assert token
    assert manager.restore(manager.open(token)) == identity


def test_token_carries_no_identity_data(manager, identity):
    token = manager.bind(manager.open(), identity)
    assert identity.username not in token
    assert str(identity.id) != token


def test_invalidate_makes_token_anonymous(manager, identity):
    token = manager.bind(manager.open(), identity)

    manager.invalidate(manager.open(token))

    assert manager.restore(manager.open(token)) is None


def test_bind_rotates_session_key(manager, identity):
    session = manager.open()
    session["cart"] = "anonymous data"
    session.save()
    old_token = session.session_key

    new_token = manager.bind(session, identity)

    assert new_token != old_token
    assert manager.restore(manager.open(old_token)) is None
    assert manager.restore(manager.open(new_token)) == identity


def test_unknown_or_missing_token_is_anonymous(manager, db):
    assert manager.restore(manager.open("definitely-not-a-session-key")) is None
    assert manager.restore(manager.open()) is None


def test_restore_fails_when_user_is_gone(manager, identity, complainant):
    token = manager.bind(manager.open(), identity)
    complainant.delete()

    assert manager.restore(manager.open(token)) is None


def test_session_lifetime_is_24_hours(manager, identity):
    token = manager.bind(manager.open(), identity)
    assert manager.open(token).get_expiry_age() == 24 * 60 * 60


def test_engine_is_pluggable(identity):
    manager = SessionManager(engine="django.contrib.sessions.backends.signed_cookies")
    session = manager.open()
    manager.bind(session, identity)

    # Signed cookies carry the data in the token itself
    assert manager.restore(manager.open(session.session_key)) == identity
