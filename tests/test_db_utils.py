from io import StringIO
from types import SimpleNamespace

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db.utils import OperationalError

from core import db_utils
from core.exceptions import StoreUnavailable


class FlakyConnection:
    """Stand-in connection failing its first `failures` attempts"""
    vendor = "postgresql"

    def __init__(self, failures):
        self.failures = failures
        self.attempts = 0

    def ensure_connection(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise OperationalError("could not connect to server")


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(db_utils, "time", SimpleNamespace(sleep=calls.append))
    return calls


def test_gives_up_after_three_retries(monkeypatch, sleeps):
    connection = FlakyConnection(failures=10)
    monkeypatch.setattr(db_utils, "connections", {"default": connection})

    with pytest.raises(StoreUnavailable):
        db_utils.ensure_store_available()

    assert connection.attempts == 4
    assert sleeps == [2, 2, 2]


def test_recovers_within_retry_budget(monkeypatch, sleeps):
    connection = FlakyConnection(failures=2)
    monkeypatch.setattr(db_utils, "connections", {"default": connection})

    assert db_utils.ensure_store_available() is connection
    assert connection.attempts == 3
    assert sleeps == [2, 2]


def test_check_store_command_fails_when_database_is_down(monkeypatch, sleeps):
    monkeypatch.setattr(db_utils, "connections", {"default": FlakyConnection(failures=10)})

    with pytest.raises(CommandError):
        call_command("check_store", retries=1, delay=0)
    assert sleeps == [0]


def test_check_store_command_reports_success(db):
    out = StringIO()
    call_command("check_store", stdout=out)
    assert "is available" in out.getvalue()
