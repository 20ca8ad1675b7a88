"""
Complaint Tracker - Test Configuration and Fixtures
"""
import pytest
from django.core.cache import cache
from django.test import Client

from core import queries
from core.core_models import ComplaintMapping

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fast_hashing(settings):
    """Cheap bcrypt cost so the suite stays quick"""
    settings.BCRYPT_ROUNDS = 4


@pytest.fixture(autouse=True)
def clean_caches():
    """Cache-backed sessions must not leak between tests"""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user(db):
    """Factory creating users through the same path registration uses"""
    def _make(username, role="user", name=None, email=None, password=PASSWORD):
        return queries.add_user(
            name=name or username.title(),
            email=email or f"{username}@example.com",
            username=username,
            password=password,
            role=role,
        )
    return _make


@pytest.fixture
def complainant(make_user):
    return make_user("alice")


@pytest.fixture
def engineer(make_user):
    return make_user("bob", role="engineer")


@pytest.fixture
def admin_user(make_user):
    return make_user("carol", role="admin")


@pytest.fixture
def complaint(complainant):
    return queries.add_complaint(complainant, "555-0100", "broken sink")


@pytest.fixture
def login_as():
    """Return a fresh Client logged in as `username`"""
    def _login(username, password=PASSWORD):
        client = Client()
        response = client.post("/login", {"username": username, "password": password})
        assert response.status_code == 302
        return client
    return _login


def flash_messages(response):
    """Texts of the flash messages rendered into a followed response"""
    return [str(m) for m in response.context["messages"]]


def count_mappings(complaint_id=None, engineer_name=None):
    """Number of stored mappings, optionally narrowed to a complaint and/or engineer"""
    qs = ComplaintMapping.objects.all()
    if complaint_id is not None:
        qs = qs.filter(complaint_id=complaint_id)
    if engineer_name is not None:
        qs = qs.filter(engineer_name=engineer_name)
    return qs.count()
