import httpx
import pytest
from django.core.cache import cache
from django.test import Client

from records_portal.gateway.client import RecordsClient
from records_portal.gateway.tests.backend import PASSWORD
from records_portal.gateway.tests.backend import FakeRecordsBackend


@pytest.fixture(autouse=True)
def _clear_cache():
    """Sessions and cached collections live in the cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def backend(monkeypatch):
    """Route every RecordsClient request to an in-memory backend."""
    fake = FakeRecordsBackend()
    monkeypatch.setattr(RecordsClient, "transport", httpx.MockTransport(fake.handler))
    return fake


def make_client(username: str | None = None) -> Client:
    """Return a client with a CSRF token, logged in as ``username`` if given."""
    client = Client()
    response = client.get("/api/auth/csrf")
    client.csrf_token = response.json()["csrf_token"]
    if username:
        response = client.post(
            "/api/auth/login",
            data={"username": username, "password": PASSWORD},
            content_type="application/json",
            HTTP_X_CSRFTOKEN=client.csrf_token,
        )
        assert response.status_code == 200, response.content
    return client


@pytest.fixture
def unauthenticated_client(backend):
    return make_client()


@pytest.fixture
def admin_client(backend):
    return make_client("admin")


@pytest.fixture
def teacher_client(backend):
    return make_client("teacher")


@pytest.fixture
def student_client(backend):
    return make_client("student")


@pytest.fixture
def alumni_client(backend):
    return make_client("alumni")
