"""
Tests for the per-session collection cache and mutations.
"""

import pytest
from django.contrib.sessions.backends.cache import SessionStore

from records_portal.core.exceptions import NotFoundError
from records_portal.core.exceptions import SessionExpiredError
from records_portal.core.exceptions import UpstreamError
from records_portal.gateway.store import RecordsStore
from records_portal.gateway.tests.factories import AlumniFactory
from records_portal.gateway.tests.factories import StudentFactory
from records_portal.users.session import TOKEN_SESSION_KEY


@pytest.fixture
def session():
    """A saved session holding the admin token."""
    session = SessionStore()
    session[TOKEN_SESSION_KEY] = "token-admin"
    session.save()
    return session


@pytest.fixture
def store(backend, session):
    return RecordsStore(session)


class TestCollections:
    def test_collection_is_fetched_once(self, backend, store):
        """Test that rows are cached between calls."""
        backend.add("students", StudentFactory(id=1), StudentFactory(id=2))

        assert [s.id for s in store.students()] == ["1", "2"]
        assert len(store.students()) == 2
        assert len(backend.requests_to("GET", "/students")) == 1

    def test_cache_is_per_session(self, backend, store):
        backend.add("advisors", {"id": 1, "name": "อาจารย์"})
        store.advisors()

        other = SessionStore()
        other[TOKEN_SESSION_KEY] = "token-teacher"
        other.save()
        RecordsStore(other).advisors()

        assert len(backend.requests_to("GET", "/advisors")) == 2

    def test_unreadable_collection_is_empty_and_not_cached(self, backend, store):
        backend.fail("GET", "/projects", 500)

        assert store.projects() == []

        del backend.failures[("GET", "/projects")]
        backend.add("projects", {"id": 1, "title_th": "ระบบ"})
        assert len(store.projects()) == 1

    def test_refresh_all_refetches_every_collection(self, backend, store):
        store.students()
        backend.add("students", StudentFactory(id=1))

        store.refresh_all()

        assert [s.id for s in store.students()] == ["1"]
        for path in ("/students", "/alumni", "/projects", "/advisors"):
            assert backend.requests_to("GET", path)

    def test_session_expiry_propagates(self, backend, store):
        backend.revoked_tokens.add("token-admin")

        with pytest.raises(SessionExpiredError):
            store.alumni()

    def test_clear(self, backend, store):
        store.students()
        store.clear()
        store.students()

        assert len(backend.requests_to("GET", "/students")) == 2

    def test_unsaved_session_gets_a_key(self, backend):
        session = SessionStore()
        session[TOKEN_SESSION_KEY] = "token-admin"

        RecordsStore(session).students()

        assert session.session_key is not None


class TestLookups:
    def test_found(self, backend, store):
        backend.add("alumni", AlumniFactory(id=5))
        assert store.alumnus("5").id == "5"

    def test_missing_record(self, backend, store):
        with pytest.raises(NotFoundError, match="ไม่พบข้อมูลนักศึกษา"):
            store.student("99")


class TestMutations:
    def test_mutation_refreshes_collection(self, backend, store):
        store.students()

        message = store.add_student(StudentFactory(id=None))

        assert message == "เพิ่มนักศึกษาสำเร็จ"
        assert len(store.students()) == 1
        assert len(backend.requests_to("GET", "/students")) == 2

    def test_graduation_refreshes_students_and_alumni(self, backend, store):
        backend.add("students", StudentFactory(id=1))

        store.graduate_students(["1"])

        assert store.students() == []
        assert len(store.alumni()) == 1

    def test_generic_failure_uses_operation_message(self, backend, store):
        backend.fail("DELETE", "/students/1", 500)

        with pytest.raises(UpstreamError) as exc_info:
            store.delete_student("1")

        assert exc_info.value.message == "ไม่สามารถลบนักศึกษาได้"
        assert exc_info.value.status_code == 502

    def test_backend_message_is_kept(self, backend, store):
        backend.fail("POST", "/advisors", 400, {"success": False, "message": "Advisor ID already exists"})

        with pytest.raises(UpstreamError, match="Advisor ID already exists"):
            store.add_advisor({"name": "x"})

    def test_import_returns_summary(self, backend, store):
        backend.import_summary = {"total": 2, "imported": 2, "skipped": 0}

        assert store.import_students("s.csv", b"x")["imported"] == 2
        assert backend.requests_to("GET", "/students")
