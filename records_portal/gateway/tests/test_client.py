"""
Tests for the records backend HTTP client.
"""

import json

import httpx
import pytest

from records_portal.core.exceptions import BackendUnavailableError
from records_portal.core.exceptions import SessionExpiredError
from records_portal.core.exceptions import UpstreamError
from records_portal.gateway.client import IMPORT_ERROR_MESSAGE
from records_portal.gateway.client import RecordsClient
from records_portal.gateway.client import error_message


@pytest.fixture
def respond(monkeypatch):
    """
    Answer every request with ``handler`` and collect the requests.

    Returns a function taking the handler and returning the request list.
    """

    def install(handler):
        seen = []

        def record(request):
            seen.append(request)
            return handler(request)

        monkeypatch.setattr(RecordsClient, "transport", httpx.MockTransport(record))
        return seen

    return install


class TestErrorMessage:
    def test_message_key(self):
        assert error_message({"message": "Student not found"}) == "Student not found"

    def test_first_validation_error(self):
        payload = {"errors": [{"msg": "Invalid email"}, {"msg": "Invalid phone"}]}
        assert error_message(payload) == "Invalid email"

    def test_default_for_unknown_bodies(self):
        assert error_message(None) == "เกิดข้อผิดพลาด"
        assert error_message({"errors": []}, "fallback") == "fallback"


class TestRequest:
    def test_bearer_token_and_base_url(self, respond):
        """Requests carry the token and go under RECORDS_API_URL."""
        seen = respond(lambda request: httpx.Response(200, json={"success": True, "data": []}))

        RecordsClient(token="abc").students.list()

        assert str(seen[0].url) == "http://records.test/api/students"
        assert seen[0].headers["Authorization"] == "Bearer abc"
        assert seen[0].headers["Content-Type"] == "application/json"

    def test_no_authorization_header_without_token(self, respond):
        seen = respond(lambda request: httpx.Response(200, json={"success": True}))

        RecordsClient().auth.login("admin", "secret")

        assert "Authorization" not in seen[0].headers
        assert json.loads(seen[0].content) == {"username": "admin", "password": "secret"}

    def test_envelope_is_returned(self, respond):
        respond(lambda request: httpx.Response(200, json={"success": True, "data": {"id": 1}}))

        assert RecordsClient(token="t").students.get("1") == {"success": True, "data": {"id": 1}}

    def test_non_object_body_is_wrapped(self, respond):
        respond(lambda request: httpx.Response(200, json=[1, 2]))

        assert RecordsClient(token="t").students.list() == {"success": True, "data": [1, 2]}

    def test_batch_status_sends_integer_ids(self, respond):
        seen = respond(lambda request: httpx.Response(200, json={"success": True}))

        RecordsClient(token="t").students.batch_update_status(["3", "4"], "Suspended")

        assert seen[0].url.path == "/api/students/status/batch"
        assert json.loads(seen[0].content) == {"studentIds": [3, 4], "status": "Suspended"}

    def test_import_is_multipart(self, respond):
        seen = respond(lambda request: httpx.Response(200, json={"success": True, "data": {}}))

        RecordsClient(token="t").imports.import_students("students.csv", b"a,b\n", "text/csv")

        assert seen[0].headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="file"; filename="students.csv"' in seen[0].content


class TestErrors:
    def test_upstream_message_is_relayed(self, respond):
        respond(lambda request: httpx.Response(404, json={"success": False, "message": "Student not found"}))

        with pytest.raises(UpstreamError) as exc_info:
            RecordsClient(token="t").students.get("9")

        assert exc_info.value.message == "Student not found"
        assert exc_info.value.status_code == 404

    def test_validation_errors_use_first_message(self, respond):
        respond(lambda request: httpx.Response(400, json={"errors": [{"msg": "Invalid email"}]}))

        with pytest.raises(UpstreamError, match="Invalid email"):
            RecordsClient(token="t").students.create({})

    def test_server_errors_become_bad_gateway(self, respond):
        respond(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(UpstreamError) as exc_info:
            RecordsClient(token="t").students.list()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "เกิดข้อผิดพลาด"

    def test_import_failure_default_message(self, respond):
        respond(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(UpstreamError, match=IMPORT_ERROR_MESSAGE):
            RecordsClient(token="t").imports.import_students("x.csv", b"")

    def test_401_means_session_expired(self, respond):
        respond(lambda request: httpx.Response(401, json={"message": "Invalid token"}))

        with pytest.raises(SessionExpiredError):
            RecordsClient(token="t").alumni.list()

    def test_401_on_login_is_not_a_session_expiry(self, respond):
        respond(lambda request: httpx.Response(401, json={"message": "Invalid username or password"}))

        with pytest.raises(UpstreamError) as exc_info:
            RecordsClient().auth.login("admin", "wrong")

        assert exc_info.value.status_code == 401

    def test_unreachable_backend(self, respond):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        respond(refuse)

        with pytest.raises(BackendUnavailableError) as exc_info:
            RecordsClient(token="t").advisors.list()

        assert exc_info.value.status_code == 503


class TestFetchCollection:
    def test_rows_are_returned_with_limit(self, respond):
        seen = respond(lambda request: httpx.Response(200, json={"success": True, "data": [{"id": 1}]}))
        client = RecordsClient(token="t")

        assert client.fetch_collection(client.projects) == [{"id": 1}]
        assert seen[0].url.params["limit"] == "1000"

    def test_missing_data_gives_empty_list(self, respond):
        respond(lambda request: httpx.Response(200, json={"success": True, "data": None}))
        client = RecordsClient(token="t")

        assert client.fetch_collection(client.projects) == []
