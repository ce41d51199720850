"""
HTTP client for the records backend REST API.

Every call goes through ``RecordsClient._request`` which adds the bearer
token, unwraps the ``{success, message, data}`` envelope and turns error
statuses into portal exceptions.
"""

import logging
from typing import Any

import httpx
from django.conf import settings

from records_portal.core.exceptions import DEFAULT_ERROR_MESSAGE
from records_portal.core.exceptions import BackendUnavailableError
from records_portal.core.exceptions import SessionExpiredError
from records_portal.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "/auth/login"
COLLECTION_LIMIT = "1000"
IMPORT_ERROR_MESSAGE = "เกิดข้อผิดพลาดในการนำเข้าข้อมูล"


def error_message(payload: Any, default: str = DEFAULT_ERROR_MESSAGE) -> str:
    """
    Extract the human readable message from an error body.

    The backend uses either ``message`` or express-validator style
    ``errors: [{msg: ...}]``.
    """
    if not isinstance(payload, dict):
        return default
    if payload.get("message"):
        return str(payload["message"])
    errors = payload.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict) and errors[0].get("msg"):
        return str(errors[0]["msg"])
    return default


class ResourceAPI:
    """CRUD endpoints of one backend collection."""

    def __init__(self, client: "RecordsClient", path: str):
        self.client = client
        self.path = path

    def list(self, params: dict[str, str] | None = None) -> dict[str, Any]:
        return self.client._request("GET", self.path, params=params)

    def get(self, record_id: str) -> dict[str, Any]:
        return self.client._request("GET", f"{self.path}/{record_id}")

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.client._request("POST", self.path, json=data)

    def update(self, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self.client._request("PUT", f"{self.path}/{record_id}", json=data)

    def delete(self, record_id: str) -> dict[str, Any]:
        return self.client._request("DELETE", f"{self.path}/{record_id}")


class StudentsAPI(ResourceAPI):
    def batch_update_status(self, student_ids: list[str], status: str) -> dict[str, Any]:
        return self.client._request(
            "PUT",
            f"{self.path}/status/batch",
            json={"studentIds": [int(i) for i in student_ids], "status": status},
        )

    def graduate(self, student_ids: list[str]) -> dict[str, Any]:
        return self.client._request(
            "POST",
            f"{self.path}/graduate",
            json={"studentIds": [int(i) for i in student_ids]},
        )


class ProjectsAPI(ResourceAPI):
    def add_comment(self, project_id: str, author_name: str, author_role: str, message: str) -> dict[str, Any]:
        return self.client._request(
            "POST",
            f"{self.path}/{project_id}/comments",
            json={"author_name": author_name, "author_role": author_role, "message": message},
        )


class AuthAPI:
    def __init__(self, client: "RecordsClient"):
        self.client = client

    def login(self, username: str, password: str) -> dict[str, Any]:
        return self.client._request(
            "POST", LOGIN_ENDPOINT, json={"username": username, "password": password}
        )

    def get_profile(self) -> dict[str, Any]:
        return self.client._request("GET", "/auth/profile")

    def change_password(self, current_password: str, new_password: str) -> dict[str, Any]:
        return self.client._request(
            "PUT",
            "/auth/change-password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )


class ImportAPI:
    def __init__(self, client: "RecordsClient"):
        self.client = client

    def import_students(self, filename: str, content: bytes, content_type: str | None = None) -> dict[str, Any]:
        """Upload a student spreadsheet as multipart field ``file``."""
        files = {"file": (filename, content, content_type or "application/octet-stream")}
        return self.client._request(
            "POST",
            "/import/students",
            files=files,
            default_error=IMPORT_ERROR_MESSAGE,
        )


class RecordsClient:
    """
    Client for the records backend.

    Args:
        token: Bearer token obtained at login, if any
        base_url: Override of ``settings.RECORDS_API_URL``
    """

    # Tests swap this for an httpx.MockTransport
    transport: httpx.BaseTransport | None = None

    def __init__(self, token: str | None = None, base_url: str | None = None):
        self.token = token
        self.base_url = (base_url or settings.RECORDS_API_URL).rstrip("/")
        self.timeout = settings.RECORDS_API_TIMEOUT

        self.auth = AuthAPI(self)
        self.students = StudentsAPI(self, "/students")
        self.alumni = ResourceAPI(self, "/alumni")
        self.advisors = ResourceAPI(self, "/advisors")
        self.projects = ProjectsAPI(self, "/projects")
        self.imports = ImportAPI(self)

    def _headers(self, is_json: bool) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if is_json:
            headers["Content-Type"] = "application/json"
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        files: dict | None = None,
        default_error: str = DEFAULT_ERROR_MESSAGE,
    ) -> dict[str, Any]:
        """
        Send a request and return the decoded JSON envelope.

        Raises:
            SessionExpiredError: 401 on anything but the login endpoint
            UpstreamError: any other non-2xx status
            BackendUnavailableError: the backend could not be reached
        """
        url = f"{self.base_url}{endpoint}"
        try:
            with httpx.Client(transport=self.transport, timeout=self.timeout) as http:
                response = http.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    files=files,
                    headers=self._headers(is_json=files is None),
                )
        except httpx.TransportError as exc:
            logger.warning("Records backend unreachable: %s %s (%s)", method, endpoint, exc)
            raise BackendUnavailableError() from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_success:
            return payload if isinstance(payload, dict) else {"success": True, "data": payload}

        logger.info("Records backend answered %s to %s %s", response.status_code, method, endpoint)
        message = error_message(payload, default_error)
        if response.status_code == 401 and LOGIN_ENDPOINT not in endpoint:
            raise SessionExpiredError()
        raise UpstreamError(message, status_code=response.status_code)

    def fetch_collection(self, resource: ResourceAPI) -> list[dict[str, Any]]:
        """Fetch every row of a collection in one page."""
        payload = resource.list({"limit": COLLECTION_LIMIT})
        rows = payload.get("data") or []
        return rows if isinstance(rows, list) else []
