"""
Authentication API controller.

Credentials are checked by the records backend; the portal keeps the
returned token in the server-side session.
"""

import logging
from typing import Any

from django.http import HttpRequest
from django.middleware.csrf import get_token
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from records_portal.core.api import AllowAny
from records_portal.core.api import BaseAPI
from records_portal.core.exceptions import APIException
from records_portal.core.exceptions import BadRequestError
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.exceptions import InvalidCredentialsError
from records_portal.core.exceptions import NotAuthenticatedError
from records_portal.core.exceptions import UpstreamError
from records_portal.gateway.client import RecordsClient
from records_portal.gateway.store import RecordsStore
from records_portal.users.navigation import navigation_for
from records_portal.users.schemas import CSRFTokenSchema
from records_portal.users.schemas import LoginResponseSchema
from records_portal.users.schemas import LoginSchema
from records_portal.users.schemas import MessageSchema
from records_portal.users.schemas import NavigationSchema
from records_portal.users.schemas import NavItemSchema
from records_portal.users.schemas import PasswordChangeSchema
from records_portal.users.schemas import UserSchema
from records_portal.users.session import build_user
from records_portal.users.session import end_session
from records_portal.users.session import get_token as get_backend_token
from records_portal.users.session import start_session

logger = logging.getLogger(__name__)


def fetch_profile(token: str) -> dict[str, Any] | None:
    """Fetch the full profile. Failures are tolerated: login keeps basic info."""
    try:
        payload = RecordsClient(token=token).auth.get_profile()
    except APIException as exc:
        logger.warning("Profile fetch failed, continuing with login data: %s", exc.message)
        return None
    data = payload.get("data")
    if payload.get("success") and isinstance(data, dict):
        return data
    return None


@api_controller("/auth", tags=["Authentication"], permissions=[AllowAny])
class AuthController(BaseAPI):
    """Login, logout, profile and menu endpoints."""

    @http_get("/csrf", response=CSRFTokenSchema, url_name="auth_csrf")
    def get_csrf_token(self, request: HttpRequest):
        """Get a CSRF token for subsequent POST requests."""
        return CSRFTokenSchema(csrf_token=get_token(request))

    @http_post(
        "/login",
        response={200: LoginResponseSchema, 400: ErrorSchema, 401: ErrorSchema},
        url_name="auth_login",
    )
    def login_view(self, request: HttpRequest, data: LoginSchema):
        """Authenticate against the records backend and open a session."""
        if not data.username or not data.password:
            return BadRequestError("กรุณากรอกชื่อผู้ใช้และรหัสผ่าน").to_response()

        try:
            payload = RecordsClient().auth.login(data.username, data.password)
        except UpstreamError as exc:
            if exc.status_code not in (400, 401):
                raise
            logger.info("Login rejected for %s: %s", data.username, exc.message)
            return InvalidCredentialsError().to_response()
        login_data = payload.get("data") or {}
        token = login_data.get("token") if isinstance(login_data, dict) else None
        if not payload.get("success") or not token:
            return InvalidCredentialsError().to_response()

        user = build_user(login_data.get("user") or {}, fetch_profile(token))
        start_session(request.session, token, user)
        RecordsStore.for_request(request).refresh_all()
        logger.info("User %s logged in as %s", user.username, user.role)

        return 200, LoginResponseSchema(
            success=True,
            message="เข้าสู่ระบบสำเร็จ",
            user=UserSchema.from_user(user),
            csrf_token=get_token(request),
        )

    @http_post("/logout", response={200: MessageSchema}, url_name="auth_logout")
    def logout_view(self, request: HttpRequest):
        """Forget the backend token and the cached records."""
        if request.user.is_authenticated:
            RecordsStore.for_request(request).clear()
        end_session(request.session)
        request.session.flush()
        return 200, MessageSchema(success=True, message="ออกจากระบบสำเร็จ")

    @http_get(
        "/me",
        response={200: UserSchema, 401: ErrorSchema},
        url_name="auth_me",
    )
    def me_view(self, request: HttpRequest):
        """Get the current user's information."""
        if not request.user.is_authenticated:
            return NotAuthenticatedError().to_response()

        return 200, UserSchema.from_user(request.user)

    @http_put(
        "/change-password",
        response={200: MessageSchema, 401: ErrorSchema},
        url_name="auth_change_password",
    )
    def change_password_view(self, request: HttpRequest, data: PasswordChangeSchema):
        """Change the password held by the records backend."""
        if not request.user.is_authenticated:
            return NotAuthenticatedError().to_response()

        client = RecordsClient(token=get_backend_token(request.session))
        payload = client.auth.change_password(data.current_password, data.new_password)
        return 200, MessageSchema(success=True, message=payload.get("message") or "เปลี่ยนรหัสผ่านสำเร็จ")

    @http_get(
        "/navigation",
        response={200: NavigationSchema, 401: ErrorSchema},
        url_name="auth_navigation",
    )
    def navigation_view(self, request: HttpRequest):
        """Menu entries for the current role."""
        if not request.user.is_authenticated:
            return NotAuthenticatedError().to_response()

        return 200, NavigationSchema(
            items=[NavItemSchema(path=path, label=label) for path, label in navigation_for(request.user)]
        )
