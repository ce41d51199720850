"""
Authentication schemas for login, profile and navigation.
"""

from typing import TYPE_CHECKING

from ninja import Schema
from pydantic import field_validator

from records_portal.core.roles import role_label

if TYPE_CHECKING:
    from records_portal.users.session import PortalUser


class LoginSchema(Schema):
    """Login request schema."""

    username: str
    password: str


class CSRFTokenSchema(Schema):
    """CSRF token response."""

    csrf_token: str


class UserSchema(Schema):
    """The session user as shown on the profile page."""

    id: str
    username: str
    role: str
    role_label: str
    name: str
    email: str
    student_id: str | None = None
    alumni_id: str | None = None
    advisor_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    faculty: str | None = None
    department: str | None = None
    phone: str | None = None
    year: int | None = None

    @staticmethod
    def from_user(user: "PortalUser") -> "UserSchema":
        """Create schema from the session user."""
        return UserSchema(**user.to_dict(), role_label=role_label(user.role))


class LoginResponseSchema(Schema):
    """Login response schema."""

    success: bool
    message: str
    user: UserSchema
    csrf_token: str


class PasswordChangeSchema(Schema):
    """Change password from the profile page."""

    current_password: str
    new_password: str
    new_password_confirm: str

    @field_validator("new_password")
    @classmethod
    def new_password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("กรุณากรอกรหัสผ่านใหม่")
        return v

    @field_validator("new_password_confirm")
    @classmethod
    def passwords_match(cls, v: str, info) -> str:
        if "new_password" in info.data and v != info.data["new_password"]:
            raise ValueError("รหัสผ่านไม่ตรงกัน")
        return v


class NavItemSchema(Schema):
    path: str
    label: str


class NavigationSchema(Schema):
    """Menu entries visible to the current role."""

    items: list[NavItemSchema]
