"""
Session-held identity of the logged-in user.

The records backend issues a bearer token at login. The token and the user
profile built from the login and profile responses live in the Django
session; the browser only ever holds the session cookie.
"""

import logging
from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
from typing import Any

from records_portal.core.roles import Role
from records_portal.core.roles import map_backend_role

logger = logging.getLogger(__name__)

TOKEN_SESSION_KEY = "records_token"
USER_SESSION_KEY = "records_user"


@dataclass
class PortalUser:
    """The authenticated portal user."""

    id: str
    username: str
    role: str
    name: str
    email: str = ""
    student_id: str | None = None
    alumni_id: str | None = None
    advisor_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    faculty: str | None = None
    department: str | None = None
    phone: str | None = None
    year: int | None = None

    is_authenticated = True
    is_anonymous = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PortalUser":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


class AnonymousPortalUser:
    """Stand-in for requests without a portal session."""

    id = None
    role = None
    name = ""
    department = None
    is_authenticated = False
    is_anonymous = True

    def __bool__(self) -> bool:
        return True


def build_user(login_user: dict[str, Any], profile: dict[str, Any] | None = None) -> PortalUser:
    """
    Build the portal user from the backend login payload and profile.

    The profile is optional: when it could not be fetched the user keeps the
    basic login information.
    """
    username = str(login_user.get("username") or "")
    user = PortalUser(
        id=str(login_user.get("id")),
        username=username,
        role=map_backend_role(str(login_user.get("role") or "")).value,
        name=username,
    )
    if not profile:
        return user

    full_name = ""
    if profile.get("first_name"):
        full_name = f"{profile['first_name']} {profile.get('last_name') or ''}".strip()
    user.name = profile.get("name") or full_name or username
    user.email = profile.get("email") or ""
    user.faculty = profile.get("faculty") or ""
    user.department = profile.get("department") or ""
    user.phone = profile.get("phone") or ""
    if profile.get("first_name"):
        user.first_name = str(profile["first_name"])
    if profile.get("last_name"):
        user.last_name = str(profile["last_name"])
    if profile.get("student_id"):
        user.student_id = str(profile["student_id"])
    if profile.get("advisor_id"):
        user.advisor_id = str(profile["advisor_id"])
    if profile.get("year"):
        user.year = int(profile["year"])
    # Users with an alumni record are flagged by the backend
    if profile.get("is_alumni"):
        user.role = Role.ALUMNI.value
        user.alumni_id = str(profile.get("alumni_id") or "")
    return user


def start_session(session, token: str, user: PortalUser) -> None:
    """Store the backend token and the user in a fresh session."""
    session.cycle_key()
    session[TOKEN_SESSION_KEY] = token
    session[USER_SESSION_KEY] = user.to_dict()


def get_token(session) -> str | None:
    return session.get(TOKEN_SESSION_KEY)


def get_session_user(session) -> PortalUser | AnonymousPortalUser:
    """
    Restore the user stored in the session.

    A user without a token (or a token without a user) is stale data and is
    cleared, mirroring what happens at page load in the browser.
    """
    data = session.get(USER_SESSION_KEY)
    token = session.get(TOKEN_SESSION_KEY)
    if data and token:
        try:
            return PortalUser.from_dict(data)
        except TypeError:
            logger.warning("Discarding malformed session user")
    if data or token:
        end_session(session)
    return AnonymousPortalUser()


def end_session(session) -> None:
    """Forget the token and the user."""
    session.pop(TOKEN_SESSION_KEY, None)
    session.pop(USER_SESSION_KEY, None)
