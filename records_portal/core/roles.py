"""
Role definitions for the academic records portal.

Defines the 4 roles used across the portal:
- admin: Department staff with full management access
- student: Current students who browse records and submit capstone projects
- teacher: Faculty advisors who review students and comment on projects
- alumni: Graduates who maintain their own portfolio
"""

from enum import Enum


class Role(str, Enum):
    """
    Enum of available roles in the portal.

    Values match the role names stored in the session user.
    """

    ADMIN = "admin"
    STUDENT = "student"
    TEACHER = "teacher"
    ALUMNI = "alumni"

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        """Return (value, Thai label) pairs."""
        return [(role.value, ROLE_LABELS[role]) for role in cls]


# Thai labels shown on the dashboard and profile page
ROLE_LABELS = {
    Role.ADMIN: "ผู้ดูแลระบบ",
    Role.STUDENT: "นักศึกษา",
    Role.TEACHER: "อาจารย์",
    Role.ALUMNI: "ศิษย์เก่า",
}

# The records backend calls teachers "advisor"
BACKEND_ROLE_ALIASES = {
    "advisor": Role.TEACHER,
}


def map_backend_role(backend_role: str) -> Role:
    """
    Translate a role name returned by the records backend.

    Unknown names fall back to the student role, the least privileged one.
    """
    if backend_role in BACKEND_ROLE_ALIASES:
        return BACKEND_ROLE_ALIASES[backend_role]
    try:
        return Role(backend_role)
    except ValueError:
        return Role.STUDENT


def role_label(role: Role | str) -> str:
    """Return the Thai label for a role."""
    try:
        return ROLE_LABELS[Role(role)]
    except ValueError:
        return str(role)


def user_has_role(user, role: Role | str) -> bool:
    """
    Check if a user has a specific role.

    Args:
        user: PortalUser instance (or anonymous user)
        role: Role enum value or role name string

    Returns:
        True if user has the role
    """
    if not user or not user.is_authenticated:
        return False

    role_name = role.value if isinstance(role, Role) else role
    return user.role == role_name


def user_has_any_role(user, roles: list[Role | str]) -> bool:
    """
    Check if a user has any of the specified roles.

    Args:
        user: PortalUser instance (or anonymous user)
        roles: List of Role enum values or role name strings

    Returns:
        True if user has at least one of the roles
    """
    if not user or not user.is_authenticated:
        return False

    role_names = [r.value if isinstance(r, Role) else r for r in roles]
    return user.role in role_names


# ============================================================================
# Convenience functions for common permission checks
# ============================================================================


def is_admin(user) -> bool:
    """Check if user is a portal administrator."""
    return user_has_role(user, Role.ADMIN)


def can_manage_projects(user) -> bool:
    """Admins and students create and edit capstone projects."""
    return user_has_any_role(user, [Role.ADMIN, Role.STUDENT])


def can_comment_projects(user) -> bool:
    """Teachers and admins write project comments."""
    return user_has_any_role(user, [Role.ADMIN, Role.TEACHER])


def can_read_comments(user) -> bool:
    """Everybody except alumni sees the project comment threads."""
    return user_has_any_role(user, [Role.ADMIN, Role.TEACHER, Role.STUDENT])
