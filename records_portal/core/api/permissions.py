"""
Permission classes for API controllers.

The session user is attached to ``request.user`` by PortalUserMiddleware and
carries a single role.
"""

from typing import Any

from django.http import HttpRequest
from ninja_extra import permissions

from records_portal.core.roles import Role
from records_portal.core.roles import user_has_any_role


class IsAuthenticated(permissions.BasePermission):
    """
    Permission class that requires a logged-in session.
    """

    message = "กรุณาเข้าสู่ระบบ"

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Check if the user is authenticated."""
        return bool(request.user and request.user.is_authenticated)


class RolePermission(permissions.BasePermission):
    """
    Base class for permissions granted to a fixed set of roles.

    Subclasses only declare ``roles``.
    """

    roles: tuple[Role, ...] = ()
    message = "คุณไม่มีสิทธิ์เข้าถึงส่วนนี้"

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        return user_has_any_role(request.user, list(self.roles))


class IsAdmin(RolePermission):
    """Only portal administrators."""

    roles = (Role.ADMIN,)
    message = "เฉพาะผู้ดูแลระบบเท่านั้น"


class IsAdminOrTeacher(RolePermission):
    """Student records are visible to admins and teachers."""

    roles = (Role.ADMIN, Role.TEACHER)


class IsAdminOrStudent(RolePermission):
    """Capstone projects are created and edited by admins and students."""

    roles = (Role.ADMIN, Role.STUDENT)


class CanViewAdvisors(RolePermission):
    """Everybody except alumni browses the advisor directory."""

    roles = (Role.ADMIN, Role.STUDENT, Role.TEACHER)


class CanComment(RolePermission):
    """Teachers and admins comment on projects."""

    roles = (Role.ADMIN, Role.TEACHER)
    message = "เฉพาะอาจารย์และผู้ดูแลระบบที่แสดงความคิดเห็นได้"


class AllowAny(permissions.BasePermission):
    """
    Permission class that allows any access.

    Used for the login endpoints.
    """

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Always return True."""
        return True
