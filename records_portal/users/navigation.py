"""
Sidebar menu of the portal.
"""

from records_portal.core.roles import Role
from records_portal.core.roles import user_has_any_role

ALL_ROLES = (Role.ADMIN, Role.STUDENT, Role.TEACHER, Role.ALUMNI)

# (path, label, roles allowed to see the entry)
NAV_ITEMS = [
    ("/dashboard", "แดชบอร์ด", ALL_ROLES),
    ("/students", "นักศึกษา", (Role.ADMIN, Role.TEACHER)),
    ("/alumni", "ศิษย์เก่า", ALL_ROLES),
    ("/projects", "โปรเจคจบ", ALL_ROLES),
    ("/advisors", "อาจารย์ที่ปรึกษา", (Role.ADMIN, Role.STUDENT, Role.TEACHER)),
    ("/import-students", "นำเข้าข้อมูลนักศึกษา", (Role.ADMIN,)),
]


def navigation_for(user) -> list[tuple[str, str]]:
    """Return the (path, label) entries visible to ``user``."""
    return [
        (path, label)
        for path, label, roles in NAV_ITEMS
        if user_has_any_role(user, list(roles))
    ]
