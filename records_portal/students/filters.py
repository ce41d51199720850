"""
Search and filters of the student table.
"""

from records_portal.core.roles import Role
from records_portal.core.roles import user_has_role
from records_portal.students.schemas import StudentSchema


def visible_students(students: list[StudentSchema], user) -> list[StudentSchema]:
    """Teachers only see the students of their own department."""
    if user_has_role(user, Role.TEACHER) and user.department:
        return [s for s in students if s.department == user.department]
    return students


def filter_students(
    students: list[StudentSchema],
    q: str = "",
    faculty: str = "",
    status: str = "",
    year: int | None = None,
) -> list[StudentSchema]:
    """
    Apply the search box and the select filters.

    The search matches first or last name case-insensitively and the
    student id as a plain substring.
    """
    query = q.lower()
    return [
        s
        for s in students
        if (
            not q
            or query in s.first_name.lower()
            or query in s.last_name.lower()
            or q in s.student_id
        )
        and (not faculty or s.faculty == faculty)
        and (not status or s.status == status)
        and (year is None or s.year == year)
    ]


def faculty_options(students: list[StudentSchema]) -> list[str]:
    """Faculties in order of first appearance."""
    return list(dict.fromkeys(s.faculty for s in students))


def year_options(students: list[StudentSchema]) -> list[int]:
    return sorted({s.year for s in students})
