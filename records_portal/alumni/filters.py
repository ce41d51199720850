"""
Search and filters of the alumni directory.
"""

from records_portal.alumni.schemas import AlumniSchema
from records_portal.core.roles import Role
from records_portal.core.roles import user_has_role


def visible_alumni(alumni: list[AlumniSchema], user) -> list[AlumniSchema]:
    """Alumni users only see graduates of their own department."""
    if user_has_role(user, Role.ALUMNI) and user.department:
        return [a for a in alumni if a.department == user.department]
    return alumni


def filter_alumni(
    alumni: list[AlumniSchema],
    q: str = "",
    faculty: str = "",
    year: int | None = None,
) -> list[AlumniSchema]:
    """Search names and workplace, then apply the faculty and year filters."""
    query = q.lower()
    return [
        a
        for a in alumni
        if (
            not q
            or query in a.first_name.lower()
            or query in a.last_name.lower()
            or query in a.workplace.lower()
        )
        and (not faculty or a.faculty == faculty)
        and (year is None or a.graduation_year == year)
    ]


def faculty_options(alumni: list[AlumniSchema]) -> list[str]:
    return list(dict.fromkeys(a.faculty for a in alumni))


def year_options(alumni: list[AlumniSchema]) -> list[int]:
    """Graduation years, most recent first."""
    return sorted({a.graduation_year for a in alumni}, reverse=True)


def find_own_record(alumni: list[AlumniSchema], user) -> AlumniSchema | None:
    """The record of an alumni user, matched on ``alumni_id``."""
    if not user.alumni_id:
        return None
    return next((a for a in alumni if a.alumni_id == user.alumni_id), None)


def can_edit_alumni(user, record: AlumniSchema) -> bool:
    """Admins edit any record, alumni only their own."""
    if user_has_role(user, Role.ADMIN):
        return True
    return user_has_role(user, Role.ALUMNI) and bool(user.alumni_id) and record.alumni_id == user.alumni_id
