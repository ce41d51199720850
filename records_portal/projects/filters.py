"""
Search and filters of the capstone project board.
"""

from records_portal.advisors.filters import department_advisor_names
from records_portal.advisors.schemas import AdvisorSchema
from records_portal.core.roles import is_admin
from records_portal.projects.schemas import ProjectSchema


def visible_projects(
    projects: list[ProjectSchema],
    advisors: list[AdvisorSchema],
    user,
) -> list[ProjectSchema]:
    """
    Non-admin users with a department only see projects supervised by an
    advisor of that department.
    """
    if is_admin(user) or not user.department:
        return projects
    names = department_advisor_names(advisors, user.department)
    return [p for p in projects if p.advisor in names]


def filter_projects(
    projects: list[ProjectSchema],
    q: str = "",
    year: int | None = None,
    status: str = "",
    type: str = "",
) -> list[ProjectSchema]:
    """Search both titles and the tags, then apply the select filters."""
    query = q.lower()
    return [
        p
        for p in projects
        if (
            not q
            or query in p.title_th.lower()
            or query in p.title_en.lower()
            or any(query in tag.lower() for tag in p.tags)
        )
        and (year is None or p.year == year)
        and (not status or p.status == status)
        and (not type or p.type == type)
    ]


def year_options(projects: list[ProjectSchema]) -> list[int]:
    return sorted({p.year for p in projects}, reverse=True)


def hide_comments(projects: list[ProjectSchema]) -> list[ProjectSchema]:
    """Strip the comment threads for users who may not read them."""
    return [p.model_copy(update={"comments": []}) for p in projects]
