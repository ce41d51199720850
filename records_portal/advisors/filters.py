"""
Search and filters of the advisor directory.
"""

from records_portal.advisors.schemas import AdvisorSchema


def filter_advisors(advisors: list[AdvisorSchema], q: str = "", faculty: str = "") -> list[AdvisorSchema]:
    query = q.lower()
    return [
        a
        for a in advisors
        if (not q or query in a.name.lower()) and (not faculty or a.faculty == faculty)
    ]


def faculty_options(advisors: list[AdvisorSchema]) -> list[str]:
    return list(dict.fromkeys(a.faculty for a in advisors))


def department_advisor_names(advisors: list[AdvisorSchema], department: str) -> set[str]:
    """Names of the advisors teaching in ``department``."""
    return {a.name for a in advisors if a.department == department}
