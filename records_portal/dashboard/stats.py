"""
Statistics behind the dashboard cards and charts.

All figures are computed over the whole collections, regardless of the
department scoping applied on the list screens.
"""

from collections import Counter

from records_portal.alumni.schemas import AlumniSchema
from records_portal.core.roles import role_label
from records_portal.dashboard.schemas import ChartPointSchema
from records_portal.dashboard.schemas import ChartsSchema
from records_portal.dashboard.schemas import DashboardSchema
from records_portal.dashboard.schemas import StatCardsSchema
from records_portal.projects.schemas import ProjectSchema
from records_portal.students.schemas import StudentSchema
from records_portal.students.schemas.students import GRADUATED

PALETTE = ["#3b82f6", "#8b5cf6", "#ec4899", "#f59e0b", "#10b981", "#06b6d4"]
UNKNOWN_DEPARTMENT = "ไม่ระบุ"
RECENT_ALUMNI_COUNT = 5
AWARD_PROJECTS_COUNT = 5


def graduated_percentage(graduated: int, total: int) -> float:
    """Share of graduated students, one decimal, 0 without students."""
    if not total:
        return 0.0
    return round(graduated / total * 100, 1)


def stat_cards(
    students: list[StudentSchema],
    alumni: list[AlumniSchema],
    projects: list[ProjectSchema],
) -> StatCardsSchema:
    graduated = sum(1 for s in students if s.status == GRADUATED)
    return StatCardsSchema(
        total_students=len(students),
        graduated_students=graduated,
        graduated_percentage=graduated_percentage(graduated, len(students)),
        total_alumni=len(alumni),
        total_projects=len(projects),
        award_projects=sum(1 for p in projects if p.has_award),
    )


def _by_department(departments: list[str], colored: bool = False) -> list[ChartPointSchema]:
    # Counter keeps first-appearance order
    counts = Counter(d or UNKNOWN_DEPARTMENT for d in departments)
    return [
        ChartPointSchema(
            label=name,
            value=count,
            color=PALETTE[idx % len(PALETTE)] if colored else None,
        )
        for idx, (name, count) in enumerate(counts.items())
    ]


def _by_year(years: list[int]) -> list[ChartPointSchema]:
    counts = Counter(years)
    return [ChartPointSchema(label=str(year), value=counts[year]) for year in sorted(counts)]


def charts(
    students: list[StudentSchema],
    alumni: list[AlumniSchema],
    projects: list[ProjectSchema],
) -> ChartsSchema:
    return ChartsSchema(
        alumni_by_department=_by_department([a.department for a in alumni], colored=True),
        projects_by_year=_by_year([p.year for p in projects]),
        alumni_by_year=_by_year([a.graduation_year for a in alumni]),
        students_by_department=_by_department([s.department for s in students]),
    )


def build_dashboard(
    user,
    students: list[StudentSchema],
    alumni: list[AlumniSchema],
    projects: list[ProjectSchema],
) -> DashboardSchema:
    """Assemble the dashboard for ``user``."""
    return DashboardSchema(
        welcome=f"ยินดีต้อนรับ, {user.name} ({role_label(user.role)})",
        cards=stat_cards(students, alumni, projects),
        charts=charts(students, alumni, projects),
        recent_alumni=alumni[:RECENT_ALUMNI_COUNT],
        award_projects=[p for p in projects if p.has_award][:AWARD_PROJECTS_COUNT],
        palette=PALETTE,
    )
