"""
Dashboard schemas.
"""

from ninja import Schema

from records_portal.alumni.schemas import AlumniSchema
from records_portal.projects.schemas import ProjectSchema


class StatCardsSchema(Schema):
    total_students: int
    graduated_students: int
    graduated_percentage: float
    total_alumni: int
    total_projects: int
    award_projects: int


class ChartPointSchema(Schema):
    """One bar or pie slice."""

    label: str
    value: int
    color: str | None = None


class ChartsSchema(Schema):
    alumni_by_department: list[ChartPointSchema]
    projects_by_year: list[ChartPointSchema]
    alumni_by_year: list[ChartPointSchema]
    students_by_department: list[ChartPointSchema]


class DashboardSchema(Schema):
    """Everything the dashboard page renders."""

    welcome: str
    cards: StatCardsSchema
    charts: ChartsSchema
    recent_alumni: list[AlumniSchema]
    award_projects: list[ProjectSchema]
    palette: list[str]
