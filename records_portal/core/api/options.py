"""
Form options API controller.

Select inputs of the record dialogs are filled from these fixed lists.
"""

from django.http import HttpRequest
from ninja import Schema
from ninja_extra import api_controller
from ninja_extra import http_get

from records_portal.alumni.schemas import EMPLOYMENT_STATUS_LABELS
from records_portal.core.api.base import BaseAPI
from records_portal.core.api.permissions import IsAuthenticated
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.roles import Role
from records_portal.core.schemas import ChoiceSchema
from records_portal.core.validators import FACULTIES
from records_portal.projects.schemas import PROJECT_TYPE_LABELS
from records_portal.projects.schemas.projects import PROJECT_STATUSES
from records_portal.students.schemas import STUDENT_STATUS_LABELS


class FacultySchema(Schema):
    name: str
    departments: list[str]


class FormOptionsSchema(Schema):
    faculties: list[FacultySchema]
    roles: list[ChoiceSchema]
    student_statuses: list[ChoiceSchema]
    employment_statuses: list[ChoiceSchema]
    project_statuses: list[ChoiceSchema]
    project_types: list[ChoiceSchema]


def _choices(labels: dict[str, str]) -> list[ChoiceSchema]:
    return [ChoiceSchema(value=value, label=label) for value, label in labels.items()]


@api_controller("/options", tags=["Options"], permissions=[IsAuthenticated])
class OptionsController(BaseAPI):
    """Choices for the select inputs."""

    @http_get(
        "",
        response={200: FormOptionsSchema, 401: ErrorSchema},
        url_name="form_options",
    )
    def form_options(self, request: HttpRequest):
        """Faculties with their departments, and the labelled statuses."""
        return 200, FormOptionsSchema(
            faculties=[FacultySchema(name=name, departments=deps) for name, deps in FACULTIES.items()],
            roles=[ChoiceSchema(value=value, label=label) for value, label in Role.choices()],
            student_statuses=_choices(STUDENT_STATUS_LABELS),
            employment_statuses=_choices(EMPLOYMENT_STATUS_LABELS),
            project_statuses=_choices({status: status for status in PROJECT_STATUSES}),
            project_types=_choices(PROJECT_TYPE_LABELS),
        )
