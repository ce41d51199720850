"""
Capstone projects API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from records_portal.core.api import BaseAPI
from records_portal.core.api import CanComment
from records_portal.core.api import IsAdmin
from records_portal.core.api import IsAdminOrStudent
from records_portal.core.api import IsAuthenticated
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.exceptions import NotFoundError
from records_portal.core.roles import can_comment_projects
from records_portal.core.roles import can_manage_projects
from records_portal.core.roles import can_read_comments
from records_portal.core.schemas import MessageSchema
from records_portal.core.spreadsheets import csv_response
from records_portal.core.spreadsheets import dated_filename
from records_portal.core.spreadsheets import render_csv
from records_portal.gateway.store import RecordsStore
from records_portal.projects.filters import filter_projects
from records_portal.projects.filters import hide_comments
from records_portal.projects.filters import visible_projects
from records_portal.projects.filters import year_options
from records_portal.projects.schemas import PROJECT_TYPE_LABELS
from records_portal.projects.schemas import CommentCreateSchema
from records_portal.projects.schemas import ProjectFormSchema
from records_portal.projects.schemas import ProjectListSchema
from records_portal.projects.schemas import ProjectSchema

UNKNOWN_AUTHOR = "ไม่ระบุชื่อ"

EXPORT_HEADERS = [
    "รหัสโปรเจค",
    "ชื่อ (TH)",
    "ชื่อ (EN)",
    "อาจารย์ที่ปรึกษา",
    "ปี",
    "ประเภท",
    "สถานะ",
    "รางวัล",
]


def project_export_row(project: ProjectSchema) -> list:
    return [
        project.project_id,
        project.title_th,
        project.title_en,
        project.advisor,
        project.year,
        PROJECT_TYPE_LABELS[project.type],
        project.status,
        "ได้รับรางวัล" if project.has_award else "-",
    ]


@api_controller("/projects", tags=["Projects"], permissions=[IsAuthenticated])
class ProjectController(BaseAPI):
    """Capstone project board, comments and export."""

    def _projects(self, request: HttpRequest) -> list[ProjectSchema]:
        store = RecordsStore.for_request(request)
        projects = visible_projects(store.projects(), store.advisors(), request.user)
        if not can_read_comments(request.user):
            projects = hide_comments(projects)
        return projects

    def _get_visible(self, request: HttpRequest, project_id: int) -> ProjectSchema:
        for project in self._projects(request):
            if project.id == str(project_id):
                return project
        raise NotFoundError("ไม่พบโครงงาน")

    @http_get(
        "",
        response={200: ProjectListSchema, 401: ErrorSchema},
        url_name="projects_list",
    )
    def list_projects(
        self,
        request: HttpRequest,
        q: str = "",
        year: int | None = None,
        status: str = "",
        type: str = "",
    ):
        """
        List projects with optional filtering.

        Non-admin users with a department only see projects supervised by
        advisors of that department.

        Optional filters:
        - q: Thai or English title, or any tag (case-insensitive)
        - year, status, type: exact match
        """
        all_projects = RecordsStore.for_request(request).projects()
        items = filter_projects(self._projects(request), q=q, year=year, status=status, type=type)

        return 200, ProjectListSchema(
            items=items,
            total=len(items),
            filtered=bool(q or status or type or year is not None),
            years=year_options(all_projects),
            can_manage=can_manage_projects(request.user),
            can_comment=can_comment_projects(request.user),
            comments_visible=can_read_comments(request.user),
        )

    @http_get(
        "/export",
        permissions=[IsAdmin],
        url_name="projects_export",
    )
    def export_projects(
        self,
        request: HttpRequest,
        q: str = "",
        year: int | None = None,
        status: str = "",
        type: str = "",
    ):
        """Download the filtered board as CSV."""
        projects = filter_projects(self._projects(request), q=q, year=year, status=status, type=type)
        content = render_csv(EXPORT_HEADERS, [project_export_row(p) for p in projects])
        return csv_response(content, dated_filename("projects"))

    @http_post(
        "",
        response={201: MessageSchema, 400: ErrorSchema, 403: ErrorSchema},
        permissions=[IsAdminOrStudent],
        url_name="projects_create",
    )
    def create_project(self, request: HttpRequest, data: ProjectFormSchema):
        """Add a project on behalf of the current user."""
        payload = data.model_dump()
        payload["created_by"] = request.user.id
        payload["createdBy"] = request.user.id
        message = RecordsStore.for_request(request).add_project(payload)
        return 201, MessageSchema(success=True, message=message)

    @http_get(
        "/{int:project_id}",
        response={200: ProjectSchema, 401: ErrorSchema, 404: ErrorSchema},
        url_name="projects_detail",
    )
    def get_project(self, request: HttpRequest, project_id: int):
        """Get one project card."""
        return 200, self._get_visible(request, project_id)

    @http_put(
        "/{int:project_id}",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdminOrStudent],
        url_name="projects_update",
    )
    def update_project(self, request: HttpRequest, project_id: int, data: ProjectFormSchema):
        """Edit a project."""
        project = self._get_visible(request, project_id)
        message = RecordsStore.for_request(request).update_project(project.id, data.model_dump())
        return 200, MessageSchema(success=True, message=message)

    @http_delete(
        "/{int:project_id}",
        response={200: MessageSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="projects_delete",
    )
    def delete_project(self, request: HttpRequest, project_id: int):
        """Delete a project."""
        project = self._get_visible(request, project_id)
        message = RecordsStore.for_request(request).delete_project(project.id)
        return 200, MessageSchema(success=True, message=message)

    @http_post(
        "/{int:project_id}/comments",
        response={201: MessageSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[CanComment],
        url_name="projects_add_comment",
    )
    def add_comment(self, request: HttpRequest, project_id: int, data: CommentCreateSchema):
        """Comment on a project as the current teacher or admin."""
        user = request.user
        project = self._get_visible(request, project_id)
        message = RecordsStore.for_request(request).add_project_comment(
            project.id,
            user.name or UNKNOWN_AUTHOR,
            user.role,
            data.message,
        )
        return 201, MessageSchema(success=True, message=message)
