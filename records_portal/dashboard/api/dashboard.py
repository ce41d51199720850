"""
Dashboard API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get

from records_portal.core.api import BaseAPI
from records_portal.core.api import IsAuthenticated
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.roles import can_read_comments
from records_portal.dashboard.schemas import DashboardSchema
from records_portal.dashboard.stats import build_dashboard
from records_portal.gateway.store import RecordsStore
from records_portal.projects.filters import hide_comments


@api_controller("/dashboard", tags=["Dashboard"], permissions=[IsAuthenticated])
class DashboardController(BaseAPI):
    """Statistics shown on the landing page."""

    @http_get(
        "",
        response={200: DashboardSchema, 401: ErrorSchema},
        url_name="dashboard",
    )
    def get_dashboard(self, request: HttpRequest):
        """Cards, charts and highlight lists for every role."""
        store = RecordsStore.for_request(request)
        projects = store.projects()
        if not can_read_comments(request.user):
            projects = hide_comments(projects)
        return 200, build_dashboard(request.user, store.students(), store.alumni(), projects)
