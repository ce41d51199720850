"""
Advisors API controller.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from records_portal.advisors.filters import faculty_options
from records_portal.advisors.filters import filter_advisors
from records_portal.advisors.schemas import AdvisorFormSchema
from records_portal.advisors.schemas import AdvisorListSchema
from records_portal.advisors.schemas import AdvisorSchema
from records_portal.core.api import BaseAPI
from records_portal.core.api import CanViewAdvisors
from records_portal.core.api import IsAdmin
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.schemas import MessageSchema
from records_portal.gateway.store import RecordsStore


@api_controller("/advisors", tags=["Advisors"], permissions=[CanViewAdvisors])
class AdvisorController(BaseAPI):
    """Advisor directory."""

    @http_get(
        "",
        response={200: AdvisorListSchema, 401: ErrorSchema, 403: ErrorSchema},
        url_name="advisors_list",
    )
    def list_advisors(self, request: HttpRequest, q: str = "", faculty: str = ""):
        """
        List advisors.

        Optional filters:
        - q: name (case-insensitive)
        - faculty: exact match
        """
        advisors = RecordsStore.for_request(request).advisors()
        items = filter_advisors(advisors, q=q, faculty=faculty)
        return 200, AdvisorListSchema(items=items, total=len(items), faculties=faculty_options(advisors))

    @http_post(
        "",
        response={201: MessageSchema, 400: ErrorSchema, 403: ErrorSchema},
        permissions=[IsAdmin],
        url_name="advisors_create",
    )
    def create_advisor(self, request: HttpRequest, data: AdvisorFormSchema):
        """Add an advisor."""
        message = RecordsStore.for_request(request).add_advisor(data.model_dump())
        return 201, MessageSchema(success=True, message=message)

    @http_get(
        "/{int:advisor_id}",
        response={200: AdvisorSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="advisors_detail",
    )
    def get_advisor(self, request: HttpRequest, advisor_id: int):
        """Get one advisor."""
        return 200, RecordsStore.for_request(request).advisor(str(advisor_id))

    @http_put(
        "/{int:advisor_id}",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="advisors_update",
    )
    def update_advisor(self, request: HttpRequest, advisor_id: int, data: AdvisorFormSchema):
        """Edit an advisor."""
        message = RecordsStore.for_request(request).update_advisor(str(advisor_id), data.model_dump())
        return 200, MessageSchema(success=True, message=message)

    @http_delete(
        "/{int:advisor_id}",
        response={200: MessageSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="advisors_delete",
    )
    def delete_advisor(self, request: HttpRequest, advisor_id: int):
        """Delete an advisor."""
        message = RecordsStore.for_request(request).delete_advisor(str(advisor_id))
        return 200, MessageSchema(success=True, message=message)
