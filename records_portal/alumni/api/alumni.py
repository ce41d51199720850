"""
Alumni API controller.
"""

import logging
import time

from django.http import HttpRequest
from django.http import HttpResponse
from django.utils.http import content_disposition_header
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from records_portal.alumni.filters import can_edit_alumni
from records_portal.alumni.filters import faculty_options
from records_portal.alumni.filters import filter_alumni
from records_portal.alumni.filters import find_own_record
from records_portal.alumni.filters import visible_alumni
from records_portal.alumni.filters import year_options
from records_portal.alumni.portfolio import PortfolioRenderer
from records_portal.alumni.portfolio import portfolio_filename
from records_portal.alumni.schemas import AlumniFormSchema
from records_portal.alumni.schemas import AlumniListSchema
from records_portal.alumni.schemas import AlumniSchema
from records_portal.alumni.schemas.alumni import generated_photo_url
from records_portal.core.api import BaseAPI
from records_portal.core.api import IsAdmin
from records_portal.core.api import IsAuthenticated
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.exceptions import NotFoundError
from records_portal.core.exceptions import NotOwnerError
from records_portal.core.exceptions import PermissionDeniedError
from records_portal.core.roles import Role
from records_portal.core.roles import user_has_role
from records_portal.core.schemas import MessageSchema
from records_portal.core.spreadsheets import csv_response
from records_portal.core.spreadsheets import dated_filename
from records_portal.core.spreadsheets import render_csv
from records_portal.gateway.store import RecordsStore

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "รหัส",
    "ชื่อ",
    "นามสกุล",
    "คณะ",
    "สาขา",
    "ปีที่จบ",
    "สถานที่ทำงาน",
    "ตำแหน่ง",
    "ติดต่อ",
]


def alumni_export_row(alumni: AlumniSchema) -> list:
    return [
        alumni.alumni_id,
        alumni.first_name,
        alumni.last_name,
        alumni.faculty,
        alumni.department,
        alumni.graduation_year,
        alumni.workplace,
        alumni.position,
        alumni.contact_info,
    ]


@api_controller("/alumni", tags=["Alumni"], permissions=[IsAuthenticated])
class AlumniController(BaseAPI):
    """Alumni directory, portfolios and their export."""

    def _alumni(self, request: HttpRequest) -> list[AlumniSchema]:
        return visible_alumni(RecordsStore.for_request(request).alumni(), request.user)

    def _get_visible(self, request: HttpRequest, alumni_id: int) -> AlumniSchema:
        for alumni in self._alumni(request):
            if alumni.id == str(alumni_id):
                return alumni
        raise NotFoundError("ไม่พบข้อมูลศิษย์เก่า")

    @http_get(
        "",
        response={200: AlumniListSchema, 401: ErrorSchema},
        url_name="alumni_list",
    )
    def list_alumni(
        self,
        request: HttpRequest,
        q: str = "",
        faculty: str = "",
        year: int | None = None,
    ):
        """
        List alumni with optional filtering.

        Alumni users only see graduates of their own department.

        Optional filters:
        - q: first/last name or workplace (case-insensitive)
        - faculty: exact match
        - year: graduation year
        """
        alumni = self._alumni(request)
        items = filter_alumni(alumni, q=q, faculty=faculty, year=year)

        return 200, AlumniListSchema(
            items=items,
            total=len(items),
            filtered=bool(q or faculty or year is not None),
            faculties=faculty_options(alumni),
            years=year_options(alumni),
        )

    @http_get(
        "/me",
        response={200: AlumniSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="alumni_me",
    )
    def my_record(self, request: HttpRequest):
        """The alumni record of the logged-in alumni user."""
        if not user_has_role(request.user, Role.ALUMNI):
            return PermissionDeniedError("เฉพาะศิษย์เก่าเท่านั้น").to_response()

        record = find_own_record(RecordsStore.for_request(request).alumni(), request.user)
        if record is None:
            return NotFoundError("ไม่พบข้อมูลศิษย์เก่าของคุณ").to_response()
        return 200, record

    @http_get(
        "/export",
        permissions=[IsAdmin],
        url_name="alumni_export",
    )
    def export_alumni(
        self,
        request: HttpRequest,
        q: str = "",
        faculty: str = "",
        year: int | None = None,
    ):
        """Download the filtered directory as CSV."""
        alumni = filter_alumni(self._alumni(request), q=q, faculty=faculty, year=year)
        content = render_csv(EXPORT_HEADERS, [alumni_export_row(a) for a in alumni])
        return csv_response(content, dated_filename("alumni"))

    @http_post(
        "",
        response={201: MessageSchema, 400: ErrorSchema, 403: ErrorSchema},
        permissions=[IsAdmin],
        url_name="alumni_create",
    )
    def create_alumni(self, request: HttpRequest, data: AlumniFormSchema):
        """Add an alumni record."""
        payload = data.model_dump()
        if not payload["photo_url"]:
            payload["photo_url"] = generated_photo_url(str(int(time.time() * 1000)))
        message = RecordsStore.for_request(request).add_alumni(payload)
        return 201, MessageSchema(success=True, message=message)

    @http_get(
        "/{int:alumni_id}",
        response={200: AlumniSchema, 401: ErrorSchema, 404: ErrorSchema},
        url_name="alumni_detail",
    )
    def get_alumni(self, request: HttpRequest, alumni_id: int):
        """Portfolio view of one alumni."""
        return 200, self._get_visible(request, alumni_id)

    @http_get(
        "/{int:alumni_id}/portfolio.png",
        response={401: ErrorSchema, 404: ErrorSchema, 500: ErrorSchema},
        url_name="alumni_portfolio_image",
    )
    def portfolio_image(self, request: HttpRequest, alumni_id: int):
        """Download the portfolio card as a PNG image."""
        alumni = self._get_visible(request, alumni_id)
        content = PortfolioRenderer().render(alumni)
        response = HttpResponse(content, content_type="image/png")
        response["Content-Disposition"] = content_disposition_header(True, portfolio_filename(alumni))
        return response

    @http_put(
        "/{int:alumni_id}",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="alumni_update",
    )
    def update_alumni(self, request: HttpRequest, alumni_id: int, data: AlumniFormSchema):
        """Edit an alumni record. Alumni users may only edit their own."""
        store = RecordsStore.for_request(request)
        record = store.alumnus(str(alumni_id))

        if not can_edit_alumni(request.user, record):
            logger.info("User %s may not edit alumni %s", request.user.id, record.id)
            if user_has_role(request.user, Role.ALUMNI):
                return NotOwnerError().to_response()
            return PermissionDeniedError().to_response()

        message = store.update_alumni(record.id, data.model_dump())
        return 200, MessageSchema(success=True, message=message)

    @http_delete(
        "/{int:alumni_id}",
        response={200: MessageSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="alumni_delete",
    )
    def delete_alumni(self, request: HttpRequest, alumni_id: int):
        """Delete an alumni record."""
        message = RecordsStore.for_request(request).delete_alumni(str(alumni_id))
        return 200, MessageSchema(success=True, message=message)
