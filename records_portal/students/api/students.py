"""
Students API controller.
"""

import logging

from django.http import HttpRequest
from ninja import File
from ninja import UploadedFile
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from records_portal.core.api import BaseAPI
from records_portal.core.api import IsAdmin
from records_portal.core.api import IsAdminOrTeacher
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.exceptions import NotFoundError
from records_portal.core.schemas import MessageSchema
from records_portal.core.spreadsheets import csv_response
from records_portal.core.spreadsheets import dated_filename
from records_portal.core.spreadsheets import render_csv
from records_portal.gateway.store import RecordsStore
from records_portal.students import imports
from records_portal.students.filters import faculty_options
from records_portal.students.filters import filter_students
from records_portal.students.filters import visible_students
from records_portal.students.filters import year_options
from records_portal.students.schemas import STUDENT_STATUS_LABELS
from records_portal.students.schemas import ImportPreviewSchema
from records_portal.students.schemas import ImportResultSchema
from records_portal.students.schemas import StudentDetailSchema
from records_portal.students.schemas import StudentFormSchema
from records_portal.students.schemas import StudentListSchema
from records_portal.students.schemas import StudentSchema
from records_portal.students.schemas import StudentSelectionSchema
from records_portal.students.schemas import StudentStatusChangeSchema
from records_portal.students.schemas.students import GRADUATED

logger = logging.getLogger(__name__)

EXPORT_HEADERS = [
    "รหัสนักศึกษา",
    "ชื่อ",
    "นามสกุล",
    "คณะ",
    "สาขา",
    "ชั้นปี",
    "อีเมล",
    "เบอร์โทร",
    "ที่อยู่",
    "สถานะ",
]


def student_export_row(student: StudentSchema) -> list:
    return [
        student.student_id,
        student.first_name,
        student.last_name,
        student.faculty,
        student.department,
        student.year,
        student.email,
        student.phone,
        student.address,
        student.status,
    ]


@api_controller("/students", tags=["Students"], permissions=[IsAdminOrTeacher])
class StudentController(BaseAPI):
    """Student table, dialogs, status changes, export and import."""

    def _students(self, request: HttpRequest) -> list[StudentSchema]:
        return visible_students(RecordsStore.for_request(request).students(), request.user)

    def _get_visible(self, request: HttpRequest, student_id: int) -> StudentSchema:
        for student in self._students(request):
            if student.id == str(student_id):
                return student
        raise NotFoundError("ไม่พบข้อมูลนักศึกษา")

    @http_get(
        "",
        response={200: StudentListSchema, 401: ErrorSchema, 403: ErrorSchema},
        url_name="students_list",
    )
    def list_students(
        self,
        request: HttpRequest,
        q: str = "",
        faculty: str = "",
        status: str = "",
        year: int | None = None,
    ):
        """
        List students with optional filtering.

        Optional filters:
        - q: first/last name (case-insensitive) or student id
        - faculty, status: exact match
        - year: study year (1-5)
        """
        all_students = RecordsStore.for_request(request).students()
        students = visible_students(all_students, request.user)
        items = filter_students(students, q=q, faculty=faculty, status=status, year=year)

        return 200, StudentListSchema(
            items=items,
            total=len(items),
            filtered=bool(q or faculty or status or year is not None),
            faculties=faculty_options(all_students),
            years=year_options(all_students),
        )

    @http_get(
        "/export",
        permissions=[IsAdmin],
        url_name="students_export",
    )
    def export_students(
        self,
        request: HttpRequest,
        q: str = "",
        faculty: str = "",
        status: str = "",
        year: int | None = None,
    ):
        """Download the filtered table as CSV."""
        students = filter_students(self._students(request), q=q, faculty=faculty, status=status, year=year)
        content = render_csv(EXPORT_HEADERS, [student_export_row(s) for s in students])
        return csv_response(content, dated_filename("students"))

    @http_get(
        "/import/template",
        permissions=[IsAdmin],
        url_name="students_import_template",
    )
    def import_template(self, request: HttpRequest):
        """Download the import template with one sample row."""
        return csv_response(imports.template_csv(), imports.TEMPLATE_FILENAME)

    @http_post(
        "/import/preview",
        response={200: ImportPreviewSchema, 400: ErrorSchema, 413: ErrorSchema, 415: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_import_preview",
    )
    def import_preview(self, request: HttpRequest, file: UploadedFile = File(...)):
        """Parse an uploaded CSV to preview it before importing."""
        imports.check_upload(file.name, file.size)
        return 200, imports.build_preview(file.name, file.read())

    @http_post(
        "/import",
        response={200: ImportResultSchema, 400: ErrorSchema, 413: ErrorSchema, 415: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_import",
    )
    def import_students(self, request: HttpRequest, file: UploadedFile = File(...)):
        """Forward a spreadsheet to the records backend."""
        imports.check_upload(file.name, file.size)
        data = RecordsStore.for_request(request).import_students(file.name, file.read(), file.content_type)
        return 200, imports.summarize(data)

    @http_post(
        "/status",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_status",
    )
    def change_status(self, request: HttpRequest, data: StudentStatusChangeSchema):
        """
        Change the status of the selected students.

        Graduating moves them to the alumni records.
        """
        store = RecordsStore.for_request(request)
        count = len(data.student_ids)
        logger.info("Changing status of %s students to %s", count, data.status)
        if data.status == GRADUATED:
            store.graduate_students(data.student_ids)
            message = f"นักศึกษาจบการศึกษาสำเร็จ {count} คน และย้ายไปยังระบบศิษย์เก่าแล้ว"
        else:
            store.update_student_status(data.student_ids, data.status)
            message = f'เปลี่ยนสถานะเป็น "{STUDENT_STATUS_LABELS[data.status]}" สำเร็จ {count} คน'
        return 200, MessageSchema(success=True, message=message)

    @http_post(
        "/graduate",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_graduate",
    )
    def graduate(self, request: HttpRequest, data: StudentSelectionSchema):
        """Graduate the selected students."""
        message = RecordsStore.for_request(request).graduate_students(data.student_ids)
        return 200, MessageSchema(success=True, message=message)

    @http_post(
        "",
        response={201: MessageSchema, 400: ErrorSchema, 403: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_create",
    )
    def create_student(self, request: HttpRequest, data: StudentFormSchema):
        """Add a student."""
        message = RecordsStore.for_request(request).add_student(data.model_dump())
        return 201, MessageSchema(success=True, message=message)

    @http_get(
        "/{int:student_id}",
        response={200: StudentDetailSchema, 401: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="students_detail",
    )
    def get_student(self, request: HttpRequest, student_id: int):
        """Student detail dialog."""
        return 200, StudentDetailSchema.from_student(self._get_visible(request, student_id))

    @http_put(
        "/{int:student_id}",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_update",
    )
    def update_student(self, request: HttpRequest, student_id: int, data: StudentFormSchema):
        """Edit a student."""
        student = self._get_visible(request, student_id)
        message = RecordsStore.for_request(request).update_student(student.id, data.model_dump())
        return 200, MessageSchema(success=True, message=message)

    @http_delete(
        "/{int:student_id}",
        response={200: MessageSchema, 403: ErrorSchema, 404: ErrorSchema},
        permissions=[IsAdmin],
        url_name="students_delete",
    )
    def delete_student(self, request: HttpRequest, student_id: int):
        """Delete a student."""
        student = self._get_visible(request, student_id)
        message = RecordsStore.for_request(request).delete_student(student.id)
        return 200, MessageSchema(success=True, message=message)
