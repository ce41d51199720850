"""
Student schemas for API requests and responses.
"""

from typing import Any

from ninja import Schema
from pydantic import ConfigDict
from pydantic import field_validator

from records_portal.core.validators import MAX_STUDENT_YEAR
from records_portal.core.validators import MIN_STUDENT_YEAR
from records_portal.core.validators import check_first_name
from records_portal.core.validators import check_last_name
from records_portal.core.validators import check_phone
from records_portal.core.validators import check_required
from records_portal.core.validators import check_student_id
from records_portal.core.validators import check_university_email
from records_portal.gateway.mappers import as_choice
from records_portal.gateway.mappers import as_int
from records_portal.gateway.mappers import as_text

ACTIVE = "Active"
GRADUATED = "Graduated"
SUSPENDED = "Suspended"

STUDENT_STATUSES = [ACTIVE, GRADUATED, SUSPENDED]

STUDENT_STATUS_LABELS = {
    ACTIVE: "กำลังศึกษา",
    GRADUATED: "จบการศึกษา",
    SUSPENDED: "พักการศึกษา",
}


class StudentSchema(Schema):
    """A student record as shown in the student table."""

    id: str
    student_id: str
    first_name: str
    last_name: str
    faculty: str
    department: str
    year: int
    email: str
    phone: str
    address: str = ""
    status: str

    @staticmethod
    def from_row(row: dict[str, Any]) -> "StudentSchema":
        """Create schema from a backend row."""
        return StudentSchema(
            id=str(row.get("id")),
            student_id=as_text(row.get("student_id")),
            first_name=as_text(row.get("first_name")),
            last_name=as_text(row.get("last_name")),
            faculty=as_text(row.get("faculty")),
            department=as_text(row.get("department")),
            year=as_int(row.get("year"), 1),
            email=as_text(row.get("email")),
            phone=as_text(row.get("phone")),
            address=as_text(row.get("address")),
            status=as_choice(row.get("status"), STUDENT_STATUSES, ACTIVE),
        )


class StudentDetailSchema(StudentSchema):
    """Student detail dialog."""

    status_label: str

    @staticmethod
    def from_student(student: StudentSchema) -> "StudentDetailSchema":
        return StudentDetailSchema(
            **student.model_dump(),
            status_label=STUDENT_STATUS_LABELS[student.status],
        )


class StudentListSchema(Schema):
    """Filtered student table with the filter choices."""

    items: list[StudentSchema]
    total: int
    filtered: bool
    faculties: list[str]
    years: list[int]


class StudentFormSchema(Schema):
    """Create/edit student dialog."""

    model_config = ConfigDict(validate_default=True)

    student_id: str
    first_name: str
    last_name: str
    faculty: str = ""
    department: str = ""
    year: int = 1
    email: str
    phone: str
    address: str = ""
    status: str = ACTIVE

    @field_validator("student_id")
    @classmethod
    def valid_student_id(cls, v: str) -> str:
        return check_student_id(v)

    @field_validator("first_name")
    @classmethod
    def valid_first_name(cls, v: str) -> str:
        return check_first_name(v)

    @field_validator("last_name")
    @classmethod
    def valid_last_name(cls, v: str) -> str:
        return check_last_name(v)

    @field_validator("faculty")
    @classmethod
    def faculty_selected(cls, v: str) -> str:
        return check_required(v, "กรุณาเลือกคณะ")

    @field_validator("department")
    @classmethod
    def department_selected(cls, v: str) -> str:
        return check_required(v, "กรุณาเลือกสาขา")

    @field_validator("year")
    @classmethod
    def year_in_range(cls, v: int) -> int:
        if v < MIN_STUDENT_YEAR or v > MAX_STUDENT_YEAR:
            raise ValueError("ชั้นปีต้องอยู่ระหว่าง 1-5")
        return v

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return check_university_email(v)

    @field_validator("phone")
    @classmethod
    def valid_phone(cls, v: str) -> str:
        return check_phone(v)

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        if v not in STUDENT_STATUSES:
            raise ValueError(f"สถานะไม่ถูกต้อง เลือกได้: {', '.join(STUDENT_STATUSES)}")
        return v


class StudentSelectionSchema(Schema):
    """Students ticked in the table."""

    student_ids: list[str]

    @field_validator("student_ids")
    @classmethod
    def not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("กรุณาเลือกนักศึกษาที่ต้องการเปลี่ยนสถานะ")
        return v


class StudentStatusChangeSchema(StudentSelectionSchema):
    """Status dialog submission for the selected students."""

    status: str

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        if v not in STUDENT_STATUSES:
            raise ValueError(f"สถานะไม่ถูกต้อง เลือกได้: {', '.join(STUDENT_STATUSES)}")
        return v


class ValidationIssueSchema(Schema):
    """A spreadsheet row rejected by the backend validation."""

    row: int
    student_id: str = ""
    errors: list[str] = []


class SkippedRowSchema(Schema):
    """A spreadsheet row skipped by the backend (duplicate and so on)."""

    row: int
    student_id: str = ""
    reason: str = ""


class ImportResultSchema(Schema):
    """Outcome of a student spreadsheet import."""

    total: int = 0
    imported: int = 0
    skipped: int = 0
    validation_errors: list[ValidationIssueSchema] = []
    skipped_details: list[SkippedRowSchema] = []
    messages: list[str] = []
    warnings: list[str] = []

    @staticmethod
    def from_payload(data: dict[str, Any]) -> "ImportResultSchema":
        """Create schema from the backend import summary (camelCase keys)."""
        return ImportResultSchema(
            total=as_int(data.get("total"), 0),
            imported=as_int(data.get("imported"), 0),
            skipped=as_int(data.get("skipped"), 0),
            validation_errors=[
                ValidationIssueSchema(
                    row=as_int(item.get("row"), 0),
                    student_id=as_text(item.get("student_id")),
                    errors=[str(e) for e in item.get("errors") or []],
                )
                for item in data.get("validationErrors") or []
            ],
            skipped_details=[
                SkippedRowSchema(
                    row=as_int(item.get("row"), 0),
                    student_id=as_text(item.get("student_id")),
                    reason=as_text(item.get("reason")),
                )
                for item in data.get("skippedDetails") or []
            ],
        )


class ImportPreviewSchema(Schema):
    """First look at an uploaded spreadsheet before importing it."""

    filename: str
    size: int
    headers: list[str]
    rows: list[dict[str, str]]
