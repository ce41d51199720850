"""
Advisor schemas for API requests and responses.
"""

from typing import Any

from ninja import Schema
from pydantic import ConfigDict
from pydantic import field_validator

from records_portal.core.validators import check_phone
from records_portal.core.validators import check_required
from records_portal.core.validators import check_university_email
from records_portal.gateway.mappers import as_text


class AdvisorSchema(Schema):
    """A faculty advisor."""

    id: str
    advisor_id: str
    name: str
    faculty: str
    department: str
    email: str
    phone: str

    @staticmethod
    def from_row(row: dict[str, Any]) -> "AdvisorSchema":
        """Create schema from a backend row."""
        return AdvisorSchema(
            id=str(row.get("id")),
            advisor_id=as_text(row.get("advisor_id")),
            name=as_text(row.get("name")),
            faculty=as_text(row.get("faculty")),
            department=as_text(row.get("department")),
            email=as_text(row.get("email")),
            phone=as_text(row.get("phone")),
        )


class AdvisorListSchema(Schema):
    items: list[AdvisorSchema]
    total: int
    faculties: list[str]


class AdvisorFormSchema(Schema):
    """Create/edit advisor dialog."""

    model_config = ConfigDict(validate_default=True)

    advisor_id: str = ""
    name: str = ""
    faculty: str = ""
    department: str = ""
    email: str
    phone: str

    @field_validator("name")
    @classmethod
    def name_given(cls, v: str) -> str:
        return check_required(v, "กรุณากรอกชื่ออาจารย์")

    @field_validator("faculty")
    @classmethod
    def faculty_selected(cls, v: str) -> str:
        return check_required(v, "กรุณาเลือกคณะ")

    @field_validator("department")
    @classmethod
    def department_selected(cls, v: str) -> str:
        return check_required(v, "กรุณาเลือกภาควิชา")

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return check_university_email(v)

    @field_validator("phone")
    @classmethod
    def valid_phone(cls, v: str) -> str:
        return check_phone(v)
