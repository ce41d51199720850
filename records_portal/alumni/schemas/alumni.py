"""
Alumni schemas for API requests and responses.
"""

from datetime import date
from typing import Any

from ninja import Schema
from pydantic import ConfigDict
from pydantic import field_validator

from records_portal.core.validators import MIN_GRADUATION_YEAR
from records_portal.core.validators import check_first_name
from records_portal.core.validators import check_last_name
from records_portal.core.validators import check_required
from records_portal.gateway.mappers import as_choice
from records_portal.gateway.mappers import as_int
from records_portal.gateway.mappers import as_text
from records_portal.gateway.mappers import json_list

EMPLOYED = "employed"
SEEKING = "seeking"

EMPLOYMENT_STATUSES = [EMPLOYED, SEEKING]

EMPLOYMENT_STATUS_LABELS = {
    EMPLOYED: "มีงานทำ",
    SEEKING: "หางาน",
}


class EducationEntrySchema(Schema):
    years: str = ""
    institution: str = ""
    address: str = ""
    grade: str = ""


class ExperienceEntrySchema(Schema):
    years: str = ""
    company: str = ""
    position: str = ""


class CustomFieldSchema(Schema):
    """Free label/value pair, shown as awards on the portfolio."""

    label: str = ""
    value: str = ""


def _entries(value: Any, schema: type[Schema]) -> list:
    keys = schema.model_fields.keys()
    return [
        schema(**{key: as_text(item.get(key)) for key in keys})
        for item in json_list(value)
        if isinstance(item, dict)
    ]


class AlumniSchema(Schema):
    """An alumni record with its portfolio sections."""

    id: str
    alumni_id: str
    first_name: str
    last_name: str
    faculty: str
    department: str
    graduation_year: int
    workplace: str
    position: str
    contact_info: str
    portfolio: str
    photo_url: str
    employment_status: str
    about_me: str
    email: str
    address: str
    phone: str
    skills: list[str]
    education: list[EducationEntrySchema]
    experience: list[ExperienceEntrySchema]
    custom_fields: list[CustomFieldSchema]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @staticmethod
    def from_row(row: dict[str, Any]) -> "AlumniSchema":
        """Create schema from a backend row."""
        return AlumniSchema(
            id=str(row.get("id")),
            alumni_id=as_text(row.get("alumni_id")),
            first_name=as_text(row.get("first_name")),
            last_name=as_text(row.get("last_name")),
            faculty=as_text(row.get("faculty")),
            department=as_text(row.get("department")),
            graduation_year=as_int(row.get("graduation_year"), 0),
            workplace=as_text(row.get("workplace")),
            position=as_text(row.get("position")),
            contact_info=as_text(row.get("contact_info")),
            portfolio=as_text(row.get("portfolio")),
            photo_url=as_text(row.get("photo_url")),
            employment_status=as_choice(row.get("employment_status"), EMPLOYMENT_STATUSES, SEEKING),
            about_me=as_text(row.get("about_me")),
            email=as_text(row.get("email")),
            address=as_text(row.get("address")),
            phone=as_text(row.get("phone")),
            skills=[str(s) for s in json_list(row.get("skills"))],
            education=_entries(row.get("education"), EducationEntrySchema),
            experience=_entries(row.get("experience"), ExperienceEntrySchema),
            custom_fields=_entries(row.get("custom_fields"), CustomFieldSchema),
        )


class AlumniListSchema(Schema):
    """Filtered alumni directory with the filter choices."""

    items: list[AlumniSchema]
    total: int
    filtered: bool
    faculties: list[str]
    years: list[int]


class AlumniFormSchema(Schema):
    """
    Create/edit alumni dialog, both the basic and the portfolio tab.

    ``employment_status`` is declared before ``workplace`` because the
    workplace rule depends on it.
    """

    model_config = ConfigDict(validate_default=True)

    alumni_id: str = ""
    first_name: str
    last_name: str
    faculty: str = ""
    department: str = ""
    graduation_year: int
    employment_status: str = EMPLOYED
    workplace: str = ""
    position: str = ""
    contact_info: str = ""
    portfolio: str = ""
    photo_url: str = ""
    about_me: str = ""
    email: str = ""
    address: str = ""
    phone: str = ""
    skills: list[str] = []
    education: list[EducationEntrySchema] = []
    experience: list[ExperienceEntrySchema] = []
    custom_fields: list[CustomFieldSchema] = []

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

    @field_validator("graduation_year")
    @classmethod
    def graduation_year_in_range(cls, v: int) -> int:
        if v < MIN_GRADUATION_YEAR or v > date.today().year:
            raise ValueError("ปีที่จบไม่ถูกต้อง")
        return v

    @field_validator("employment_status")
    @classmethod
    def valid_employment_status(cls, v: str) -> str:
        if v not in EMPLOYMENT_STATUSES:
            raise ValueError(f"สถานะการทำงานไม่ถูกต้อง เลือกได้: {', '.join(EMPLOYMENT_STATUSES)}")
        return v

    @field_validator("workplace")
    @classmethod
    def workplace_when_employed(cls, v: str, info) -> str:
        if info.data.get("employment_status") == EMPLOYED and not v:
            raise ValueError("กรุณากรอกสถานที่ทำงาน")
        return v

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str]) -> list[str]:
        return [skill.strip() for skill in v if skill.strip()]


AVATAR_URL = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def generated_photo_url(seed: str) -> str:
    """Cartoon avatar used when a new record comes without a photo."""
    return AVATAR_URL.format(seed=seed)
