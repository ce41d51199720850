"""
Capstone project schemas for API requests and responses.
"""

from datetime import date
from typing import Any

from ninja import Schema
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from records_portal.core.validators import check_required
from records_portal.gateway.mappers import as_choice
from records_portal.gateway.mappers import as_int
from records_portal.gateway.mappers import as_text
from records_portal.gateway.mappers import first_present
from records_portal.gateway.mappers import json_list

DRAFT = "Draft"
APPROVED = "Approved"
COMPLETED = "Completed"

PROJECT_STATUSES = [DRAFT, APPROVED, COMPLETED]

INDIVIDUAL = "individual"
GROUP = "group"

PROJECT_TYPES = [INDIVIDUAL, GROUP]

PROJECT_TYPE_LABELS = {
    INDIVIDUAL: "เดี่ยว",
    GROUP: "กลุ่ม",
}

MIN_TITLE_LENGTH = 5
MIN_GROUP_MEMBERS = 2


class ProjectCommentSchema(Schema):
    """An advisor comment on a project."""

    id: str
    project_id: str
    author_name: str
    author_role: str
    message: str
    created_at: str

    @staticmethod
    def from_row(row: dict[str, Any]) -> "ProjectCommentSchema":
        """Create schema from a comment row (snake or camel case keys)."""
        return ProjectCommentSchema(
            id=as_text(row.get("id")),
            project_id=as_text(first_present(row, "project_id", "projectId")),
            author_name=as_text(first_present(row, "author_name", "authorName")),
            author_role=as_text(first_present(row, "author_role", "authorRole")),
            message=as_text(row.get("message")),
            created_at=as_text(first_present(row, "created_at", "createdAt")),
        )


class ProjectSchema(Schema):
    """A capstone project card."""

    id: str
    project_id: str
    title_th: str
    title_en: str
    description: str
    advisor: str
    year: int
    members: list[str]
    document_url: str
    tags: list[str]
    status: str
    type: str
    has_award: bool
    comments: list[ProjectCommentSchema]
    created_by: str | None = None

    @staticmethod
    def from_row(row: dict[str, Any]) -> "ProjectSchema":
        """Create schema from a backend row."""
        created_by = first_present(row, "created_by", "createdBy")
        return ProjectSchema(
            id=str(row.get("id")),
            project_id=as_text(row.get("project_id")),
            title_th=as_text(row.get("title_th")),
            title_en=as_text(row.get("title_en")),
            description=as_text(row.get("description")),
            advisor=as_text(row.get("advisor")),
            year=as_int(row.get("year"), 0),
            members=[str(m) for m in json_list(row.get("members"))],
            document_url=as_text(row.get("document_url")),
            tags=[str(t) for t in json_list(row.get("tags"))],
            status=as_choice(row.get("status"), PROJECT_STATUSES, DRAFT),
            type=as_choice(row.get("type"), PROJECT_TYPES, INDIVIDUAL),
            has_award=bool(row.get("has_award")),
            comments=[
                ProjectCommentSchema.from_row(c)
                for c in json_list(row.get("comments"))
                if isinstance(c, dict)
            ],
            created_by=str(created_by) if created_by else None,
        )


class ProjectListSchema(Schema):
    items: list[ProjectSchema]
    total: int
    filtered: bool
    years: list[int]
    can_manage: bool
    can_comment: bool
    comments_visible: bool


class ProjectFormSchema(Schema):
    """
    Create/edit project dialog.

    ``type`` is declared before ``members`` because the member rule depends
    on it.
    """

    model_config = ConfigDict(validate_default=True)

    project_id: str = ""
    title_th: str = ""
    title_en: str = ""
    description: str = ""
    advisor: str = ""
    year: int = Field(default_factory=lambda: date.today().year)
    type: str = INDIVIDUAL
    members: list[str] = [""]
    document_url: str = ""
    tags: list[str] = []
    status: str = DRAFT
    has_award: bool = False

    @field_validator("project_id")
    @classmethod
    def project_id_given(cls, v: str) -> str:
        return check_required(v.strip(), "กรุณาระบุรหัสโครงงาน")

    @field_validator("title_th")
    @classmethod
    def title_long_enough(cls, v: str) -> str:
        if len(v) < MIN_TITLE_LENGTH:
            raise ValueError("ชื่อโปรเจคต้องมีความยาวอย่างน้อย 5 ตัวอักษร")
        return v

    @field_validator("advisor")
    @classmethod
    def advisor_selected(cls, v: str) -> str:
        return check_required(v, "กรุณาเลือกอาจารย์ที่ปรึกษา")

    @field_validator("description")
    @classmethod
    def description_given(cls, v: str) -> str:
        return check_required(v, "กรุณากรอกรายละเอียดโปรเจค")

    @field_validator("type")
    @classmethod
    def valid_type(cls, v: str) -> str:
        if v not in PROJECT_TYPES:
            raise ValueError(f"ประเภทโปรเจคไม่ถูกต้อง เลือกได้: {', '.join(PROJECT_TYPES)}")
        return v

    @field_validator("members")
    @classmethod
    def enough_members(cls, v: list[str], info) -> list[str]:
        members = [m for m in v if m.strip()]
        if info.data.get("type") == GROUP and len(members) < MIN_GROUP_MEMBERS:
            raise ValueError("โปรเจคกลุ่มต้องมีสมาชิกอย่างน้อย 2 คน")
        return members

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        tags: list[str] = []
        for tag in v:
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        if v not in PROJECT_STATUSES:
            raise ValueError(f"สถานะไม่ถูกต้อง เลือกได้: {', '.join(PROJECT_STATUSES)}")
        return v


class CommentCreateSchema(Schema):
    """New comment typed under a project card."""

    message: str

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("กรุณาเขียนความคิดเห็น")
        return v.strip()
