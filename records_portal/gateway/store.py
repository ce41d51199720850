"""
Per-session cache of the four record collections.

The screens filter and aggregate whole collections, so each collection is
fetched once (``limit=1000``) and kept in the Django cache under the session
key. Every mutation goes to the records backend first and then refetches the
collections it touched.
"""

import logging
from collections.abc import Callable
from typing import Any

from django.conf import settings
from django.core.cache import cache

from records_portal.advisors.schemas import AdvisorSchema
from records_portal.alumni.schemas import AlumniSchema
from records_portal.core.exceptions import DEFAULT_ERROR_MESSAGE
from records_portal.core.exceptions import APIException
from records_portal.core.exceptions import NotFoundError
from records_portal.core.exceptions import SessionExpiredError
from records_portal.core.exceptions import UpstreamError
from records_portal.gateway.client import RecordsClient
from records_portal.projects.schemas import ProjectSchema
from records_portal.students.schemas import StudentSchema
from records_portal.users.session import get_token

logger = logging.getLogger(__name__)

STUDENTS = "students"
ALUMNI = "alumni"
PROJECTS = "projects"
ADVISORS = "advisors"

COLLECTIONS = (STUDENTS, ALUMNI, PROJECTS, ADVISORS)


class RecordsStore:
    """
    Collections and mutations for one portal session.

    Args:
        session: The Django session holding the backend token
        client: Records backend client, built from the session token if omitted
    """

    def __init__(self, session, client: RecordsClient | None = None):
        self.session = session
        self.client = client or RecordsClient(token=get_token(session))

    @classmethod
    def for_request(cls, request) -> "RecordsStore":
        return cls(request.session)

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def _cache_key(self, name: str) -> str:
        if self.session.session_key is None:
            self.session.save()
        return f"records:{self.session.session_key}:{name}"

    def _fetch(self, name: str) -> list[dict[str, Any]]:
        """Fetch a collection and cache its rows. Failures give an empty list."""
        try:
            rows = self.client.fetch_collection(getattr(self.client, name))
        except SessionExpiredError:
            raise
        except APIException as exc:
            logger.warning("Could not fetch %s: %s", name, exc.message)
            return []
        cache.set(self._cache_key(name), rows, settings.RECORDS_CACHE_TIMEOUT)
        return rows

    def _rows(self, name: str) -> list[dict[str, Any]]:
        rows = cache.get(self._cache_key(name))
        if rows is None:
            rows = self._fetch(name)
        return rows

    def students(self) -> list[StudentSchema]:
        return [StudentSchema.from_row(row) for row in self._rows(STUDENTS)]

    def alumni(self) -> list[AlumniSchema]:
        return [AlumniSchema.from_row(row) for row in self._rows(ALUMNI)]

    def projects(self) -> list[ProjectSchema]:
        return [ProjectSchema.from_row(row) for row in self._rows(PROJECTS)]

    def advisors(self) -> list[AdvisorSchema]:
        return [AdvisorSchema.from_row(row) for row in self._rows(ADVISORS)]

    def refresh(self, *names: str) -> None:
        for name in names:
            self._fetch(name)

    def refresh_all(self) -> None:
        self.refresh(*COLLECTIONS)

    def clear(self) -> None:
        """Drop every cached collection of this session."""
        if self.session.session_key is None:
            return
        cache.delete_many([self._cache_key(name) for name in COLLECTIONS])

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @staticmethod
    def _find(records: list, record_id: str, message: str):
        for record in records:
            if record.id == str(record_id):
                return record
        raise NotFoundError(message)

    def student(self, record_id: str) -> StudentSchema:
        return self._find(self.students(), record_id, "ไม่พบข้อมูลนักศึกษา")

    def alumnus(self, record_id: str) -> AlumniSchema:
        return self._find(self.alumni(), record_id, "ไม่พบข้อมูลศิษย์เก่า")

    def project(self, record_id: str) -> ProjectSchema:
        return self._find(self.projects(), record_id, "ไม่พบโครงงาน")

    def advisor(self, record_id: str) -> AdvisorSchema:
        return self._find(self.advisors(), record_id, "ไม่พบข้อมูลอาจารย์ที่ปรึกษา")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _mutate(
        self,
        call: Callable[[], Any],
        success: str,
        failure: str,
        refresh: tuple[str, ...],
    ) -> str:
        """
        Run a backend mutation and refetch ``refresh``.

        Returns the success toast. An upstream error without a specific
        message is reported with the ``failure`` toast instead.
        """
        try:
            call()
        except UpstreamError as exc:
            if exc.message == DEFAULT_ERROR_MESSAGE:
                exc.message = failure
            logger.info("Mutation failed: %s", exc.message)
            raise
        self.refresh(*refresh)
        return success

    # Students

    def add_student(self, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.students.create(data),
            "เพิ่มนักศึกษาสำเร็จ",
            "ไม่สามารถเพิ่มนักศึกษาได้",
            (STUDENTS,),
        )

    def update_student(self, record_id: str, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.students.update(record_id, data),
            "แก้ไขข้อมูลนักศึกษาสำเร็จ",
            "ไม่สามารถแก้ไขข้อมูลนักศึกษาได้",
            (STUDENTS,),
        )

    def delete_student(self, record_id: str) -> str:
        return self._mutate(
            lambda: self.client.students.delete(record_id),
            "ลบนักศึกษาสำเร็จ",
            "ไม่สามารถลบนักศึกษาได้",
            (STUDENTS,),
        )

    def graduate_students(self, student_ids: list[str]) -> str:
        # Graduating moves the students into the alumni collection
        return self._mutate(
            lambda: self.client.students.graduate(student_ids),
            "สำเร็จการศึกษาเรียบร้อย",
            "ไม่สามารถดำเนินการได้",
            (STUDENTS, ALUMNI),
        )

    def update_student_status(self, student_ids: list[str], status: str) -> str:
        return self._mutate(
            lambda: self.client.students.batch_update_status(student_ids, status),
            "อัปเดตสถานะสำเร็จ",
            "ไม่สามารถอัปเดตสถานะได้",
            (STUDENTS,),
        )

    def import_students(self, filename: str, content: bytes, content_type: str | None = None) -> dict[str, Any]:
        """Forward a spreadsheet to the backend and return its summary."""
        payload = self.client.imports.import_students(filename, content, content_type)
        self.refresh(STUDENTS)
        data = payload.get("data")
        return data if isinstance(data, dict) else {}

    # Alumni

    def add_alumni(self, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.alumni.create(data),
            "เพิ่มศิษย์เก่าสำเร็จ",
            "ไม่สามารถเพิ่มศิษย์เก่าได้",
            (ALUMNI,),
        )

    def update_alumni(self, record_id: str, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.alumni.update(record_id, data),
            "แก้ไขข้อมูลศิษย์เก่าสำเร็จ",
            "ไม่สามารถแก้ไขข้อมูลศิษย์เก่าได้",
            (ALUMNI,),
        )

    def delete_alumni(self, record_id: str) -> str:
        return self._mutate(
            lambda: self.client.alumni.delete(record_id),
            "ลบศิษย์เก่าสำเร็จ",
            "ไม่สามารถลบศิษย์เก่าได้",
            (ALUMNI,),
        )

    # Projects

    def add_project(self, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.projects.create(data),
            "เพิ่มโครงงานสำเร็จ",
            "ไม่สามารถเพิ่มโครงงานได้",
            (PROJECTS,),
        )

    def update_project(self, record_id: str, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.projects.update(record_id, data),
            "แก้ไขโครงงานสำเร็จ",
            "ไม่สามารถแก้ไขโครงงานได้",
            (PROJECTS,),
        )

    def delete_project(self, record_id: str) -> str:
        return self._mutate(
            lambda: self.client.projects.delete(record_id),
            "ลบโครงงานสำเร็จ",
            "ไม่สามารถลบโครงงานได้",
            (PROJECTS,),
        )

    def add_project_comment(self, project_id: str, author_name: str, author_role: str, message: str) -> str:
        return self._mutate(
            lambda: self.client.projects.add_comment(project_id, author_name, author_role, message),
            "เพิ่มความคิดเห็นสำเร็จ",
            "ไม่สามารถเพิ่มความคิดเห็นได้",
            (PROJECTS,),
        )

    # Advisors

    def add_advisor(self, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.advisors.create(data),
            "เพิ่มอาจารย์ที่ปรึกษาสำเร็จ",
            "ไม่สามารถเพิ่มอาจารย์ที่ปรึกษาได้",
            (ADVISORS,),
        )

    def update_advisor(self, record_id: str, data: dict[str, Any]) -> str:
        return self._mutate(
            lambda: self.client.advisors.update(record_id, data),
            "แก้ไขข้อมูลอาจารย์ที่ปรึกษาสำเร็จ",
            "ไม่สามารถแก้ไขข้อมูลอาจารย์ที่ปรึกษาได้",
            (ADVISORS,),
        )

    def delete_advisor(self, record_id: str) -> str:
        return self._mutate(
            lambda: self.client.advisors.delete(record_id),
            "ลบอาจารย์ที่ปรึกษาสำเร็จ",
            "ไม่สามารถลบอาจารย์ที่ปรึกษาได้",
            (ADVISORS,),
        )
