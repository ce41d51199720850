"""
Student spreadsheet import: upload checks, preview and the template file.
"""

import logging
from pathlib import PurePath

from django.conf import settings

from records_portal.core.exceptions import BadRequestError
from records_portal.core.exceptions import FileTooLargeError
from records_portal.core.exceptions import InvalidFileTypeError
from records_portal.core.spreadsheets import parse_csv_preview
from records_portal.core.spreadsheets import render_csv
from records_portal.students.schemas import ImportPreviewSchema
from records_portal.students.schemas import ImportResultSchema

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".csv", ".xls", ".xlsx")

TEMPLATE_FILENAME = "template_students.csv"
TEMPLATE_HEADERS = [
    "รหัสนักศึกษา",
    "ชื่อ",
    "นามสกุล",
    "คณะ",
    "สาขา",
    "ชั้นปี",
    "อีเมล",
    "เบอร์โทร",
    "สถานะ",
    "รหัสผ่าน",
]
TEMPLATE_SAMPLE_ROW = [
    "66100001",
    "สมชาย",
    "ใจดี",
    "คณะวิทยาศาสตร์",
    "สาขาวิทยาการคอมพิวเตอร์",
    "1",
    "somchai@sskru.ac.th",
    "0812345678",
    "Active",
    "123456",
]


def template_csv() -> str:
    return render_csv(TEMPLATE_HEADERS, [TEMPLATE_SAMPLE_ROW])


def check_upload(filename: str | None, size: int | None) -> None:
    """
    Accept only spreadsheets within the upload limit.

    Raises:
        BadRequestError: No file was sent
        InvalidFileTypeError: Not a .csv, .xls or .xlsx file
        FileTooLargeError: Larger than IMPORT_MAX_UPLOAD_SIZE
    """
    if not filename:
        raise BadRequestError("กรุณาเลือกไฟล์")
    if PurePath(filename).suffix.lower() not in ALLOWED_EXTENSIONS:
        raise InvalidFileTypeError()
    if size is not None and size > settings.IMPORT_MAX_UPLOAD_SIZE:
        raise FileTooLargeError("ขนาดไฟล์ต้องไม่เกิน 10MB")


def build_preview(filename: str, content: bytes) -> ImportPreviewSchema:
    """
    Parse an uploaded CSV for the preview table.

    Excel workbooks are not parsed here and give an empty preview; the
    backend reads them on import.
    """
    headers: list[str] = []
    rows: list[dict[str, str]] = []
    if filename.lower().endswith(".csv"):
        headers, rows = parse_csv_preview(content.decode("utf-8", errors="replace"))
    return ImportPreviewSchema(filename=filename, size=len(content), headers=headers, rows=rows)


def summarize(data: dict) -> ImportResultSchema:
    """Build the import result with its success and warning toasts."""
    result = ImportResultSchema.from_payload(data)
    if result.imported > 0:
        result.messages.append(f"นำเข้าข้อมูลสำเร็จ {result.imported} รายการ")
    if result.skipped > 0:
        result.warnings.append(f"ข้ามข้อมูล {result.skipped} รายการ (ซ้ำหรือมีข้อผิดพลาด)")
    logger.info("Student import: %s imported, %s skipped", result.imported, result.skipped)
    return result
