"""
Field rules shared by the record forms.

Each check raises ValueError with the Thai message displayed under the field,
so they can be called from pydantic field validators directly.
"""

import re

STUDENT_ID_PATTERN = re.compile(r"^[0-9]{8}$")
PERSON_NAME_PATTERN = re.compile(r"^[ก-๙a-zA-Z\s]+$")
UNIVERSITY_EMAIL_PATTERN = re.compile(r"^[^\s@]+@university\.ac\.th$")
PHONE_PATTERN = re.compile(r"^0[0-9]{9}$")

MIN_STUDENT_YEAR = 1
MAX_STUDENT_YEAR = 5
MIN_GRADUATION_YEAR = 1990

# Faculty -> departments offered in the select inputs
FACULTIES: dict[str, list[str]] = {
    "คณะวิทยาศาสตร์": ["เคมี", "ฟิสิกส์", "คณิตศาสตร์", "ชีววิทยา"],
    "คณะวิศวกรรมศาสตร์": [
        "วิศวกรรมไฟฟ้า",
        "วิศวกรรมเครื่องกล",
        "วิศวกรรมโยธา",
        "วิศวกรรมคอมพิวเตอร์",
    ],
    "คณะเทคโนโลยีสารสนเทศ": [
        "วิทยาการคอมพิวเตอร์",
        "เทคโนโลยีสารสนเทศ",
        "วิศวกรรมซอฟต์แวร์",
    ],
    "คณะบริหารธุรกิจ": ["การจัดการ", "การตลาด", "การเงิน", "การบัญชี"],
}


def check_student_id(value: str) -> str:
    if not STUDENT_ID_PATTERN.fullmatch(value):
        raise ValueError("รหัสนักศึกษาต้องเป็นตัวเลข 8 หลัก")
    return value


def check_first_name(value: str) -> str:
    if not PERSON_NAME_PATTERN.fullmatch(value):
        raise ValueError("ชื่อต้องเป็นตัวอักษรเท่านั้น")
    return value


def check_last_name(value: str) -> str:
    if not PERSON_NAME_PATTERN.fullmatch(value):
        raise ValueError("นามสกุลต้องเป็นตัวอักษรเท่านั้น")
    return value


def check_university_email(value: str) -> str:
    if not UNIVERSITY_EMAIL_PATTERN.fullmatch(value):
        raise ValueError("อีเมลต้องเป็นของมหาวิทยาลัย (@university.ac.th)")
    return value


def check_phone(value: str) -> str:
    if not PHONE_PATTERN.fullmatch(value):
        raise ValueError("เบอร์โทรต้องเป็นตัวเลข 10 หลักและขึ้นต้นด้วย 0")
    return value


def check_required(value: str, message: str) -> str:
    """Reject empty values with the given message."""
    if not value:
        raise ValueError(message)
    return value
