"""
Student schemas for API requests and responses.
"""

from records_portal.students.schemas.students import STUDENT_STATUS_LABELS
from records_portal.students.schemas.students import STUDENT_STATUSES
from records_portal.students.schemas.students import ImportPreviewSchema
from records_portal.students.schemas.students import ImportResultSchema
from records_portal.students.schemas.students import StudentDetailSchema
from records_portal.students.schemas.students import StudentFormSchema
from records_portal.students.schemas.students import StudentListSchema
from records_portal.students.schemas.students import StudentSchema
from records_portal.students.schemas.students import StudentSelectionSchema
from records_portal.students.schemas.students import StudentStatusChangeSchema

__all__ = [
    "STUDENT_STATUSES",
    "STUDENT_STATUS_LABELS",
    "StudentSchema",
    "StudentDetailSchema",
    "StudentListSchema",
    "StudentFormSchema",
    "StudentSelectionSchema",
    "StudentStatusChangeSchema",
    "ImportResultSchema",
    "ImportPreviewSchema",
]
