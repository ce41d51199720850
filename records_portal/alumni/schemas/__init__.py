"""
Alumni schemas for API requests and responses.
"""

from records_portal.alumni.schemas.alumni import EMPLOYMENT_STATUS_LABELS
from records_portal.alumni.schemas.alumni import AlumniFormSchema
from records_portal.alumni.schemas.alumni import AlumniListSchema
from records_portal.alumni.schemas.alumni import AlumniSchema
from records_portal.alumni.schemas.alumni import CustomFieldSchema
from records_portal.alumni.schemas.alumni import EducationEntrySchema
from records_portal.alumni.schemas.alumni import ExperienceEntrySchema

__all__ = [
    "EMPLOYMENT_STATUS_LABELS",
    "AlumniSchema",
    "AlumniListSchema",
    "AlumniFormSchema",
    "EducationEntrySchema",
    "ExperienceEntrySchema",
    "CustomFieldSchema",
]
