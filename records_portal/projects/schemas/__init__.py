"""
Capstone project schemas.
"""

from records_portal.projects.schemas.projects import PROJECT_TYPE_LABELS
from records_portal.projects.schemas.projects import CommentCreateSchema
from records_portal.projects.schemas.projects import ProjectCommentSchema
from records_portal.projects.schemas.projects import ProjectFormSchema
from records_portal.projects.schemas.projects import ProjectListSchema
from records_portal.projects.schemas.projects import ProjectSchema

__all__ = [
    "PROJECT_TYPE_LABELS",
    "ProjectSchema",
    "ProjectCommentSchema",
    "ProjectListSchema",
    "ProjectFormSchema",
    "CommentCreateSchema",
]
