from records_portal.core.api.base import BaseAPI
from records_portal.core.api.options import OptionsController
from records_portal.core.api.permissions import AllowAny
from records_portal.core.api.permissions import CanComment
from records_portal.core.api.permissions import CanViewAdvisors
from records_portal.core.api.permissions import IsAdmin
from records_portal.core.api.permissions import IsAdminOrStudent
from records_portal.core.api.permissions import IsAdminOrTeacher
from records_portal.core.api.permissions import IsAuthenticated

__all__ = [
    "BaseAPI",
    "AllowAny",
    "CanComment",
    "CanViewAdvisors",
    "IsAdmin",
    "IsAdminOrStudent",
    "IsAdminOrTeacher",
    "IsAuthenticated",
    "OptionsController",
]
