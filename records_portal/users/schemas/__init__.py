"""
User schemas.
"""

from records_portal.core.schemas import MessageSchema
from records_portal.users.schemas.auth import CSRFTokenSchema
from records_portal.users.schemas.auth import LoginResponseSchema
from records_portal.users.schemas.auth import LoginSchema
from records_portal.users.schemas.auth import NavigationSchema
from records_portal.users.schemas.auth import NavItemSchema
from records_portal.users.schemas.auth import PasswordChangeSchema
from records_portal.users.schemas.auth import UserSchema

__all__ = [
    "CSRFTokenSchema",
    "LoginResponseSchema",
    "LoginSchema",
    "MessageSchema",
    "NavigationSchema",
    "NavItemSchema",
    "PasswordChangeSchema",
    "UserSchema",
]
