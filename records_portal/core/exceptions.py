"""
Custom exceptions for the academic records portal API.
Every failure reaches the browser as an ErrorSchema body shown in a toast.
"""

from ninja import Schema

DEFAULT_ERROR_MESSAGE = "เกิดข้อผิดพลาด"


class ErrorSchema(Schema):
    """Standard error response schema."""

    code: str
    message: str
    details: dict | None = None
    redirect: str | None = None


class APIException(Exception):
    """Base exception for API errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = DEFAULT_ERROR_MESSAGE
    redirect: str | None = None

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message or self.__class__.message
        self.code = code or self.__class__.code
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> tuple[int, ErrorSchema]:
        """Convert exception to API response tuple."""
        return self.status_code, ErrorSchema(
            code=self.code,
            message=self.message,
            details=self.details,
            redirect=self.redirect,
        )


# Authentication Exceptions
class NotAuthenticatedError(APIException):
    """User is not logged in."""

    status_code = 401
    code = "NOT_AUTHENTICATED"
    message = "กรุณาเข้าสู่ระบบ"
    redirect = "/login"


class InvalidCredentialsError(APIException):
    """Invalid login credentials."""

    status_code = 401
    code = "INVALID_CREDENTIALS"
    message = "ชื่อผู้ใช้หรือรหัสผ่านไม่ถูกต้อง"


class SessionExpiredError(APIException):
    """The records backend rejected the stored token."""

    status_code = 401
    code = "SESSION_EXPIRED"
    message = "เซสชันหมดอายุ กรุณาเข้าสู่ระบบใหม่"
    redirect = "/login"


# Authorization Exceptions
class PermissionDeniedError(APIException):
    """User doesn't have the required role."""

    status_code = 403
    code = "PERMISSION_DENIED"
    message = "คุณไม่มีสิทธิ์ดำเนินการนี้"


class NotOwnerError(APIException):
    """User is not the owner of the record."""

    status_code = 403
    code = "NOT_OWNER"
    message = "คุณแก้ไขได้เฉพาะข้อมูลของตนเองเท่านั้น"


# Resource Exceptions
class NotFoundError(APIException):
    """Record not found."""

    status_code = 404
    code = "NOT_FOUND"
    message = "ไม่พบข้อมูล"


# Validation Exceptions
class ValidationError(APIException):
    """Invalid form data."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message = "กรุณาตรวจสอบข้อมูลให้ถูกต้อง"


class BadRequestError(APIException):
    """Bad request."""

    status_code = 400
    code = "BAD_REQUEST"
    message = "คำขอไม่ถูกต้อง"


# File Exceptions
class FileTooLargeError(APIException):
    """File exceeds size limit."""

    status_code = 413
    code = "FILE_TOO_LARGE"
    message = "ไฟล์มีขนาดเกินกำหนด"


class InvalidFileTypeError(APIException):
    """File type not allowed."""

    status_code = 415
    code = "INVALID_FILE_TYPE"
    message = "รองรับเฉพาะไฟล์ .csv, .xls, .xlsx"


class RenderError(APIException):
    """A generated image could not be produced."""

    status_code = 500
    code = "RENDER_ERROR"
    message = "เกิดข้อผิดพลาดในการสร้างรูปภาพ"


# Records backend Exceptions
class UpstreamError(APIException):
    """The records backend answered with an error status."""

    code = "UPSTREAM_ERROR"

    def __init__(
        self,
        message: str | None = None,
        status_code: int = 502,
        details: dict | None = None,
    ):
        super().__init__(message=message, details=details)
        # Client errors are relayed as-is, anything else is a bad gateway
        self.status_code = status_code if 400 <= status_code < 500 else 502


class BackendUnavailableError(APIException):
    """The records backend could not be reached."""

    status_code = 503
    code = "BACKEND_UNAVAILABLE"
    message = "ไม่สามารถเชื่อมต่อระบบฐานข้อมูลได้"
