"""
Main API configuration for Django Ninja Extra.
All API controllers are automatically registered here.
"""

import importlib
import inspect
import logging

from ninja.errors import ValidationError as RequestValidationError
from ninja_extra import NinjaExtraAPI
from ninja_extra import exceptions as extra_exceptions

from records_portal.core.api.base import BaseAPI
from records_portal.core.exceptions import APIException
from records_portal.core.exceptions import ErrorSchema
from records_portal.core.exceptions import NotAuthenticatedError
from records_portal.core.exceptions import PermissionDeniedError
from records_portal.core.exceptions import SessionExpiredError
from records_portal.core.exceptions import ValidationError
from records_portal.gateway.store import RecordsStore
from records_portal.users.session import end_session

logger = logging.getLogger(__name__)

api = NinjaExtraAPI(
    title="Academic Records Portal API",
    version="1.0.0",
    description="Backend-for-frontend of the student, alumni and capstone project records portal",
    docs_url="/docs",
    openapi_url="/openapi.json",
)


def error_response(request, status: int, error: ErrorSchema):
    return api.create_response(request, error.model_dump(), status=status)


@api.exception_handler(APIException)
def handle_api_exception(request, exc: APIException):
    status, error = exc.to_response()
    return error_response(request, status, error)


@api.exception_handler(SessionExpiredError)
def handle_session_expired(request, exc: SessionExpiredError):
    """The backend token is no longer valid: log the user out."""
    logger.info("Records backend session expired, logging out")
    RecordsStore.for_request(request).clear()
    end_session(request.session)
    request.session.flush()
    status, error = exc.to_response()
    return error_response(request, status, error)


@api.exception_handler(RequestValidationError)
def handle_validation_error(request, exc: RequestValidationError):
    """Report form errors per field, with the messages of the field validators."""
    fields: dict[str, str] = {}
    for item in exc.errors:
        loc = item.get("loc") or ()
        field = str(loc[-1]) if loc else "__all__"
        message = str(item.get("msg", "")).removeprefix("Value error, ")
        fields.setdefault(field, message)
    status, error = ValidationError(details={"fields": fields}).to_response()
    return error_response(request, status, error)


@api.exception_handler(extra_exceptions.APIException)
def handle_permission_denied(request, exc: extra_exceptions.APIException):
    """Permission classes deny with 401 for anonymous users, 403 otherwise."""
    user = getattr(request, "user", None)
    if isinstance(exc, (extra_exceptions.PermissionDenied, extra_exceptions.NotAuthenticated)):
        if user is None or not user.is_authenticated:
            status, error = NotAuthenticatedError().to_response()
        else:
            status, error = PermissionDeniedError(str(exc.detail)).to_response()
        return error_response(request, status, error)
    return error_response(
        request,
        exc.status_code,
        ErrorSchema(code=exc.default_code.upper(), message=str(exc.detail)),
    )


def register_controllers_from_module(api_instance: NinjaExtraAPI, module_path: str) -> None:
    """
    Dynamically import and register API controllers from a module.

    Controllers must inherit from BaseAPI to be registered.
    """
    try:
        module = importlib.import_module(module_path)
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if (
                inspect.isclass(attr)
                and issubclass(attr, BaseAPI)
                and attr is not BaseAPI
            ):
                logger.debug("Registering controller: %s.%s", module_path, attr_name)
                api_instance.register_controllers(attr)
    except ModuleNotFoundError:
        logger.debug("Module %s not found, skipping", module_path)
    except Exception:
        logger.exception("Error registering controllers from %s", module_path)


# Register controllers from each local app
LOCAL_APPS = [
    "records_portal.core",
    "records_portal.users",
    "records_portal.students",
    "records_portal.alumni",
    "records_portal.advisors",
    "records_portal.projects",
    "records_portal.dashboard",
]

for app in LOCAL_APPS:
    register_controllers_from_module(api, f"{app}.api")
