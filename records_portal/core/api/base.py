"""
Base API class for auto-discovery of controllers.

Every screen of the portal talks to one controller; controllers inheriting
from BaseAPI are picked up by ``config.api`` without further wiring.
"""


class BaseAPI:
    """
    Marker class for API controllers.

    Example:
        @api_controller("/advisors", tags=["Advisors"])
        class AdvisorController(BaseAPI):
            @http_get("/")
            def list_advisors(self, request):
                ...
    """
