from records_portal.users.api.auth import AuthController

__all__ = ["AuthController"]
