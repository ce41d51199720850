from records_portal.users.session import get_session_user


class PortalUserMiddleware:
    """
    Attach the session user to ``request.user``.

    Replaces django.contrib.auth: identities belong to the records backend,
    the portal only remembers who logged in through it.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.user = get_session_user(request.session)
        return self.get_response(request)
