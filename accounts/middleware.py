# accounts/middleware.py
from accounts.sessions import default_manager


class IdentityMiddleware:
    """Sets request.identity from the session (None for anonymous requests)."""

    def __init__(self, get_response):
        self.get_response = get_response
        self.sessions = default_manager()

    def __call__(self, request):
        request.identity = self.sessions.restore(request.session)
        return self.get_response(request)
