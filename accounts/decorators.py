from functools import wraps
from django.contrib import messages
from django.shortcuts import render, redirect
from django.http import HttpResponse

from core.exceptions import Unauthorized

LOGIN_REQUIRED_MESSAGE = "Please login to access this page"

# Landing page per role; anything else lands on the dashboard
ROLE_LANDING = {
    "admin": "administrator:dashboard",
    "engineer": "engineer:dashboard",
}


def redirect_role(role):
    return redirect(ROLE_LANDING.get(role, "complainant:dashboard"))


def authorize(identity, roles=None):
    """
    Raise Unauthorized unless `identity` is logged in and, when `roles` is
    given, holds one of them.
    """
    if identity is None:
        raise Unauthorized(LOGIN_REQUIRED_MESSAGE)
    if roles and identity.role not in roles:
        raise Unauthorized(identity=identity)
    return identity


def role_view(template_name=None, roles=None):
    """
    Decorator for views behind login:
    - Anonymous requests go to the login page with a flash message
    - Wrong role goes back to the identity's own landing page
    - Views may return an HttpResponse, a context dict, or (template, context)
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            identity = getattr(request, "identity", None)
            try:
                authorize(identity, roles)
            except Unauthorized as e:
                messages.error(request, e.message)
                if e.identity is None:
                    return redirect("accounts:login")
                return redirect_role(e.identity.role)

            # Call the view function
            response = view_func(request, *args, **kwargs)

            # If the response is already an HttpResponse, return it
            if isinstance(response, HttpResponse):
                return response

            # If the response is a tuple of (template, context)
            if isinstance(response, tuple) and len(response) == 2:
                template_override, context = response
                template_to_use = template_override or template_name
            else:
                # Response is just context
                template_to_use = template_name
                context = response if isinstance(response, dict) else {}

            context.setdefault("identity", identity)
            return render(request, template_to_use, context)

        return _wrapped_view
    return decorator
