# accounts/views.py
from django.contrib import messages
from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods, require_POST

from core.exceptions import DuplicateKey, InvalidCredentials, ValidationError
from .auth import authenticate, register_user
from .decorators import redirect_role, role_view
from .forms import LoginForm, RegisterForm
from .sessions import default_manager

# -------------------------------------------------------------------
# Login view
# -------------------------------------------------------------------
@require_http_methods(["GET", "POST"])
def login_view(request):
    """
    GET renders the login form. POST checks the credentials, binds the
    identity to a fresh session and redirects by role.
    """
    if request.method == "GET":
        return render(request, "accounts/login.html", {"form": LoginForm()})

    form = LoginForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Please enter username and password")
        return redirect("accounts:login")

    try:
        identity = authenticate(form.cleaned_data["username"], form.cleaned_data["password"])
    except InvalidCredentials as e:
        messages.error(request, e.message)
        return redirect("accounts:login")

    default_manager().bind(request.session, identity)
    return redirect_role(identity.role)


# -------------------------------------------------------------------
# Registration view
# -------------------------------------------------------------------
@require_http_methods(["GET", "POST"])
def register_view(request):
    if request.method == "GET":
        return render(request, "accounts/register.html", {"form": RegisterForm()})

    try:
        register_user(request.POST)
    except ValidationError as e:
        return render(request, "accounts/register.html", {"form": e.form})
    except DuplicateKey as e:
        messages.error(request, e.message)
        return redirect("accounts:register")

    messages.success(request, "Registration successful! Please login")
    return redirect("accounts:login")


# -------------------------------------------------------------------
# Logout view
# -------------------------------------------------------------------
@require_POST
@role_view()
def logout_view(request):
    """Logout the current user and clear session."""
    default_manager().invalidate(request.session)
    messages.success(request, "Logged out successfully")
    return redirect("accounts:login")
