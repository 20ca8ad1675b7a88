# complaint_tracker/main_urls.py
import logging

from django.shortcuts import render
from django.urls import path, include

logger = logging.getLogger(__name__)


# --- Generic error page ---
def server_error(request):
    # The traceback is already logged by django.request
    logger.error("Unhandled error on %s %s", request.method, request.path)
    return render(request, "error.html", {"error": "Something went wrong!"}, status=500)


handler500 = server_error

# --- URL patterns ---
urlpatterns = [
    # Authentication routes: /login, /register, /logout
    path("", include("accounts.auth_urls")),

    # Areas
    path("", include("users_ui.complainant.complainant_urls")),
    path("", include("users_ui.administrator.administrator_urls")),
    path("", include("users_ui.engineer.engineer_urls")),
]
