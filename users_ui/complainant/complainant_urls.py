# users_ui/complainant/complainant_urls.py
from django.urls import path
from . import complainant_views

app_name = "complainant"

urlpatterns = [
    path("", complainant_views.dashboard, name="dashboard"),
    path("complaint", complainant_views.complaint_form, name="complaint"),
    path("registerComplaint", complainant_views.register_complaint, name="register_complaint"),
]
