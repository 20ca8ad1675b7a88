# users_ui/engineer/engineer_urls.py
from django.urls import path
from . import engineer_views

app_name = "engineer"

urlpatterns = [
    path("jeng", engineer_views.dashboard, name="dashboard"),
]
