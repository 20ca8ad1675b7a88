# users_ui/administrator/administrator_urls.py
from django.urls import path
from . import administrator_views

app_name = "administrator"

urlpatterns = [
    path("admin", administrator_views.dashboard, name="dashboard"),
    path("assign", administrator_views.assign_complaint, name="assign"),
]
