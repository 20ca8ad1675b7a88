# users_ui/complainant/complainant_views.py
from django.contrib import messages
from django.shortcuts import redirect
from django.views.decorators.http import require_GET, require_POST

from accounts.decorators import role_view
from core import queries
from core.assignments import complaint_rows
from .complainant_forms import ComplaintForm


@require_GET
@role_view("complainant/index.html")
def dashboard(request):
    complaints = queries.get_complaints_by_submitter(request.identity.id)
    return {"rows": complaint_rows(complaints)}


@require_GET
@role_view("complainant/complaint.html")
def complaint_form(request):
    return {"form": ComplaintForm()}


@require_POST
@role_view("complainant/complaint.html")
def register_complaint(request):
    """Store a complaint submitted by the logged-in identity."""
    form = ComplaintForm(request.POST)
    if not form.is_valid():
        return {"form": form}

    submitter = queries.get_user_by_id(request.identity.id)
    queries.add_complaint(submitter, form.cleaned_data["contact"], form.cleaned_data["desc"])
    messages.success(request, "Complaint registered successfully")
    return redirect("complainant:dashboard")
