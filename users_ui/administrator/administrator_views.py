# users_ui/administrator/administrator_views.py
from django.contrib import messages
from django.shortcuts import redirect
from django.views.decorators.http import require_GET, require_POST

from accounts.decorators import role_view
from core import queries
from core.assignments import assign, complaint_rows
from core.core_models import User
from core.exceptions import ValidationError

ADMIN_ROLES = (User.ROLE_ADMIN,)


def _dashboard_context():
    engineers = list(queries.get_engineers())
    return {
        "rows": complaint_rows(queries.get_complaints()),
        "engineers": engineers,
        "complaint_count": queries.count_complaints(),
        "engineer_count": len(engineers),
    }


@require_GET
@role_view("administrator/admin.html", roles=ADMIN_ROLES)
def dashboard(request):
    """All complaints (newest first) and the engineers they can go to."""
    return _dashboard_context()


@require_POST
@role_view("administrator/admin.html", roles=ADMIN_ROLES)
def assign_complaint(request):
    complaint_id = request.POST.get("complaintID")
    engineer_name = request.POST.get("engineerName")
    try:
        assign(complaint_id, engineer_name)
    except ValidationError as e:
        context = _dashboard_context()
        context.update({
            "errors": e.as_list(),
            "form_data": {"complaintID": complaint_id or "", "engineerName": engineer_name or ""},
        })
        return context

    messages.success(request, "Complaint assigned successfully")
    return redirect("administrator:dashboard")
