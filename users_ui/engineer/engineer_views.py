# users_ui/engineer/engineer_views.py
from django.views.decorators.http import require_GET

from accounts.decorators import role_view
from core import queries
from core.core_models import User


@require_GET
@role_view("engineer/junior.html", roles=(User.ROLE_ENGINEER,))
def dashboard(request):
    """Complaints mapped to the logged-in engineer, newest assignment first."""
    mappings = queries.get_mappings_by_engineer(request.identity.username)
    return {"assignments": mappings}
