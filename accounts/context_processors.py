# accounts/context_processors.py
from django.urls import reverse


def current_identity(request):
    """Expose the restored identity to every template."""
    return {"identity": getattr(request, "identity", None)}


def navigation_menu(request):
    """Menu items for the logged-in identity, with the active entry marked."""
    identity = getattr(request, "identity", None)
    if identity is None:
        return {"menu_items": [], "active_menu": None}

    menu_items = [
        {
            'name': 'Dashboard',
            'url': reverse('complainant:dashboard'),
            'key': 'dashboard',
        },
        {
            'name': 'New Complaint',
            'url': reverse('complainant:complaint'),
            'key': 'complaint',
        },
    ]
    if identity.is_admin:
        menu_items.append({
            'name': 'Admin',
            'url': reverse('administrator:dashboard'),
            'key': 'admin',
        })
    if identity.is_engineer:
        menu_items.append({
            'name': 'My Assignments',
            'url': reverse('engineer:dashboard'),
            'key': 'jeng',
        })

    current_path = request.path.rstrip('/')
    active_key = 'dashboard'

    path_prefixes = [
        ('/complaint', 'complaint'),
        ('/registerComplaint', 'complaint'),
        ('/admin', 'admin'),
        ('/assign', 'admin'),
        ('/jeng', 'jeng'),
    ]

    for path, key in path_prefixes:
        if current_path.startswith(path):
            active_key = key
            break

    return {"menu_items": menu_items, "active_menu": active_key}
