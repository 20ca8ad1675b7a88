# complaint_tracker/asgi.py
import os
from django.conf import settings
from django.core.asgi import get_asgi_application

# Set default settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'complaint_tracker.settings')

# Get ASGI application
application = get_asgi_application()

# Refuse to serve without a database
from core.db_utils import ensure_store_available  # noqa: E402
ensure_store_available(retries=settings.DB_CONNECT_RETRIES, delay=settings.DB_CONNECT_RETRY_DELAY)
