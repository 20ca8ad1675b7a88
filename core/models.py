# core/models.py
# Django loads models from here; the definitions live in core_models.
from core.core_models import User, Complaint, ComplaintMapping  # noqa: F401
