# core/queries.py
from core import core_models
from utils.validators import normalize_string


# -------------------------
# Users
# -------------------------
def get_user_by_username(username):
    username = normalize_string(username)
    if not username:
        return None
    return core_models.User.objects.filter(username=username).first()


def get_user_by_id(user_id):
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None
    return core_models.User.objects.filter(id=user_id).first()


def username_exists(username) -> bool:
    return core_models.User.objects.filter(username=normalize_string(username)).exists()


def email_exists(email) -> bool:
    return core_models.User.objects.filter(email=normalize_string(email)).exists()


def add_user(name, email, username, password, role=core_models.User.ROLE_USER):
    """
    Insert a user. The password is staged on the instance and hashed by
    User.save() before the row is written.
    """
    user = core_models.User(
        name=name.strip(),
        email=normalize_string(email),
        username=normalize_string(username),
        role=role,
    )
    user.set_password(password)
    user.save()
    return user


def get_engineers():
    return core_models.User.objects.filter(role=core_models.User.ROLE_ENGINEER).order_by("username")


def get_engineer_by_name(engineer_name):
    return (
        core_models.User.objects
        .filter(username=normalize_string(engineer_name), role=core_models.User.ROLE_ENGINEER)
        .first()
    )


# -------------------------
# Complaints
# -------------------------
def add_complaint(submitter, contact, desc):
    return core_models.Complaint.objects.create(
        submitted_by=submitter,
        name=submitter.name,
        email=submitter.email,
        contact=contact.strip(),
        desc=desc.strip(),
    )


def get_complaints():
    """All complaints, newest first, with their mappings preloaded."""
    return (
        core_models.Complaint.objects
        .select_related("submitted_by")
        .prefetch_related("mappings")
        .order_by("-created_at", "-id")
    )


def get_complaints_by_submitter(user_id):
    return get_complaints().filter(submitted_by_id=user_id)


def get_complaint_by_id(complaint_id):
    try:
        complaint_id = int(str(complaint_id).strip())
    except (TypeError, ValueError):
        return None
    return core_models.Complaint.objects.filter(id=complaint_id).first()


def count_complaints() -> int:
    return core_models.Complaint.objects.count()


# -------------------------
# Complaint mappings
# -------------------------
def add_mapping(complaint, engineer_name):
    return core_models.ComplaintMapping.objects.create(complaint=complaint, engineer_name=engineer_name)


def get_mappings_by_engineer(engineer_name):
    """Mappings for one engineer, newest first, with the complaint loaded."""
    return (
        core_models.ComplaintMapping.objects
        .filter(engineer_name=normalize_string(engineer_name))
        .select_related("complaint", "complaint__submitted_by")
        .order_by("-created_at", "-id")
    )
