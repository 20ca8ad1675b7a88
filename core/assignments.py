# core/assignments.py
"""
Complaint assignment workflow.

A complaint has no stored status. It is "Submitted" while no mapping points
at it and "Assigned" once an admin has mapped it to at least one engineer.
There is no way back to Submitted and no resolved state.
"""
import logging

from core import queries
from core.exceptions import ValidationError
from utils.validators import is_blank, normalize_string

logger = logging.getLogger(__name__)

STATUS_SUBMITTED = "Submitted"
STATUS_ASSIGNED = "Assigned"


def assign(complaint_id, engineer_name):
    """
    Map a complaint to an engineer and return the new ComplaintMapping.

    Raises ValidationError listing every offending field when a value is
    missing, when the complaint does not exist, or when the name does not
    belong to a user with the engineer role. Assigning the same pair twice
    creates two mappings.
    """
    errors = {}
    if is_blank(complaint_id):
        errors["complaintID"] = ["Complaint ID required"]
    if is_blank(engineer_name):
        errors["engineerName"] = ["Engineer required"]
    if errors:
        raise ValidationError(errors)

    complaint_id = str(complaint_id).strip()
    engineer_name = normalize_string(engineer_name)

    complaint = queries.get_complaint_by_id(complaint_id)
    if complaint is None:
        errors["complaintID"] = [f"Complaint {complaint_id} does not exist"]
    engineer = queries.get_engineer_by_name(engineer_name)
    if engineer is None:
        errors["engineerName"] = [f"Engineer {engineer_name} does not exist"]
    if errors:
        raise ValidationError(errors)

    mapping = queries.add_mapping(complaint, engineer.username)
    logger.info("Complaint %s assigned to %s (mapping %s)", complaint.id, engineer.username, mapping.id)
    return mapping


def complaint_status(complaint) -> str:
    # Reads through .all() so a prefetched relation costs no extra query
    return STATUS_ASSIGNED if list(complaint.mappings.all()) else STATUS_SUBMITTED


def complaint_rows(complaints):
    """Listing rows for templates: the complaint, its status and assigned engineers."""
    rows = []
    for complaint in complaints:
        engineers = sorted({m.engineer_name for m in complaint.mappings.all()})
        rows.append({
            "complaint": complaint,
            "status": complaint_status(complaint),
            "engineers": engineers,
        })
    return rows
