import pytest

from core import queries
from core.assignments import STATUS_ASSIGNED, STATUS_SUBMITTED, assign, complaint_rows, complaint_status
from core.core_models import Complaint
from core.exceptions import ValidationError

from tests.conftest import count_mappings


def test_assign_creates_mapping(complaint, engineer):
    mapping = assign(str(complaint.id), "bob")

    assert mapping.complaint == complaint
    assert mapping.engineer_name == "bob"
    assert list(queries.get_mappings_by_engineer("bob")) == [mapping]


def test_assign_normalizes_engineer_name(complaint, engineer):
    assert assign(complaint.id, "  BOB ").engineer_name == "bob"


def test_assigning_same_pair_twice_creates_two_records(complaint, engineer):
    """Duplicate assignments are allowed; nothing enforces uniqueness"""
    first = assign(complaint.id, "bob")
    second = assign(complaint.id, "bob")

    assert first.pk != second.pk
    assert count_mappings(complaint_id=complaint.id, engineer_name="bob") == 2


def test_assign_reports_both_missing_fields(db):
    with pytest.raises(ValidationError) as exc:
        assign("", "   ")

    assert exc.value.errors == {
        "complaintID": ["Complaint ID required"],
        "engineerName": ["Engineer required"],
    }


def test_assign_reports_single_missing_field(complaint):
    with pytest.raises(ValidationError) as exc:
        assign(complaint.id, None)
    assert list(exc.value.errors) == ["engineerName"]


@pytest.mark.parametrize("complaint_id", ["9999", "abc"])
def test_assign_rejects_unknown_complaint(engineer, complaint_id):
    with pytest.raises(ValidationError) as exc:
        assign(complaint_id, "bob")

    assert exc.value.errors == {"complaintID": [f"Complaint {complaint_id} does not exist"]}
    assert count_mappings() == 0


def test_assign_rejects_non_engineer(complaint, complainant, admin_user):
    for name in ("alice", "carol", "nobody"):
        with pytest.raises(ValidationError) as exc:
            assign(complaint.id, name)
        assert exc.value.errors == {"engineerName": [f"Engineer {name} does not exist"]}
    assert count_mappings() == 0


def test_status_moves_from_submitted_to_assigned(complaint, engineer):
    assert complaint_status(complaint) == STATUS_SUBMITTED

    assign(complaint.id, "bob")

    assert complaint_status(Complaint.objects.get(pk=complaint.pk)) == STATUS_ASSIGNED


def test_complaint_rows_list_engineers_once(complaint, engineer, make_user):
    make_user("dan", role="engineer")
    other = queries.add_complaint(complaint.submitted_by, "555-0199", "no hot water")
    assign(complaint.id, "bob")
    assign(complaint.id, "bob")
    assign(complaint.id, "dan")

    rows = complaint_rows(queries.get_complaints())

    assert [row["complaint"] for row in rows] == [other, complaint]
    assert rows[0]["status"] == STATUS_SUBMITTED
    assert rows[0]["engineers"] == []
    assert rows[1]["status"] == STATUS_ASSIGNED
    assert rows[1]["engineers"] == ["bob", "dan"]
