"""Unit tests: equipment validation, merge and error payloads."""
from datetime import datetime, timedelta

import pytest

from models.equipment import Equipment, utcnow
from services.equipment_service import (
    FieldError,
    NotFound,
    bad_request_payload,
    build_equipment,
    ensure_exists,
    find_equipment,
    merge,
    not_found_payload,
    update_error_payload,
    validate_equipment,
    writable_values,
)

pytestmark = pytest.mark.unit

VALID = {"name": "Drill", "category": "Tools", "number": "T-001", "description": "Cordless"}


def _equipment(**overrides) -> Equipment:
    values = {**VALID, "created_at": datetime(2024, 1, 1, 12, 0, 0), "updated_at": None}
    values.update(overrides)
    return Equipment(id=1, **values)


def test_error_payloads():
    """Canned payloads carry a single error string."""
    assert not_found_payload() == {"error": "Equipment not found"}
    assert bad_request_payload() == {"error": "Bad request"}
    assert update_error_payload() == {"error": "Unable to update equipment"}


def test_validate_accepts_valid_values():
    assert validate_equipment(VALID) == []


def test_validate_accepts_minimal_values():
    """category and description are optional."""
    assert validate_equipment({"name": "Saw", "number": "S1"}) == []


@pytest.mark.parametrize(
    "values, field",
    [
        ({"number": "T-001"}, "name"),
        ({"name": "Dr", "number": "T-001"}, "name"),
        ({"name": "Drill"}, "number"),
        ({"name": "Drill", "number": "T"}, "number"),
        ({"name": "Drill", "number": "T-001", "description": None}, "description"),
        ({"name": "Drill", "number": "T-001", "description": "x" * 65536}, "description"),
    ],
)
def test_validate_reports_failing_field(values, field):
    """Each broken rule is reported against its field."""
    errors = validate_equipment(values)
    assert [e.field for e in errors] == [field]
    assert all(isinstance(e, FieldError) and e.message for e in errors)


def test_validate_collects_all_errors():
    errors = validate_equipment({"name": "ab", "number": ""})
    assert {e.field for e in errors} == {"name", "number"}


def test_validate_description_at_limit_is_valid():
    assert validate_equipment({**VALID, "description": "x" * 65535}) == []


def test_build_equipment_defaults_description():
    """A new record without description stores an empty string and gets created_at."""
    equipment = build_equipment({"name": "Saw", "number": "S1"})
    assert equipment.description == ""
    assert equipment.category is None
    assert equipment.created_at is not None
    assert equipment.updated_at is None


def test_merge_applies_only_present_fields():
    """Fields absent from the changes keep their previous values."""
    existing = _equipment()
    merged = merge(existing, {"name": "Hammer Drill"})
    assert merged is existing
    assert merged.name == "Hammer Drill"
    assert merged.category == "Tools"
    assert merged.number == "T-001"
    assert merged.description == "Cordless"
    assert merged.updated_at is not None
    assert merged.updated_at > merged.created_at


def test_merge_can_clear_category():
    existing = merge(_equipment(), {"category": None})
    assert existing.category is None


def test_merge_ignores_non_writable_fields():
    """id and timestamps cannot be overwritten through merge."""
    created = datetime(2024, 1, 1, 12, 0, 0)
    existing = merge(_equipment(), {"id": 99, "created_at": datetime(2030, 1, 1), "name": "Other"})
    assert existing.id == 1
    assert existing.created_at == created


def test_merge_without_changes_keeps_updated_at():
    existing = merge(_equipment(), {"name": "Drill"})
    assert existing.updated_at is None


def test_merge_updated_at_is_strictly_increasing():
    """A second update moves updated_at forward even when the clock lags behind."""
    future = utcnow() + timedelta(days=1)
    existing = _equipment(updated_at=future)
    merge(existing, {"number": "T-002"})
    assert existing.updated_at > future


def test_writable_values():
    assert writable_values(_equipment()) == VALID


def test_ensure_exists_without_candidate():
    assert ensure_exists(None, None) == NotFound()


def test_ensure_exists_without_id():
    """A transient record with no id is reported as not found."""
    assert isinstance(ensure_exists(None, Equipment(name="Saw", number="S1")), NotFound)


@pytest.mark.parametrize("equipment_id", [0, -5, 2**63, 10**30])
def test_find_equipment_out_of_range_id(equipment_id):
    """Ids outside the 64-bit key range are NotFound without touching the database."""
    assert find_equipment(None, equipment_id) == NotFound(equipment_id)


def test_demo_rows_format():
    """Demo fixture rows: spaced name/number, unspaced category/description."""
    from scripts.seed_equipment import demo_rows

    rows = demo_rows()
    assert len(rows) == 20
    assert rows[7] == {
        "name": "Name 7",
        "category": "Category7",
        "number": "Number 7",
        "description": "Description7",
    }
    assert all(validate_equipment(row) == [] for row in rows)
