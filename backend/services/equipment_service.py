"""Equipment domain service: existence lookup, validation, merge and error payloads."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping

from sqlalchemy.orm import Session

from models.equipment import (
    DESCRIPTION_MAX_LENGTH,
    MAX_EQUIPMENT_ID,
    NAME_MIN_LENGTH,
    NUMBER_MIN_LENGTH,
    WRITABLE_FIELDS,
    Equipment,
    utcnow,
)
from repositories.equipment_repository import find_by_id

NOT_FOUND_MESSAGE = "Equipment not found"
BAD_REQUEST_MESSAGE = "Bad request"
UPDATE_ERROR_MESSAGE = "Unable to update equipment"


@dataclass(frozen=True)
class Found:
    """Lookup hit: the stored equipment."""

    equipment: Equipment


@dataclass(frozen=True)
class NotFound:
    """Lookup miss: no stored equipment for the requested id."""

    equipment_id: int | None = None


LookupResult = Found | NotFound


@dataclass(frozen=True)
class FieldError:
    """One failed validation rule."""

    field: str
    message: str


def ensure_exists(session: Session, candidate: Equipment | None) -> LookupResult:
    """Return Found if the candidate has an id that resolves to a stored record, else NotFound."""
    if candidate is None:
        return NotFound()
    equipment_id = candidate.id
    if not equipment_id or find_by_id(session, equipment_id) is None:
        return NotFound(equipment_id)
    return Found(candidate)


def find_equipment(session: Session, equipment_id: int) -> LookupResult:
    """Resolve an id to Found(equipment) or NotFound. Ids the column cannot hold never match."""
    if not 0 < equipment_id <= MAX_EQUIPMENT_ID:
        return NotFound(equipment_id)
    result = ensure_exists(session, find_by_id(session, equipment_id))
    if isinstance(result, NotFound):
        return NotFound(equipment_id)
    return result


def not_found_payload() -> dict[str, str]:
    return {"error": NOT_FOUND_MESSAGE}


def bad_request_payload() -> dict[str, str]:
    return {"error": BAD_REQUEST_MESSAGE}


def update_error_payload() -> dict[str, str]:
    return {"error": UPDATE_ERROR_MESSAGE}


def _check_required(values: Mapping[str, Any], field: str, min_length: int) -> list[FieldError]:
    value = values.get(field)
    if value is None:
        return [FieldError(field, "This value is required.")]
    if not isinstance(value, str):
        return [FieldError(field, "This value should be a string.")]
    if len(value) < min_length:
        return [FieldError(field, f"This value is too short. It should have {min_length} characters or more.")]
    return []


def validate_equipment(values: Mapping[str, Any]) -> list[FieldError]:
    """
    Validate the writable fields of an equipment record.
    Returns a list of FieldError; an empty list means the values may be persisted.
    """
    errors = _check_required(values, "name", NAME_MIN_LENGTH)
    errors += _check_required(values, "number", NUMBER_MIN_LENGTH)

    category = values.get("category")
    if category is not None and not isinstance(category, str):
        errors.append(FieldError("category", "This value should be a string."))

    description = values.get("description", "")
    if not isinstance(description, str):
        errors.append(FieldError("description", "This value should be a string."))
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            FieldError(
                "description",
                f"This value is too long. It should have {DESCRIPTION_MAX_LENGTH} characters or less.",
            )
        )
    return errors


def writable_values(equipment: Equipment) -> dict[str, Any]:
    """Current writable field values of a record."""
    return {field: getattr(equipment, field) for field in WRITABLE_FIELDS}


def build_equipment(values: Mapping[str, Any]) -> Equipment:
    """Build a new (unsaved) record from create input; description defaults to an empty string."""
    description = values.get("description")
    return Equipment(
        name=values.get("name"),
        category=values.get("category"),
        number=values.get("number"),
        description="" if description is None else description,
        created_at=utcnow(),
    )


def _next_timestamp(*previous: datetime | None) -> datetime:
    """Current UTC time, nudged forward so it is strictly after every given timestamp."""
    now = utcnow()
    for ts in previous:
        if ts is not None and now <= ts:
            now = ts + timedelta(microseconds=1)
    return now


def merge(existing: Equipment, changes: Mapping[str, Any]) -> Equipment:
    """
    Apply the writable fields present in changes onto existing, in place.
    Absent fields keep their values; updated_at is refreshed only if some value changed.
    """
    changed = False
    for field in WRITABLE_FIELDS:
        if field not in changes:
            continue
        value = changes[field]
        if getattr(existing, field) != value:
            setattr(existing, field, value)
            changed = True
    if changed:
        existing.updated_at = _next_timestamp(existing.created_at, existing.updated_at)
    return existing
