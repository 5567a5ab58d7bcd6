"""Equipment API routes."""
import logging
from datetime import timezone

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from models.equipment import Equipment
from repositories.equipment_repository import delete as repo_delete
from repositories.equipment_repository import find_all as repo_find_all
from repositories.equipment_repository import save as repo_save
from schemas.equipment import EquipmentResponse, EquipmentWrite, ErrorResponse
from services.equipment_service import (
    FieldError,
    NotFound,
    bad_request_payload,
    build_equipment,
    find_equipment,
    merge,
    not_found_payload,
    update_error_payload,
    validate_equipment,
    writable_values,
)

router = APIRouter(tags=["equipments"])

LOG = logging.getLogger(__name__)

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Equipment not found"}}
_WRITE_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Bad request"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Internal server error"},
}


def _equipment_to_response(e: Equipment) -> EquipmentResponse:
    """Build EquipmentResponse from model instance. Stored timestamps are naive UTC."""
    return EquipmentResponse(
        id=e.id,
        name=e.name,
        category=e.category,
        number=e.number,
        description=e.description,
        createdAt=e.created_at.replace(tzinfo=timezone.utc),
        updatedAt=e.updated_at.replace(tzinfo=timezone.utc) if e.updated_at else None,
    )


def _describe(errors: list[FieldError]) -> str:
    return "; ".join(f"{err.field}: {err.message}" for err in errors)


def _not_found() -> JSONResponse:
    return JSONResponse(not_found_payload(), status_code=status.HTTP_404_NOT_FOUND)


def _bad_request() -> JSONResponse:
    return JSONResponse(bad_request_payload(), status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/equipments", response_model=list[EquipmentResponse])
def list_equipments(db: Session = Depends(get_db)) -> list[EquipmentResponse]:
    """List all equipment."""
    return [_equipment_to_response(e) for e in repo_find_all(db)]


@router.get("/equipment/{equipment_id}", response_model=EquipmentResponse, responses=_NOT_FOUND)
def get_equipment(equipment_id: int, db: Session = Depends(get_db)):
    """Retrieve one equipment by id."""
    result = find_equipment(db, equipment_id)
    if isinstance(result, NotFound):
        LOG.info("Equipment %s not found", equipment_id)
        return _not_found()
    return _equipment_to_response(result.equipment)


@router.post(
    "/equipment/create",
    response_model=EquipmentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_WRITE_ERRORS,
)
def create_equipment(body: EquipmentWrite, request: Request, db: Session = Depends(get_db)):
    """Create equipment; the Location header points at its detail URL."""
    values = body.model_dump(exclude_unset=True)
    errors = validate_equipment(values)
    if errors:
        LOG.info("Rejected equipment create: %s", _describe(errors))
        return _bad_request()
    try:
        equipment = repo_save(db, build_equipment(values))
        db.commit()
    except Exception:
        db.rollback()
        LOG.exception("Failed to create equipment")
        return JSONResponse(update_error_payload(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    LOG.info("Created equipment %s (%s)", equipment.id, equipment.name)
    location = str(request.url_for("get_equipment", equipment_id=equipment.id))
    return JSONResponse(
        _equipment_to_response(equipment).model_dump(mode="json"),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location},
    )


@router.put(
    "/equipment/update/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_NOT_FOUND, **_WRITE_ERRORS},
)
def update_equipment(equipment_id: int, body: EquipmentWrite, db: Session = Depends(get_db)):
    """Update equipment in place. Only fields present in the body are changed."""
    result = find_equipment(db, equipment_id)
    if isinstance(result, NotFound):
        LOG.info("Equipment %s not found for update", equipment_id)
        return _not_found()
    equipment = result.equipment

    changes = body.model_dump(exclude_unset=True)
    errors = validate_equipment({**writable_values(equipment), **changes})
    if errors:
        LOG.info("Rejected update of equipment %s: %s", equipment_id, _describe(errors))
        return _bad_request()
    try:
        repo_save(db, merge(equipment, changes))
        db.commit()
    except Exception:
        db.rollback()
        LOG.exception("Failed to update equipment %s", equipment_id)
        return JSONResponse(update_error_payload(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    LOG.info("Updated equipment %s (fields: %s)", equipment_id, ", ".join(sorted(changes)) or "none")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/equipment/delete/{equipment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
def delete_equipment(equipment_id: int, db: Session = Depends(get_db)):
    """Hard-delete equipment by id."""
    result = find_equipment(db, equipment_id)
    if isinstance(result, NotFound):
        LOG.info("Equipment %s not found for delete", equipment_id)
        return _not_found()
    repo_delete(db, result.equipment)
    db.commit()
    LOG.info("Deleted equipment %s", equipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
