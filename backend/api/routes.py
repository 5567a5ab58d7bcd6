"""Service-level routes (health)."""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db import get_db
from schemas.health import HealthResponse

router = APIRouter(tags=["health"])

LOG = logging.getLogger(__name__)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthResponse}},
)
def health(db: Session = Depends(get_db)):
    """Report ok when the equipment database answers a trivial query, 503 otherwise."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        LOG.exception("Health check: database unreachable")
        body = HealthResponse(status="degraded", database="unavailable")
        return JSONResponse(body.model_dump(), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return HealthResponse()
