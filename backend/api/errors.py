"""Exception handlers that keep every error body in the {"error": "..."} shape."""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.equipment_service import bad_request_payload

LOG = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON, wrong field types or a missing body answer 400 instead of FastAPI's 422."""
    LOG.info("Bad request on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(bad_request_payload(), status_code=status.HTTP_400_BAD_REQUEST)
