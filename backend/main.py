"""Manage Equipment: FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from utils.config import LOG_LEVEL, RUN_MIGRATIONS

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
from fastapi.middleware.cors import CORSMiddleware

from api.equipment import router as equipment_router
from api.errors import validation_exception_handler
from api.routes import router

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Manage Equipment",
    description="Description Manage Equipment",
    version="0.1",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8080", "http://127.0.0.1:8080"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(router, prefix="/api")
app.include_router(equipment_router, prefix="/api")


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations."""
    if not RUN_MIGRATIONS:
        LOG.info("Skipping migrations (RUN_MIGRATIONS disabled)")
        return
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database schema is up to date")


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "equipment-api", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run(app, host="0.0.0.0", port=PORT)
