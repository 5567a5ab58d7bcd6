"""Environment settings for the equipment API, read once at import."""
import os


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


TESTING = _flag("TESTING", "false")

PORT = int(os.environ.get("PORT", "8001"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Apply alembic migrations in the startup hook; off when the schema is owned elsewhere.
RUN_MIGRATIONS = _flag("RUN_MIGRATIONS", "true")

# Tests get their own database URL so they can never write to equipment.db.
if TESTING:
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./equipment.db")
