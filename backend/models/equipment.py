"""Equipment model for DB persistence."""
from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models import Base

NAME_MIN_LENGTH = 3
NUMBER_MIN_LENGTH = 2
DESCRIPTION_MAX_LENGTH = 65535
# Largest value a 64-bit signed INTEGER primary key can store.
MAX_EQUIPMENT_ID = 2**63 - 1

# Fields a client may write; everything else is server-managed.
WRITABLE_FIELDS = ("name", "category", "number", "description")


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite drops tzinfo, so stored values stay naive everywhere)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Equipment(Base):
    """Equipment table: id, name, category, number, description, created_at, updated_at."""

    __tablename__ = "equipment"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(255), nullable=True)
    number: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(
        Text(DESCRIPTION_MAX_LENGTH),
        nullable=False,
        default="",
        server_default="",
    )
    # Set once at creation; never touched by updates.
    created_at: Mapped[datetime] = mapped_column(DateTime(), nullable=False, default=utcnow)
    # Null until the first update that changes a field.
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)

    def __repr__(self) -> str:
        return f"Equipment(id={self.id!r}, name={self.name!r}, number={self.number!r})"
