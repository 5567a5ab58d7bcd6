"""Equipment repository: find all, find by id, save, delete.

Functions flush but never commit; the caller owns the request-scoped session
and commits once the whole operation succeeded.
"""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.equipment import Equipment


def find_all(session: Session) -> list[Equipment]:
    """Return all equipment ordered by id."""
    result = session.execute(select(Equipment).order_by(Equipment.id))
    return list(result.scalars().all())


def find_by_id(session: Session, equipment_id: int) -> Optional[Equipment]:
    """Return equipment by id or None."""
    return session.get(Equipment, equipment_id)


def save(session: Session, equipment: Equipment) -> Equipment:
    """Persist new or changed equipment and return it with id and timestamps populated."""
    session.add(equipment)
    session.flush()
    session.refresh(equipment)
    return equipment


def delete(session: Session, equipment: Equipment) -> None:
    """Remove equipment from the store."""
    session.delete(equipment)
    session.flush()


def count_equipment(session: Session) -> int:
    """Return the number of equipment rows (for seeding)."""
    result = session.execute(select(func.count()).select_from(Equipment))
    return result.scalar() or 0
