"""ORM metadata for the equipment store.

Alembic (alembic/env.py) and the test fixtures import models.equipment so its
table is registered on Base.metadata before migrating or calling create_all.
"""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
