#!/usr/bin/env python3
"""Load demo equipment ("Name 0", "Category0", "Number 0", "Description0", ... up to 19) into the configured database."""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from db import SessionLocal  # noqa: E402
from repositories.equipment_repository import count_equipment, save  # noqa: E402
from services.equipment_service import build_equipment  # noqa: E402

LOG = logging.getLogger("seed_equipment")

DEFAULT_COUNT = 20


def demo_rows(count: int = DEFAULT_COUNT) -> list[dict[str, str]]:
    """Fixture rows matching the demo data set."""
    return [
        {
            "name": f"Name {i}",
            "category": f"Category{i}",
            "number": f"Number {i}",
            "description": f"Description{i}",
        }
        for i in range(count)
    ]


def seed(session, count: int = DEFAULT_COUNT, force: bool = False) -> int:
    """Insert demo rows and commit. Returns the number inserted (0 when skipped)."""
    if not force and count_equipment(session) > 0:
        LOG.info("Equipment table not empty, skipping seed (use --force to add anyway)")
        return 0
    for row in demo_rows(count):
        save(session, build_equipment(row))
    session.commit()
    LOG.info("Seeded %d equipment rows", count)
    return count


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--force", action="store_true", help="seed even if equipment already exists")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    session = SessionLocal()
    try:
        seed(session, count=args.count, force=args.force)
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
