"""Seed the database: ``python -m app.seed [path/to/seed.yaml]``."""
import argparse
import logging
from pathlib import Path

from app.config import get_settings
from app.database import Base, engine, get_db_context
from app.services.seed_loader import load_seed

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Load household seed data into the database.")
    parser.add_argument("seed_file", nargs="?", type=Path, default=settings.seed_file)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    with get_db_context() as db:
        household = load_seed(db, args.seed_file)

    if household is None:
        logger.error(f"Nothing seeded from {args.seed_file}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
