"""Apply pending schema migrations and record them in the migration ledger."""

from __future__ import annotations

import argparse
import logging
import sys

from core.db import database
from core.db.migration_ledger import apply_migrations
from core.errors import MigrationChecksumError


logger = logging.getLogger("core.scripts.migrate")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upgrade the database schema to the latest revision")
    parser.add_argument(
        "--script-location",
        default=None,
        help="Alternate migrations directory (default: the service's migrations/)",
    )
    return parser.parse_args(argv)


def migrate(script_location: str | None = None) -> int:
    try:
        applied = apply_migrations(database.engine, script_location=script_location)
    except MigrationChecksumError as exc:
        print(f"Refusing to migrate: {exc}", file=sys.stderr)
        logger.error("Migration ledger mismatch", extra={"revision": exc.revision})
        return 1
    if applied:
        print(f"Applied {len(applied)} migration(s): {', '.join(applied)}")
    else:
        print("Database schema is up to date.")
    return 0


def main(argv: list[str] | None = None) -> int:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    return migrate(script_location=args.script_location)


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())
