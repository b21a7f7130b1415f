"""
Startup schema migrations with a tamper check.

`apply_migrations(engine)` upgrades the database to the newest Alembic
revision and records every applied revision in `migration_ledger` together
with the SHA-256 of its source file. If a revision that was already applied
has since been edited (or removed), startup aborts with
`MigrationChecksumError` before anything is changed.
"""
from __future__ import annotations

import hashlib
import logging
import os
from typing import Dict, List, Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import Column, DateTime, MetaData, String, Table, select
from sqlalchemy.engine import Connection, Engine

from core.db.models.base import now_utc
from core.errors import MigrationChecksumError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), os.pardir, os.pardir, "migrations")
)

# Kept out of Base.metadata so autogenerate and create_all never touch it
ledger_metadata = MetaData()
migration_ledger = Table(
    "migration_ledger",
    ledger_metadata,
    Column("revision", String(64), primary_key=True),
    Column("checksum", String(64), nullable=False),
    Column("applied_at", DateTime(timezone=True), nullable=False, default=now_utc),
)


def alembic_config(script_location: Optional[str] = None) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", script_location or MIGRATIONS_DIR)
    return cfg


def file_checksum(path: str) -> str:
    with open(path, "rb") as fh:
        return hashlib.sha256(fh.read()).hexdigest()


def script_checksums(script: ScriptDirectory) -> Dict[str, str]:
    """Map every revision in the migrations directory to its file checksum."""
    return {rev.revision: file_checksum(rev.path) for rev in script.walk_revisions()}


def recorded_checksums(conn: Connection) -> Dict[str, str]:
    rows = conn.execute(select(migration_ledger.c.revision, migration_ledger.c.checksum))
    return {row.revision: row.checksum for row in rows}


def verify_ledger(recorded: Dict[str, str], current: Dict[str, str]) -> None:
    for revision, checksum in recorded.items():
        now = current.get(revision, "missing")
        if now != checksum:
            raise MigrationChecksumError(revision, checksum, now)


def _applied_revisions(conn: Connection, script: ScriptDirectory) -> List[str]:
    heads = MigrationContext.configure(conn).get_current_heads()
    if not heads:
        return []
    return [rev.revision for rev in script.iterate_revisions(heads, "base")]


def apply_migrations(engine: Engine, *, script_location: Optional[str] = None) -> List[str]:
    """Upgrade to head and return the revisions newly recorded in the ledger.

    Running it again on an up-to-date database is a no-op returning [].
    """
    cfg = alembic_config(script_location)
    script = ScriptDirectory.from_config(cfg)
    current = script_checksums(script)

    with engine.begin() as conn:
        migration_ledger.create(conn, checkfirst=True)
        recorded = recorded_checksums(conn)
        verify_ledger(recorded, current)

        cfg.attributes["connection"] = conn
        command.upgrade(cfg, "head")

        newly_applied = [rev for rev in reversed(_applied_revisions(conn, script)) if rev not in recorded]
        for revision in newly_applied:
            conn.execute(
                migration_ledger.insert().values(
                    revision=revision,
                    checksum=current[revision],
                    applied_at=now_utc(),
                )
            )
            logger.info("migration_recorded", extra={"revision": revision})
    return newly_applied
