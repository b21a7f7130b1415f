from __future__ import annotations

import runpy
from pathlib import Path

from core.errors import MigrationChecksumError

MODULE_GLOBALS = runpy.run_path(str(Path(__file__).resolve().parents[2] / "scripts" / "migrate.py"))
MIGRATE = MODULE_GLOBALS["migrate"]
MAIN = MODULE_GLOBALS["main"]


def _patch(module_globals, **overrides):
    for key, value in overrides.items():
        module_globals[key] = value


def test_migrate_reports_applied_revisions(capsys):
    _patch(MIGRATE.__globals__, apply_migrations=lambda engine, script_location=None: ["0001_initial_schema"])
    assert MAIN([]) == 0
    assert "Applied 1 migration(s): 0001_initial_schema" in capsys.readouterr().out


def test_migrate_up_to_date(capsys):
    _patch(MIGRATE.__globals__, apply_migrations=lambda engine, script_location=None: [])
    assert MAIN([]) == 0
    assert "up to date" in capsys.readouterr().out


def test_migrate_refuses_on_checksum_mismatch(capsys):
    def _tampered(engine, script_location=None):
        raise MigrationChecksumError("0002_add_project_live_url", "a" * 64, "b" * 64)

    _patch(MIGRATE.__globals__, apply_migrations=_tampered)
    assert MAIN([]) == 1
    assert "Refusing to migrate" in capsys.readouterr().err
