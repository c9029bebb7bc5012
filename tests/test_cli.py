# ============================================================================
# CLI TESTS
# ============================================================================
# STATUS: Tests - Command line entry point
# PURPOSE: Verify output selection, options and exit codes
# CREATED: 18 OCT 2026
# ============================================================================
"""
CLI Tests

Run with:
    pytest tests/test_cli.py -v
"""

import logging
from pathlib import Path

import pytest

from pgschema.cli import build_parser, main
from pgschema.config.defaults import reset_defaults
from pgschema.logging import HumanFormatter, StructuredFormatter

EXAMPLE_SCHEMA = str(Path(__file__).parent.parent / "schemas" / "airports.yaml")


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Restore root logging and defaults after main() reconfigures them."""
    for name in (
        "PGSCHEMA_BANNER",
        "PGSCHEMA_NULLABLE_STYLE",
        "PGSCHEMA_SQL_INDENT",
        "LOG_FORMAT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_defaults()

    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (HumanFormatter, StructuredFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)
    reset_defaults()


class TestParser:
    def test_outputs_mutually_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["schema.yaml", "--sql", "--drop"])

    def test_ts_alias(self):
        args = build_parser().parse_args(["schema.yaml", "--ts"])
        assert args.typescript is True


class TestMain:
    def test_sql_to_stdout(self, capsys):
        assert main([EXAMPLE_SCHEMA, "--no-banner"]) == 0
        out = capsys.readouterr().out
        assert out.startswith('CREATE EXTENSION IF NOT EXISTS "uuid-ossp";\n')
        assert "CREATE TABLE IF NOT EXISTS flights (" in out

    def test_banner_by_default(self, capsys):
        assert main([EXAMPLE_SCHEMA]) == 0
        assert capsys.readouterr().out.startswith("--\n-- BEGIN AUTO GENERATED CONTENT BY pgschema")

    def test_typescript_union_style(self, capsys):
        assert main([EXAMPLE_SCHEMA, "--typescript", "--nullable-style", "union", "--no-banner"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("export enum AircraftStatus {\n")
        assert "  retiredAt: string | null;\n" in out

    def test_drop(self, capsys):
        assert main([EXAMPLE_SCHEMA, "--drop", "--no-banner"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("DROP TABLE IF EXISTS flights;\n")
        assert out.endswith('DROP EXTENSION IF EXISTS "uuid-ossp";\n')

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "schema.sql"
        assert main([EXAMPLE_SCHEMA, "-o", str(target)]) == 0
        assert capsys.readouterr().out == ""
        assert "CREATE TABLE IF NOT EXISTS airports (" in target.read_text()

    def test_schema_error_exit_code(self, tmp_path, capsys):
        path = tmp_path / "broken.yaml"
        path.write_text("tables:\n  t:\n    type_name: T\n    columns:\n      id: uuid\n")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert 'Table "t" must have a primary key' in captured.err

    def test_invalid_environment_exit_code(self, monkeypatch, capsys):
        monkeypatch.setenv("PGSCHEMA_SQL_INDENT", "wide")
        assert main([EXAMPLE_SCHEMA]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid configuration: PGSCHEMA_SQL_INDENT must be an integer" in captured.err
        assert "Traceback" not in captured.err

    def test_unwritable_output_exit_code(self, tmp_path, capsys):
        assert main([EXAMPLE_SCHEMA, "-o", str(tmp_path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"Cannot write {tmp_path}" in captured.err
        assert "Traceback" not in captured.err
