# ============================================================================
# SCHEMA GENERATION CLI
# ============================================================================
# STATUS: Entry point - Render a YAML schema file
# PURPOSE: Print SQL schema, drop script or TypeScript types for a schema
# CREATED: 18 OCT 2026
# USAGE:
#   pgschema schemas/airports.yaml                 # SQL schema
#   pgschema schemas/airports.yaml --typescript    # TypeScript types
#   pgschema schemas/airports.yaml --drop          # Drop script
# ============================================================================
"""
Schema Generation CLI

Loads a YAML schema file, validates it and writes the requested
artifact to stdout or to --output. Logging goes to stderr.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from pgschema.config.defaults import GeneratorDefaults, LoggingDefaults, get_defaults
from pgschema.contracts import NullableStyle
from pgschema.errors import SchemaError
from pgschema.loader import load_schema_file
from pgschema.logging import configure_logging, get_logger, ComponentType
from pgschema.schema.registry import SchemaRegistry

logger = get_logger(__name__, ComponentType.CLI)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgschema",
        description="Generate PostgreSQL DDL and TypeScript types from a YAML schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pgschema schemas/airports.yaml                  # CREATE script
  pgschema schemas/airports.yaml --typescript     # TypeScript types
  pgschema schemas/airports.yaml --drop -o drop.sql

Environment Variables:
  PGSCHEMA_SQL_INDENT           SQL indent width (default: 2)
  PGSCHEMA_TS_INDENT            TypeScript indent width (default: 2)
  PGSCHEMA_BANNER               Emit AUTO GENERATED banners (default: true)
  PGSCHEMA_QUOTE_IDENTIFIERS    Double-quote identifiers (default: false)
  PGSCHEMA_GUARD_ENUMS          Skip existing enum types (default: false)
  PGSCHEMA_NULLABLE_STYLE       optional | union (default: optional)
  LOG_LEVEL / LOG_FORMAT        Logging level / "json" for JSON logs
        """
    )
    parser.add_argument("schema", type=Path, help="YAML schema file")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--sql", action="store_true", help="CREATE script (default)")
    output.add_argument("--typescript", "--ts", action="store_true", help="TypeScript types")
    output.add_argument("--drop", action="store_true", help="DROP script")

    parser.add_argument("--output", "-o", type=Path, help="Write to file instead of stdout")
    parser.add_argument(
        "--nullable-style",
        choices=[s.value for s in NullableStyle],
        help="TypeScript rendering of nullable columns",
    )
    parser.add_argument("--no-banner", action="store_true", help="Omit AUTO GENERATED banners")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--json-logs", action="store_true", help="JSON log output")
    return parser


def _settings(args: argparse.Namespace) -> GeneratorDefaults:
    settings = get_defaults().generator
    overrides = {}
    if args.nullable_style:
        overrides["nullable_style"] = NullableStyle(args.nullable_style)
    if args.no_banner:
        overrides["include_banner"] = False
    if not overrides:
        return settings
    return replace(settings, **overrides)


def render(registry: SchemaRegistry, args: argparse.Namespace) -> str:
    if args.typescript:
        return registry.generate_typescript()
    if args.drop:
        return registry.generate_drop_sql()
    return registry.generate_sql_schema()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_defaults = LoggingDefaults.from_env()
    configure_logging(
        level="DEBUG" if args.verbose else log_defaults.level,
        json_output=args.json_logs or log_defaults.json_output,
    )

    try:
        settings = _settings(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        registry = load_schema_file(args.schema, SchemaRegistry(settings))
        text = render(registry, args)
    except SchemaError as e:
        logger.error(str(e))
        return 1

    if not args.output:
        sys.stdout.write(text)
        return 0

    try:
        args.output.write_text(text)
    except OSError as e:
        logger.error(f"Cannot write {args.output}: {e}")
        return 1
    logger.info(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
