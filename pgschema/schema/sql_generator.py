# ============================================================================
# SQL SCHEMA GENERATOR
# ============================================================================
# STATUS: Core - DDL generation from table declarations
# PURPOSE: Render extensions, enum types, tables and drop scripts as SQL
# CREATED: 18 OCT 2026
# EXPORTS: SQLGenerator
# DEPENDENCIES: psycopg
# ============================================================================
"""
Table Declarations to PostgreSQL Schema Generator.

Generates PostgreSQL DDL text from validated Table declarations.
The declarations are the SINGLE SOURCE OF TRUTH for the schema; the
TypeScript generator renders the same tables.

Output order:
    1. CREATE EXTENSION IF NOT EXISTS per extension
    2. CREATE TYPE ... AS ENUM per custom type
    3. CREATE TABLE IF NOT EXISTS per table, in insertion order

Empty blocks are omitted together with their blank-line separator.

Usage:
    generator = SQLGenerator(GeneratorDefaults())
    script = generator.generate_schema(tables, extensions, custom_types)
"""

from typing import Dict, List, Optional, Sequence

from psycopg import sql

from pgschema.config.defaults import GeneratorDefaults
from pgschema.logging import get_logger, ComponentType
from pgschema.models.column import Column, ColumnDefault
from pgschema.models.table import Table
from pgschema.models.value_types import EnumType, ValueType
from pgschema.naming import join_blocks
from pgschema.schema.ddl_utils import (
    ConstraintBuilder,
    DropBuilder,
    EnumTypeBuilder,
    ExtensionBuilder,
    IdentifierPolicy,
    render,
)

logger = get_logger(__name__, ComponentType.SQL_GENERATOR)


class SQLGenerator:
    """
    Convert Table declarations to PostgreSQL DDL.

    Stateless apart from its settings; safe to call repeatedly.
    """

    def __init__(self, settings: Optional[GeneratorDefaults] = None):
        """
        Initialize the generator.

        Args:
            settings: Rendering options (indent, banner, quoting, guarded enums)
        """
        self.settings = settings or GeneratorDefaults()
        self.ident = IdentifierPolicy(quote=self.settings.quote_identifiers)

    # =========================================================================
    # TYPE CONVERSION
    # =========================================================================

    def column_type(self, value_type: ValueType) -> sql.Composable:
        """SQL type of a column; enum types render as their (identifier) name."""
        if value_type.kind.is_user_defined():
            return self.ident(value_type.sql_name)
        return sql.SQL(value_type.sql_name)

    @staticmethod
    def column_default(default: ColumnDefault) -> sql.Composable:
        """
        Literal strings are quoted, everything else is emitted verbatim.
        """
        if default.is_sql:
            return sql.SQL(default.value)

        value = default.value
        if isinstance(value, bool):
            return sql.SQL("TRUE" if value else "FALSE")
        if isinstance(value, str):
            return sql.Literal(value)
        return sql.SQL(str(value))

    # =========================================================================
    # STATEMENT GENERATION
    # =========================================================================

    def generate_extension(self, name: str) -> sql.Composed:
        return ExtensionBuilder.create(name)

    def generate_enum(self, enum_type: EnumType) -> sql.Composed:
        """
        CREATE TYPE for an enum, values in declared order.

        With guard_enum_types the statement skips existing types.
        """
        name = self.ident(enum_type.sql_name)
        if self.settings.guard_enum_types:
            return EnumTypeBuilder.create_guarded(enum_type.sql_name, name, enum_type.values)
        return EnumTypeBuilder.create(name, enum_type.values)

    def generate_column(self, column: Column) -> sql.Composed:
        """name type [NOT NULL] [DEFAULT expr]"""
        parts: List[sql.Composable] = [
            self.ident(column.name),
            sql.SQL(" "),
            self.column_type(column.type),
        ]

        if not column.nullable:
            parts.append(sql.SQL(" NOT NULL"))

        if column.default is not None:
            parts.extend([sql.SQL(" DEFAULT "), self.column_default(column.default)])

        return sql.Composed(parts)

    def generate_table(self, table: Table) -> sql.Composed:
        """
        Generate CREATE TABLE DDL.

        Columns first, then a blank line and the PRIMARY KEY, FOREIGN KEY
        and CHECK clauses.
        """
        logger.debug(f"Generating table {table.name}")

        indent = sql.SQL(self.settings.sql_indent_str)

        columns = [indent + self.generate_column(c) for c in table.columns]

        constraints: List[sql.Composable] = []
        if table.primary_keys:
            constraints.append(ConstraintBuilder.primary_key(self.ident, table.primary_keys))
        for fk in table.foreign_keys:
            constraints.append(ConstraintBuilder.foreign_key(self.ident, fk))
        for check in table.constraints:
            constraints.append(ConstraintBuilder.check(self.ident, check.name, check.expression))

        body = sql.SQL(",\n").join(columns)
        if constraints:
            body = body + sql.SQL(",\n\n") + sql.SQL(",\n").join(indent + c for c in constraints)

        return sql.SQL("CREATE TABLE IF NOT EXISTS {name} (\n{body}\n);").format(
            name=self.ident(table.name),
            body=body,
        )

    # =========================================================================
    # COMPLETE SCRIPTS
    # =========================================================================

    def generate_schema(
        self,
        tables: Sequence[Table],
        extensions: Sequence[str],
        custom_types: Dict[str, EnumType],
    ) -> str:
        """
        Generate the complete CREATE script.

        Args:
            tables: Validated tables in insertion order
            extensions: Extension names in insertion order
            custom_types: Enum name -> EnumType in registration order

        Returns:
            Statement-terminated SQL script
        """
        extension_block = "\n".join(render(self.generate_extension(e)) for e in extensions)
        type_block = "\n".join(render(self.generate_enum(t)) for t in custom_types.values())
        table_block = "\n\n".join(render(self.generate_table(t)) for t in tables)

        body = join_blocks([extension_block, type_block, table_block])

        logger.info(
            f"Generated SQL schema: {len(extensions)} extensions, "
            f"{len(custom_types)} types, {len(tables)} tables"
        )
        return self._wrap(body)

    def generate_drop(
        self,
        tables: Sequence[Table],
        extensions: Sequence[str],
        custom_types: Dict[str, EnumType],
    ) -> str:
        """
        Generate the DROP script.

        Tables in reverse insertion order (dependents first), then types,
        then extensions. The `tables` sequence is not modified.
        """
        statements = [DropBuilder.table(self.ident, t.name) for t in reversed(tables)]
        statements.extend(DropBuilder.type(self.ident, name) for name in custom_types)
        statements.extend(ExtensionBuilder.drop(e) for e in extensions)

        logger.info(f"Generated drop script: {len(statements)} statements")
        return self._wrap("\n".join(render(s) for s in statements))

    def _wrap(self, body: str) -> str:
        if not self.settings.include_banner:
            return f"{body}\n" if body else ""
        return f"{self._banner('BEGIN')}{body}\n{self._banner('END')}"

    def _banner(self, marker: str) -> str:
        return (
            f"--\n-- {marker} AUTO GENERATED CONTENT BY "
            f"{self.settings.banner_label} -- DO NOT EDIT\n--\n"
        )


__all__ = ["SQLGenerator"]
