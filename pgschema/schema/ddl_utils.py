# ============================================================================
# DDL UTILITIES
# ============================================================================
# STATUS: Core - DRY utilities for SQL DDL generation
# PURPOSE: Extension, enum type, constraint and drop builders using psycopg.sql
# CREATED: 18 OCT 2026
# EXPORTS: IdentifierPolicy, ExtensionBuilder, EnumTypeBuilder,
#          ConstraintBuilder, DropBuilder, render
# DEPENDENCIES: psycopg
# ============================================================================
"""
DDL Utilities - Shared SQL Generation Patterns.

All builders return psycopg.sql.Composed objects; render() turns them
into text without a database connection. Literal values (enum values,
string defaults) always go through sql.Literal for quoting.

Usage:
    from pgschema.schema.ddl_utils import ExtensionBuilder, render

    render(ExtensionBuilder.create("uuid-ossp"))
    # CREATE EXTENSION IF NOT EXISTS "uuid-ossp";
"""

from typing import Iterable, Sequence

from psycopg import sql

from pgschema.models.table import ForeignKey


def render(statement: sql.Composable) -> str:
    """Render a composed statement to text (no connection needed)."""
    return statement.as_string(None)


# ============================================================================
# IDENTIFIERS
# ============================================================================

class IdentifierPolicy:
    """
    Renders table, column and type names.

    Bare by default (users, user_id); double-quoted when quoting is on.
    """

    def __init__(self, quote: bool = False):
        self.quote = quote

    def __call__(self, name: str) -> sql.Composable:
        if self.quote:
            return sql.Identifier(name)
        return sql.SQL(name)

    def join(self, names: Iterable[str]) -> sql.Composed:
        return sql.SQL(", ").join(self(n) for n in names)


# ============================================================================
# EXTENSION BUILDER
# ============================================================================

class ExtensionBuilder:
    """Extension names are always quoted ("uuid-ossp" is not a bare identifier)."""

    @staticmethod
    def create(name: str) -> sql.Composed:
        return sql.SQL("CREATE EXTENSION IF NOT EXISTS {};").format(sql.Identifier(name))

    @staticmethod
    def drop(name: str) -> sql.Composed:
        return sql.SQL("DROP EXTENSION IF EXISTS {};").format(sql.Identifier(name))


# ============================================================================
# ENUM TYPE BUILDER
# ============================================================================

class EnumTypeBuilder:
    """
    Builder for CREATE TYPE ... AS ENUM statements.
    """

    @staticmethod
    def values(values: Sequence[str]) -> sql.Composed:
        return sql.SQL(", ").join(sql.Literal(v) for v in values)

    @staticmethod
    def create(name: sql.Composable, values: Sequence[str]) -> sql.Composed:
        return sql.SQL("CREATE TYPE {name} AS ENUM ({values});").format(
            name=name,
            values=EnumTypeBuilder.values(values),
        )

    @staticmethod
    def create_guarded(type_name: str, name: sql.Composable, values: Sequence[str]) -> sql.Composed:
        """
        CREATE TYPE wrapped in a DO block that skips existing types.

        Safe to re-run against a database that already has the type.
        """
        return sql.SQL(
            "DO $$\n"
            "BEGIN\n"
            "    IF NOT EXISTS (SELECT 1 FROM pg_type WHERE typname = {typname}) THEN\n"
            "        {create}\n"
            "    END IF;\n"
            "END$$;"
        ).format(
            typname=sql.Literal(type_name),
            create=EnumTypeBuilder.create(name, values),
        )


# ============================================================================
# CONSTRAINT BUILDER
# ============================================================================

class ConstraintBuilder:
    """
    Builder for table constraint clauses (no trailing separator).
    """

    @staticmethod
    def primary_key(ident: IdentifierPolicy, columns: Sequence[str]) -> sql.Composed:
        return sql.SQL("PRIMARY KEY ({})").format(ident.join(columns))

    @staticmethod
    def foreign_key(ident: IdentifierPolicy, fk: ForeignKey) -> sql.Composed:
        return sql.SQL(
            "FOREIGN KEY ({local}) REFERENCES {table} ({foreign}) "
            "ON DELETE {on_delete} ON UPDATE {on_update}"
        ).format(
            local=ident.join(fk.local_columns),
            table=ident(fk.table),
            foreign=ident.join(fk.foreign_columns),
            on_delete=sql.SQL(fk.delete_action.value),
            on_update=sql.SQL(fk.update_action.value),
        )

    @staticmethod
    def check(ident: IdentifierPolicy, name: str, expression: str) -> sql.Composed:
        """Expression is emitted verbatim inside CHECK (...)."""
        return sql.SQL("CONSTRAINT {name} CHECK ({expression})").format(
            name=ident(name),
            expression=sql.SQL(expression),
        )


# ============================================================================
# DROP BUILDER
# ============================================================================

class DropBuilder:

    @staticmethod
    def table(ident: IdentifierPolicy, name: str) -> sql.Composed:
        return sql.SQL("DROP TABLE IF EXISTS {};").format(ident(name))

    @staticmethod
    def type(ident: IdentifierPolicy, name: str) -> sql.Composed:
        return sql.SQL("DROP TYPE IF EXISTS {};").format(ident(name))


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "render",
    "IdentifierPolicy",
    "ExtensionBuilder",
    "EnumTypeBuilder",
    "ConstraintBuilder",
    "DropBuilder",
]
