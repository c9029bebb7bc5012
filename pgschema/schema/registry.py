# ============================================================================
# SCHEMA REGISTRY
# ============================================================================
# STATUS: Core - Schema aggregate and generation entry point
# PURPOSE: Register extensions and tables, validate, dispatch to generators
# CREATED: 18 OCT 2026
# EXPORTS: SchemaRegistry
# ============================================================================
"""
Schema Registry

The mutable aggregate of one schema: ordered tables, ordered extensions,
and the custom (enum) types derived from registered columns.

Design:
- Explicit instance per schema, no module-level state
- Fail-fast on duplicate table names
- Every validation problem of a table reported together
- Whole schema re-validated before any output is rendered

Usage:
    registry = SchemaRegistry()
    registry.add_extension("uuid-ossp")
    registry.add_table(users)
    print(registry.generate_sql_schema())
    print(registry.generate_typescript())
"""

from typing import Dict, Iterable, List, Optional, Tuple

from pgschema.config.defaults import GeneratorDefaults
from pgschema.errors import DuplicateTableError, ValidationError, ValidationIssue
from pgschema.logging import get_logger, log_context, ComponentType
from pgschema.models.table import Table
from pgschema.models.value_types import EnumType
from pgschema.naming import pluralize
from pgschema.schema.sql_generator import SQLGenerator
from pgschema.schema.ts_generator import TypeScriptGenerator
from pgschema.schema.validator import SchemaValidator

logger = get_logger(__name__, ComponentType.REGISTRY)


class SchemaRegistry:
    """
    Registry of one schema's tables, extensions and custom types.

    Not safe for concurrent mutation; callers serialize access.
    """

    def __init__(self, settings: Optional[GeneratorDefaults] = None):
        """
        Initialize an empty schema.

        Args:
            settings: Rendering options shared by both generators
        """
        self.settings = settings or GeneratorDefaults()
        self._tables: List[Table] = []
        self._extensions: Dict[str, None] = {}
        self._custom_types: Dict[str, EnumType] = {}
        self._sql = SQLGenerator(self.settings)
        self._typescript = TypeScriptGenerator(self.settings)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def tables(self) -> Tuple[Table, ...]:
        return tuple(self._tables)

    @property
    def extensions(self) -> Tuple[str, ...]:
        return tuple(self._extensions)

    @property
    def custom_types(self) -> Dict[str, EnumType]:
        return dict(self._custom_types)

    def get_table(self, name: str) -> Optional[Table]:
        for table in self._tables:
            if table.name == name:
                return table
        return None

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, name: str) -> bool:
        return self.get_table(name) is not None

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def add_extension(self, name: str) -> None:
        """
        Add a PostgreSQL extension. Adding it again has no effect.

        Args:
            name: Extension name, e.g. "uuid-ossp"
        """
        if name not in self._extensions:
            self._extensions[name] = None
            logger.debug(f"Registered extension: {name}")

    def add_table(self, table: Table) -> None:
        """
        Validate and register a table.

        Args:
            table: Table declaration

        Raises:
            DuplicateTableError if a table with this name is registered
            ValidationError with every problem found in the table
        """
        with log_context(table=table.name, operation="add_table"):
            if table.name in self:
                raise DuplicateTableError(table.name)

            # Registry keeps its own copy with a deduplicated primary key
            table = table.model_copy(
                update={"primary_keys": tuple(dict.fromkeys(table.primary_keys))}
            )

            issues = SchemaValidator(self._tables).validate_table(table)
            if issues:
                self._report(issues)
                raise ValidationError(issues)

            for column in table.columns:
                if column.is_custom_type:
                    self._register_custom_type(column.type)

            self._tables.append(table)
            logger.debug(
                f"Registered table: {table.name} ({len(table.columns)} columns, "
                f"{len(table.foreign_keys)} foreign keys)"
            )

    def add_tables(self, tables: Iterable[Table]) -> None:
        """
        Register tables in order, stopping at the first failure.

        Tables registered before the failing one stay registered.
        """
        for table in tables:
            self.add_table(table)

    def _register_custom_type(self, enum_type: EnumType) -> None:
        """First declaration of a type name wins."""
        existing = self._custom_types.get(enum_type.name)
        if existing is None:
            self._custom_types[enum_type.name] = enum_type
            logger.debug(f"Registered custom type: {enum_type.name}")
        elif existing.values != enum_type.values:
            logger.warning(
                f"Custom type {enum_type.name} redeclared with values "
                f"{list(enum_type.values)}; keeping {list(existing.values)}"
            )

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self) -> None:
        """
        Validate the whole schema.

        Raises:
            ValidationError with every problem in every table
        """
        with log_context(operation="validate"):
            issues = SchemaValidator(self._tables).validate_all()
            if issues:
                self._report(issues)
                raise ValidationError(issues)

    def _report(self, issues: List[ValidationIssue]) -> None:
        grouped: Dict[str, List[str]] = {}
        for issue in issues:
            grouped.setdefault(issue.table, []).append(issue.message)

        for table_name, messages in grouped.items():
            count = len(messages)
            logger.error(
                f'{count} error{pluralize(count)} found for table "{table_name}": '
                + "; ".join(messages)
            )

    # =========================================================================
    # GENERATION
    # =========================================================================

    def generate_sql_schema(self) -> str:
        """
        Generate SQL CREATE statements to initialize the database.

        Returns:
            Complete, statement-terminated SQL script
        """
        self.validate()
        with log_context(operation="generate_sql_schema"):
            return self._sql.generate_schema(self._tables, self.extensions, self._custom_types)

    def generate_typescript(self) -> str:
        """
        Generate TypeScript types for the schema.

        Returns:
            Type-definition source text
        """
        self.validate()
        with log_context(operation="generate_typescript"):
            return self._typescript.generate(self._tables)

    def generate_drop_sql(self) -> str:
        """
        Generate DROP statements: tables (reverse order), types, extensions.

        Returns:
            Complete drop script
        """
        self.validate()
        with log_context(operation="generate_drop_sql"):
            return self._sql.generate_drop(self._tables, self.extensions, self._custom_types)


__all__ = ["SchemaRegistry"]
