# ============================================================================
# TYPESCRIPT TYPE GENERATOR
# ============================================================================
# STATUS: Core - Type bindings from table declarations
# PURPOSE: Render enum and record type declarations for application code
# CREATED: 18 OCT 2026
# EXPORTS: TypeScriptGenerator
# ============================================================================
"""
Table Declarations to TypeScript Generator.

Renders, from the same tables the SQL generator consumes:

    export enum Level {
      High = "high",
      Low = "low",
    }

    export type Test = {
      myColumn: string;
      theLevel?: Level;
    };

Enums are declared once each, in the order first met while scanning
tables and columns in insertion order. Field names are camelCased column
names; nullable columns follow the configured NullableStyle.
"""

import json
from typing import Dict, List, Optional, Sequence

from pgschema.config.defaults import GeneratorDefaults
from pgschema.contracts import NullableStyle
from pgschema.logging import get_logger, ComponentType
from pgschema.models.column import Column
from pgschema.models.table import Table
from pgschema.models.value_types import EnumType
from pgschema.naming import join_blocks, to_camel_case

logger = get_logger(__name__, ComponentType.TYPE_GENERATOR)


class TypeScriptGenerator:
    """Convert Table declarations to TypeScript declarations."""

    def __init__(self, settings: Optional[GeneratorDefaults] = None):
        self.settings = settings or GeneratorDefaults()

    @staticmethod
    def collect_enums(tables: Sequence[Table]) -> List[EnumType]:
        """Distinct enum types in first-encounter order."""
        seen: Dict[str, EnumType] = {}
        for table in tables:
            for enum_type in table.enum_types:
                seen.setdefault(enum_type.name, enum_type)
        return list(seen.values())

    def generate_enum(self, enum_type: EnumType) -> str:
        indent = self.settings.typescript_indent_str
        members = "\n".join(
            f"{indent}{member} = {json.dumps(value)},"
            for member, value in zip(enum_type.member_names, enum_type.values)
        )
        return f"export enum {enum_type.typescript_name} {{\n{members}\n}}"

    def generate_field(self, column: Column) -> str:
        indent = self.settings.typescript_indent_str
        field_name = to_camel_case(column.name)
        # Enum columns resolve to the enum's declared type name
        type_name = column.type.typescript_name

        if not column.nullable:
            return f"{indent}{field_name}: {type_name};"
        if self.settings.nullable_style == NullableStyle.UNION:
            return f"{indent}{field_name}: {type_name} | null;"
        return f"{indent}{field_name}?: {type_name};"

    def generate_record(self, table: Table) -> str:
        fields = "\n".join(self.generate_field(c) for c in table.columns)
        return f"export type {table.type_name} = {{\n{fields}\n}};"

    def generate(self, tables: Sequence[Table]) -> str:
        """
        Generate the complete type-definition source.

        Args:
            tables: Validated tables in insertion order

        Returns:
            TypeScript source text
        """
        enums = self.collect_enums(tables)
        enum_block = "\n\n".join(self.generate_enum(e) for e in enums)
        record_block = "\n\n".join(self.generate_record(t) for t in tables)

        body = join_blocks([enum_block, record_block])

        logger.info(f"Generated TypeScript: {len(enums)} enums, {len(tables)} types")
        return self._wrap(body)

    def _wrap(self, body: str) -> str:
        if not self.settings.include_banner:
            return f"{body}\n" if body else ""
        return f"{self._banner('BEGIN')}{body}\n{self._banner('END')}"

    def _banner(self, marker: str) -> str:
        return (
            f"/*\n * {marker} AUTO GENERATED CONTENT BY "
            f"{self.settings.banner_label} -- DO NOT EDIT\n */\n"
        )


__all__ = ["TypeScriptGenerator"]
