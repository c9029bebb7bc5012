# ============================================================================
# PGSCHEMA PACKAGE
# ============================================================================
# STATUS: Package initialization
# PURPOSE: Export the registry, type catalog, models and errors
# CREATED: 18 OCT 2026
# ============================================================================
"""
pgschema - PostgreSQL DDL and TypeScript types from one schema declaration.

    from pgschema import SchemaRegistry, Table, UUID, Text, Enum

    registry = SchemaRegistry()
    registry.add_extension("uuid-ossp")
    registry.add_table(Table(
        name="users",
        type_name="User",
        columns={"id": {"type": UUID}, "name": {"type": Text}},
        primary_keys=["id"],
    ))
    sql = registry.generate_sql_schema()
    ts = registry.generate_typescript()
"""

from pgschema.__version__ import __version__
from pgschema.contracts import (
    ValueKind,
    ReferentialAction,
    DefaultKind,
    NullableStyle,
    IssueCode,
)
from pgschema.errors import (
    SchemaError,
    DuplicateTableError,
    ValidationError,
    ValidationIssue,
    UnsupportedTypeError,
    SchemaFileError,
)
from pgschema.models import (
    ScalarType,
    CharacterType,
    EnumType,
    ValueType,
    SmallInt,
    Integer,
    BigInt,
    Real,
    Double,
    SmallSerial,
    Serial,
    BigSerial,
    Boolean,
    Timestamp,
    Text,
    UUID,
    VarChar,
    Char,
    Enum,
    lookup_type,
    Column,
    ColumnDefault,
    Table,
    ForeignKey,
    ColumnReference,
    CheckConstraint,
)
from pgschema.config import GeneratorDefaults, get_defaults
from pgschema.schema import SchemaRegistry, SQLGenerator, TypeScriptGenerator, SchemaValidator
from pgschema.loader import load_schema, load_schema_file

__all__ = [
    "__version__",
    # Contracts
    "ValueKind",
    "ReferentialAction",
    "DefaultKind",
    "NullableStyle",
    "IssueCode",
    # Errors
    "SchemaError",
    "DuplicateTableError",
    "ValidationError",
    "ValidationIssue",
    "UnsupportedTypeError",
    "SchemaFileError",
    # Value types
    "ScalarType",
    "CharacterType",
    "EnumType",
    "ValueType",
    "SmallInt",
    "Integer",
    "BigInt",
    "Real",
    "Double",
    "SmallSerial",
    "Serial",
    "BigSerial",
    "Boolean",
    "Timestamp",
    "Text",
    "UUID",
    "VarChar",
    "Char",
    "Enum",
    "lookup_type",
    # Models
    "Column",
    "ColumnDefault",
    "Table",
    "ForeignKey",
    "ColumnReference",
    "CheckConstraint",
    # Config
    "GeneratorDefaults",
    "get_defaults",
    # Schema
    "SchemaRegistry",
    "SchemaValidator",
    "SQLGenerator",
    "TypeScriptGenerator",
    # Loader
    "load_schema",
    "load_schema_file",
]
