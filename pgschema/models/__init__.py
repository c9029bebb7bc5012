# ============================================================================
# MODELS MODULE
# ============================================================================
# STATUS: Model exports
# PURPOSE: Central export point for schema declaration models
# CREATED: 18 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Pydantic models that declare a schema: the value type catalog,
columns and tables. These are the single source of truth that both
the SQL and the TypeScript generators render.
"""

from pgschema.models.value_types import (
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
)
from pgschema.models.column import Column, ColumnDefault
from pgschema.models.table import Table, ForeignKey, ColumnReference, CheckConstraint

__all__ = [
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
    # Columns
    "Column",
    "ColumnDefault",
    # Tables
    "Table",
    "ForeignKey",
    "ColumnReference",
    "CheckConstraint",
]
