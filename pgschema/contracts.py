# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# STATUS: Foundation - Closed enumerations shared by every layer
# PURPOSE: Value kinds, referential actions, default kinds, issue codes
# CREATED: 18 OCT 2026
# EXPORTS: ValueKind, ReferentialAction, DefaultKind, NullableStyle, IssueCode
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for schema declaration and code generation.

These enums are the closed vocabularies that cross boundaries:
- Declaration (Python models, YAML schema files)
- SQL rendering (PostgreSQL DDL)
- TypeScript rendering (type bindings)
"""

from enum import Enum


# ============================================================================
# VALUE KINDS
# ============================================================================

class ValueKind(str, Enum):
    """
    Tag of every value type in the catalog.

    One tag per scalar, parametrized, and user-defined kind.
    """
    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    REAL = "real"
    DOUBLE = "double"
    SMALLSERIAL = "smallserial"
    SERIAL = "serial"
    BIGSERIAL = "bigserial"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    TEXT = "text"
    UUID = "uuid"
    CHAR = "char"                  # Fixed length, carries length
    VARCHAR = "varchar"            # Variable length, carries length
    USER_DEFINED = "user_defined"  # Enumeration declared by the caller

    def is_parametrized(self) -> bool:
        """Check if values of this kind carry a length."""
        return self in (ValueKind.CHAR, ValueKind.VARCHAR)

    def is_user_defined(self) -> bool:
        return self is ValueKind.USER_DEFINED


# ============================================================================
# CONSTRAINT VOCABULARY
# ============================================================================

class ReferentialAction(str, Enum):
    """ON DELETE / ON UPDATE actions for foreign keys."""
    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    CASCADE = "CASCADE"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"


class DefaultKind(str, Enum):
    """How a column default is rendered."""
    VALUE = "value"    # Literal value, strings are quoted
    SQL = "sql"        # Raw SQL expression, emitted verbatim


# ============================================================================
# RENDERING POLICY
# ============================================================================

class NullableStyle(str, Enum):
    """
    TypeScript rendering of nullable columns.

    OPTIONAL:  field?: T;
    UNION:     field: T | null;
    """
    OPTIONAL = "optional"
    UNION = "union"


# ============================================================================
# VALIDATION ISSUES
# ============================================================================

class IssueCode(str, Enum):
    """Problems the validator can report for a table."""
    DUPLICATE_TABLE = "duplicate_table"
    DUPLICATE_COLUMN = "duplicate_column"
    MISSING_PRIMARY_KEY = "missing_primary_key"
    UNKNOWN_PRIMARY_KEY_COLUMN = "unknown_primary_key_column"
    UNKNOWN_FOREIGN_KEY_COLUMN = "unknown_foreign_key_column"
    DUPLICATE_FOREIGN_KEY = "duplicate_foreign_key"
    DANGLING_FOREIGN_KEY = "dangling_foreign_key"
    FOREIGN_KEY_TYPE_MISMATCH = "foreign_key_type_mismatch"
    ENUM_MEMBER_COLLISION = "enum_member_collision"
    TYPE_NAME_COLLISION = "type_name_collision"


__all__ = [
    "ValueKind",
    "ReferentialAction",
    "DefaultKind",
    "NullableStyle",
    "IssueCode",
]
