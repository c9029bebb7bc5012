# ============================================================================
# SCHEMA MODULE
# ============================================================================
# STATUS: Core - Schema registry, validation and generation
# PURPOSE: Render PostgreSQL DDL and TypeScript types from one declaration
# CREATED: 18 OCT 2026
# ============================================================================

from pgschema.schema.ddl_utils import (
    IdentifierPolicy,
    ExtensionBuilder,
    EnumTypeBuilder,
    ConstraintBuilder,
    DropBuilder,
    render,
)
from pgschema.schema.validator import SchemaValidator
from pgschema.schema.sql_generator import SQLGenerator
from pgschema.schema.ts_generator import TypeScriptGenerator
from pgschema.schema.registry import SchemaRegistry

__all__ = [
    # Registry
    "SchemaRegistry",
    # Validation
    "SchemaValidator",
    # Generators
    "SQLGenerator",
    "TypeScriptGenerator",
    # Utilities
    "IdentifierPolicy",
    "ExtensionBuilder",
    "EnumTypeBuilder",
    "ConstraintBuilder",
    "DropBuilder",
    "render",
]
