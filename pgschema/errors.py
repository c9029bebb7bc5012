# ============================================================================
# SCHEMA ERRORS
# ============================================================================
# STATUS: Core - Error taxonomy for registration, validation and rendering
# PURPOSE: Deterministic, input-driven failures the caller must fix
# CREATED: 18 OCT 2026
# EXPORTS: SchemaError, DuplicateTableError, ValidationError, ValidationIssue,
#          UnsupportedTypeError, SchemaFileError
# DEPENDENCIES: pydantic
# ============================================================================
"""
Schema Errors

All failures raised by pgschema derive from SchemaError.
There is no retry concept: every error is caused by the schema
declaration and is fixed by correcting it.
"""

from typing import Any, Dict, List, Sequence

from pydantic import BaseModel

from pgschema.contracts import IssueCode


# ============================================================================
# VALIDATION ISSUE
# ============================================================================

class ValidationIssue(BaseModel):
    """
    A single problem found in one table.

    Collected by the validator and surfaced together in a ValidationError.
    """
    table: str
    code: IssueCode
    message: str

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.message


# ============================================================================
# EXCEPTIONS
# ============================================================================

class SchemaError(Exception):
    """Base exception for schema errors."""
    pass


class DuplicateTableError(SchemaError):
    """Raised when a table name is already registered."""
    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f'Table with name "{table_name}" already exists')


class ValidationError(SchemaError):
    """
    Raised when one or more tables fail validation.

    Carries every issue found, grouped by table, so a caller can
    fix a whole schema in one pass.
    """
    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__(self.format_report())

    @property
    def errors(self) -> Dict[str, List[str]]:
        """Messages keyed by table name, in the order tables were reported."""
        grouped: Dict[str, List[str]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.table, []).append(issue.message)
        return grouped

    @property
    def tables(self) -> List[str]:
        return list(self.errors)

    def codes_for(self, table_name: str) -> List[IssueCode]:
        """Issue codes reported for one table."""
        return [i.code for i in self.issues if i.table == table_name]

    def format_report(self) -> str:
        """Human-readable report naming every table and problem."""
        grouped = self.errors
        lines = [f"Schema validation failed for {_count(len(grouped), 'table')}:"]
        for table_name, messages in grouped.items():
            lines.append(f'  {_count(len(messages), "error")} found for table "{table_name}":')
            lines.extend(f"    {message}" for message in messages)
        return "\n".join(lines)


class UnsupportedTypeError(SchemaError):
    """Raised when a renderer meets a value type kind it does not know."""
    def __init__(self, value_type: Any):
        self.value_type = value_type
        kind = getattr(value_type, "kind", value_type)
        super().__init__(f"Unsupported value type: {kind!r}")


class SchemaFileError(SchemaError):
    """Raised when a schema file cannot be read or is malformed."""
    def __init__(self, path: Any, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}{'' if n == 1 else 's'}"


__all__ = [
    "SchemaError",
    "DuplicateTableError",
    "ValidationError",
    "ValidationIssue",
    "UnsupportedTypeError",
    "SchemaFileError",
]
