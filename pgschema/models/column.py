# ============================================================================
# COLUMN MODEL
# ============================================================================
# STATUS: Core model - Table column declaration
# PURPOSE: Column name, value type, nullability and default
# CREATED: 18 OCT 2026
# EXPORTS: Column, ColumnDefault
# DEPENDENCIES: pydantic
# ============================================================================
"""
Column Model

A Column is immutable once declared. Its default is either a literal
value (strings are quoted when rendered) or a raw SQL expression
(emitted verbatim):

    Column(name="id", type=UUID, default=ColumnDefault.sql("uuid_generate_v4()"))
    Column(name="status", type=Text, default=ColumnDefault.literal("active"))
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from pgschema.contracts import DefaultKind
from pgschema.models.value_types import ValueType


class ColumnDefault(BaseModel):
    """Column default: literal value or raw SQL expression."""
    kind: DefaultKind = Field(default=DefaultKind.VALUE)
    value: Union[bool, int, float, str]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def sql_must_be_text(self) -> "ColumnDefault":
        if self.kind == DefaultKind.SQL and not isinstance(self.value, str):
            raise ValueError("SQL defaults must be given as expression text")
        return self

    @classmethod
    def literal(cls, value: Union[bool, int, float, str]) -> "ColumnDefault":
        """Literal default (strings quoted on render)."""
        return cls(kind=DefaultKind.VALUE, value=value)

    @classmethod
    def sql(cls, expression: str) -> "ColumnDefault":
        """Raw SQL default, e.g. "now()" or "uuid_generate_v4()"."""
        return cls(kind=DefaultKind.SQL, value=expression)

    @property
    def is_sql(self) -> bool:
        return self.kind == DefaultKind.SQL


class Column(BaseModel):
    """
    A single table column.

    Maps to: one line of CREATE TABLE and one field of the record type.
    """
    name: str = Field(..., min_length=1, max_length=63, description="SQL column name")
    type: ValueType
    nullable: bool = Field(default=False)
    default: Optional[ColumnDefault] = Field(default=None)

    model_config = {"frozen": True}

    @property
    def is_custom_type(self) -> bool:
        """True for enumeration-typed columns."""
        return self.type.kind.is_user_defined()


__all__ = ["Column", "ColumnDefault"]
