# ============================================================================
# TABLE MODEL
# ============================================================================
# STATUS: Core model - Table declaration with keys and constraints
# PURPOSE: Ordered columns, primary key, foreign keys, check constraints
# CREATED: 18 OCT 2026
# EXPORTS: Table, ForeignKey, ColumnReference, CheckConstraint
# DEPENDENCIES: pydantic
# ============================================================================
"""
Table Model

A Table is plain data. It never points at the registry or at other
tables: foreign keys name their target table and are resolved by the
validator, so tables can be declared in any order.

Every container on a Table is a tuple, so a table cannot change after
it is declared; use model_copy(update=...) to derive a new one.

Columns may be given as a list of Column or as a mapping of
column name -> column spec; the mapping form keeps insertion order.
A spec is a dict of Column fields or a bare value type:

    Table(
        name="tests",
        type_name="Test",
        columns={
            "my_column": UUID,
            "the_level": {"type": level, "nullable": True},
        },
        primary_keys=["my_column"],
        constraints={"level_set": "the_level IS NOT NULL"},
    )
"""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from pgschema.contracts import ReferentialAction
from pgschema.models.column import Column
from pgschema.models.value_types import CharacterType, EnumType, ScalarType


class ColumnReference(BaseModel):
    """One local -> foreign column pair of a foreign key."""
    local: str = Field(..., min_length=1)
    foreign: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class ForeignKey(BaseModel):
    """
    Referential constraint to another table, by name.

    Not an index. Missing actions render as NO ACTION.
    """
    table: str = Field(..., min_length=1, description="Referenced table name")
    columns: Tuple[ColumnReference, ...] = Field(..., min_length=1)
    on_delete: Optional[ReferentialAction] = None
    on_update: Optional[ReferentialAction] = None

    model_config = {"frozen": True}

    @field_validator("on_delete", "on_update", mode="before")
    @classmethod
    def normalize_action(cls, v):
        """Accept "cascade", "set_null", "SET NULL", ..."""
        if isinstance(v, str):
            return " ".join(v.replace("_", " ").upper().split())
        return v

    @property
    def local_columns(self) -> List[str]:
        return [ref.local for ref in self.columns]

    @property
    def foreign_columns(self) -> List[str]:
        return [ref.foreign for ref in self.columns]

    @property
    def delete_action(self) -> ReferentialAction:
        return self.on_delete or ReferentialAction.NO_ACTION

    @property
    def update_action(self) -> ReferentialAction:
        return self.on_update or ReferentialAction.NO_ACTION

    def describe(self, table_name: str) -> str:
        """e.g. orders(user_id) -> users(id)"""
        return (
            f"{table_name}({', '.join(self.local_columns)}) -> "
            f"{self.table}({', '.join(self.foreign_columns)})"
        )


class CheckConstraint(BaseModel):
    """Named CHECK expression, emitted verbatim."""
    name: str = Field(..., min_length=1, max_length=63)
    expression: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class Table(BaseModel):
    """
    Table declaration.

    Column order is rendering order. Maps to one CREATE TABLE statement
    and one TypeScript record type named `type_name`.
    """
    name: str = Field(..., min_length=1, max_length=63, description="SQL table name")
    type_name: str = Field(
        ...,
        pattern=r"^[A-Za-z_$][A-Za-z0-9_$]*$",
        description="TypeScript type name",
    )
    columns: Tuple[Column, ...] = Field(default=())
    primary_keys: Tuple[str, ...] = Field(default=())
    foreign_keys: Tuple[ForeignKey, ...] = Field(default=())
    constraints: Tuple[CheckConstraint, ...] = Field(
        default=(),
        description="Check constraints; accepts a name -> expression mapping",
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def columns_from_mapping(cls, data: Any) -> Any:
        """Convert {name: spec} columns into an ordered list of Column."""
        if not isinstance(data, dict):
            return data
        columns = data.get("columns")
        if isinstance(columns, dict):
            converted = []
            for column_name, spec in columns.items():
                if isinstance(spec, Column):
                    converted.append(spec.model_copy(update={"name": column_name}))
                elif isinstance(spec, (ScalarType, CharacterType, EnumType)):
                    converted.append({"name": column_name, "type": spec})
                elif isinstance(spec, dict):
                    converted.append({**spec, "name": column_name})
                else:
                    # Left for Column validation to reject
                    converted.append(spec)
            data = {**data, "columns": converted}
        return data

    @field_validator("primary_keys", mode="before")
    @classmethod
    def handle_string_input(cls, v):
        """Allow single string as shorthand for single-column key."""
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("constraints", mode="before")
    @classmethod
    def constraints_from_mapping(cls, v):
        """{name: expression} in declared order."""
        if isinstance(v, dict):
            return [{"name": name, "expression": expression} for name, expression in v.items()]
        return v

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def column(self, name: str) -> Optional[Column]:
        """First column with this name, or None."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def has_column(self, name: str) -> bool:
        return self.column(name) is not None

    @property
    def enum_types(self) -> List[EnumType]:
        """Distinct enum types used by the columns, in column order."""
        seen = {}
        for col in self.columns:
            if col.is_custom_type and col.type.name not in seen:
                seen[col.type.name] = col.type
        return list(seen.values())


__all__ = ["Table", "ForeignKey", "ColumnReference", "CheckConstraint"]
