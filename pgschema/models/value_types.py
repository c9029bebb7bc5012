# ============================================================================
# VALUE TYPE CATALOG
# ============================================================================
# STATUS: Core model - Closed set of column value types
# PURPOSE: Scalar, character and enumeration types with SQL/TS renderings
# CREATED: 18 OCT 2026
# EXPORTS: ScalarType, CharacterType, EnumType, ValueType, catalog constructors
# DEPENDENCIES: pydantic
# ============================================================================
"""
Value Type Catalog

Every column carries one ValueType. The set of variants is closed and
tagged by ValueKind:

    ScalarType     - fixed types (INTEGER, TEXT, UUID, ...)
    CharacterType  - CHAR(n) / VARCHAR(n), carrying a length
    EnumType       - caller-declared enumeration (CREATE TYPE ... AS ENUM)

Each variant knows its SQL and TypeScript names. Rendering dispatches on
`kind` through lookup tables; an unknown kind raises UnsupportedTypeError.

Usage:
    from pgschema.models.value_types import Integer, VarChar, Enum

    level = Enum("level", ["high", "med", "low"])   # build once, reuse
    VarChar(255).sql_name                            # "VARCHAR(255)"
    level.typescript_name                            # "Level"
"""

import re
from typing import Annotated, Dict, Iterable, List, Literal, NamedTuple, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from pgschema.contracts import ValueKind
from pgschema.errors import UnsupportedTypeError
from pgschema.naming import to_pascal_case


# ============================================================================
# TYPE NAME TABLES
# ============================================================================

class TypeNames(NamedTuple):
    sql: str
    typescript: str


SCALAR_TYPE_NAMES: Dict[ValueKind, TypeNames] = {
    ValueKind.SMALLINT: TypeNames("SMALLINT", "number"),
    ValueKind.INTEGER: TypeNames("INTEGER", "number"),
    ValueKind.BIGINT: TypeNames("BIGINT", "bigint"),
    ValueKind.REAL: TypeNames("REAL", "number"),
    ValueKind.DOUBLE: TypeNames("DOUBLE PRECISION", "number"),
    ValueKind.SMALLSERIAL: TypeNames("SMALLSERIAL", "number"),
    ValueKind.SERIAL: TypeNames("SERIAL", "number"),
    ValueKind.BIGSERIAL: TypeNames("BIGSERIAL", "bigint"),
    ValueKind.BOOLEAN: TypeNames("BOOLEAN", "boolean"),
    ValueKind.TIMESTAMP: TypeNames("TIMESTAMP WITHOUT TIME ZONE", "string"),
    ValueKind.TEXT: TypeNames("TEXT", "string"),
    ValueKind.UUID: TypeNames("UUID", "string"),
}

CHARACTER_TYPE_NAMES: Dict[ValueKind, TypeNames] = {
    ValueKind.CHAR: TypeNames("CHAR", "string"),
    ValueKind.VARCHAR: TypeNames("VARCHAR", "string"),
}


def _names_for(kind: ValueKind, table: Dict[ValueKind, TypeNames]) -> TypeNames:
    names = table.get(kind)
    if names is None:
        raise UnsupportedTypeError(kind)
    return names


# ============================================================================
# VARIANTS
# ============================================================================

ScalarKind = Literal[
    ValueKind.SMALLINT,
    ValueKind.INTEGER,
    ValueKind.BIGINT,
    ValueKind.REAL,
    ValueKind.DOUBLE,
    ValueKind.SMALLSERIAL,
    ValueKind.SERIAL,
    ValueKind.BIGSERIAL,
    ValueKind.BOOLEAN,
    ValueKind.TIMESTAMP,
    ValueKind.TEXT,
    ValueKind.UUID,
]


class ScalarType(BaseModel):
    """Fixed scalar type. Equal to any other scalar of the same kind."""
    kind: ScalarKind

    model_config = {"frozen": True}

    @property
    def sql_name(self) -> str:
        return _names_for(self.kind, SCALAR_TYPE_NAMES).sql

    @property
    def typescript_name(self) -> str:
        return _names_for(self.kind, SCALAR_TYPE_NAMES).typescript

    def __str__(self) -> str:
        return self.sql_name


class CharacterType(BaseModel):
    """CHAR(n) or VARCHAR(n). Equal when kind and length match."""
    kind: Literal[ValueKind.CHAR, ValueKind.VARCHAR]
    length: int = Field(..., ge=1, le=10485760)

    model_config = {"frozen": True}

    @property
    def sql_name(self) -> str:
        return f"{_names_for(self.kind, CHARACTER_TYPE_NAMES).sql}({self.length})"

    @property
    def typescript_name(self) -> str:
        return _names_for(self.kind, CHARACTER_TYPE_NAMES).typescript

    def __str__(self) -> str:
        return self.sql_name


class EnumType(BaseModel):
    """
    Caller-declared enumeration.

    Identity is the enum name: two EnumType values with the same name are
    equal, whatever their values. Build one with Enum() and reuse it on
    every column that shares it.
    """
    kind: Literal[ValueKind.USER_DEFINED] = ValueKind.USER_DEFINED
    name: str = Field(..., min_length=1, max_length=63)
    values: Tuple[str, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("values", mode="before")
    @classmethod
    def dedupe_values(cls, v):
        """Keep declared order, drop repeats."""
        if isinstance(v, str):
            v = [v]
        return tuple(dict.fromkeys(v))

    @property
    def sql_name(self) -> str:
        return self.name

    @property
    def typescript_name(self) -> str:
        return to_pascal_case(self.name)

    @property
    def member_names(self) -> Tuple[str, ...]:
        """TypeScript enum member name per value, in declared order."""
        return tuple(to_pascal_case(v) for v in self.values)

    def member_collisions(self) -> Dict[str, List[str]]:
        """Member name -> values, for member names shared by several values."""
        by_member: Dict[str, List[str]] = {}
        for value, member in zip(self.values, self.member_names):
            by_member.setdefault(member, []).append(value)
        return {m: values for m, values in by_member.items() if len(values) > 1}

    def __eq__(self, other) -> bool:
        if not isinstance(other, EnumType):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((self.kind, self.name))

    def __str__(self) -> str:
        return self.name


ValueType = Annotated[
    Union[ScalarType, CharacterType, EnumType],
    Field(discriminator="kind"),
]


# ============================================================================
# CATALOG
# ============================================================================

SmallInt = ScalarType(kind=ValueKind.SMALLINT)
Integer = ScalarType(kind=ValueKind.INTEGER)
BigInt = ScalarType(kind=ValueKind.BIGINT)
Real = ScalarType(kind=ValueKind.REAL)
Double = ScalarType(kind=ValueKind.DOUBLE)
SmallSerial = ScalarType(kind=ValueKind.SMALLSERIAL)
Serial = ScalarType(kind=ValueKind.SERIAL)
BigSerial = ScalarType(kind=ValueKind.BIGSERIAL)
Boolean = ScalarType(kind=ValueKind.BOOLEAN)
Timestamp = ScalarType(kind=ValueKind.TIMESTAMP)
Text = ScalarType(kind=ValueKind.TEXT)
UUID = ScalarType(kind=ValueKind.UUID)


def VarChar(length: int) -> CharacterType:
    """Variable-length character type, VARCHAR(length)."""
    return CharacterType(kind=ValueKind.VARCHAR, length=length)


def Char(length: int) -> CharacterType:
    """Fixed-length character type, CHAR(length)."""
    return CharacterType(kind=ValueKind.CHAR, length=length)


def Enum(name: str, values: Iterable[str]) -> EnumType:
    """
    Declare an enumeration.

    Call once per logical enum and reuse the result across columns and
    tables; the generators emit one declaration per enum name.
    """
    return EnumType(name=name, values=tuple(values))


# ============================================================================
# TEXTUAL LOOKUP
# ============================================================================

_ALIASES: Dict[str, ScalarType] = {
    "smallint": SmallInt,
    "int2": SmallInt,
    "integer": Integer,
    "int": Integer,
    "int4": Integer,
    "bigint": BigInt,
    "int8": BigInt,
    "real": Real,
    "float4": Real,
    "double": Double,
    "double precision": Double,
    "float8": Double,
    "smallserial": SmallSerial,
    "serial": Serial,
    "bigserial": BigSerial,
    "boolean": Boolean,
    "bool": Boolean,
    "timestamp": Timestamp,
    "timestamp without time zone": Timestamp,
    "text": Text,
    "uuid": UUID,
}

_CHARACTER_SPEC = re.compile(r"^(char|character|varchar|character varying)\s*\(\s*(\d+)\s*\)$")


def lookup_type(spec: str) -> Union[ScalarType, CharacterType]:
    """
    Resolve a textual type spec to a catalog value.

    Args:
        spec: e.g. "integer", "uuid", "varchar(255)", "char(3)"

    Returns:
        ScalarType or CharacterType

    Raises:
        UnsupportedTypeError if the spec names no catalog type
    """
    normalized = " ".join(spec.strip().lower().split())

    scalar = _ALIASES.get(normalized)
    if scalar is not None:
        return scalar

    match = _CHARACTER_SPEC.match(normalized)
    if match:
        base, length = match.groups()
        if base in ("char", "character"):
            return Char(int(length))
        return VarChar(int(length))

    raise UnsupportedTypeError(spec)


__all__ = [
    "TypeNames",
    "SCALAR_TYPE_NAMES",
    "CHARACTER_TYPE_NAMES",
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
]
