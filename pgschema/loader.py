# ============================================================================
# SCHEMA FILE LOADER
# ============================================================================
# STATUS: Service - YAML schema declarations
# PURPOSE: Build a SchemaRegistry from a YAML document
# CREATED: 18 OCT 2026
# EXPORTS: load_schema, load_schema_file
# DEPENDENCIES: pyyaml, pydantic
# ============================================================================
"""
Schema File Loader

Loads schema declarations from YAML files. Document layout:

    extensions: [uuid-ossp]          # or a single name
    enums:
      level: [high, med, low]
    tables:
      tests:
        type_name: Test
        columns:
          id: {type: uuid, default_sql: uuid_generate_v4()}
          the_level: {type: level, nullable: true, default: high}
          label: varchar(64)            # shorthand: type only
        primary_keys: [id]
        foreign_keys:
          - table: other
            columns: [{local: id, foreign: id}]
            on_delete: cascade
        constraints:
          label_non_empty: char_length(label) > 0

Column types are catalog specs (see lookup_type) or names declared
under `enums`. Each enum is built once and shared by every column that
names it.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from pgschema.errors import SchemaFileError, UnsupportedTypeError
from pgschema.logging import get_logger, log_context, ComponentType
from pgschema.models.column import ColumnDefault
from pgschema.models.table import Table
from pgschema.models.value_types import Enum, EnumType, lookup_type
from pgschema.schema.registry import SchemaRegistry

logger = get_logger(__name__, ComponentType.LOADER)


def _column_spec(
    column_name: str,
    spec: Union[str, Dict[str, Any]],
    enums: Dict[str, EnumType],
) -> Dict[str, Any]:
    """Translate a YAML column entry into Column fields."""
    if isinstance(spec, str):
        spec = {"type": spec}
    else:
        spec = dict(spec)

    type_spec = spec.get("type")
    if not isinstance(type_spec, str):
        raise ValueError(f'Column "{column_name}" needs a type')
    spec["type"] = enums[type_spec] if type_spec in enums else lookup_type(type_spec)

    if "default_sql" in spec:
        if "default" in spec:
            raise ValueError(f'Column "{column_name}" has both default and default_sql')
        spec["default"] = ColumnDefault.sql(str(spec.pop("default_sql")))
    elif "default" in spec:
        spec["default"] = ColumnDefault.literal(spec["default"])

    return spec


def load_schema(
    data: Dict[str, Any],
    registry: Optional[SchemaRegistry] = None,
    source: str = "<schema>",
) -> SchemaRegistry:
    """
    Register the extensions and tables of a schema document.

    Args:
        data: Parsed schema document
        registry: Registry to add to (a new one if omitted)
        source: Name used in error messages

    Returns:
        The registry

    Raises:
        SchemaFileError for malformed documents
        DuplicateTableError / ValidationError from registration
    """
    if not isinstance(data, dict):
        raise SchemaFileError(source, "schema document must be a mapping")

    registry = registry if registry is not None else SchemaRegistry()

    with log_context(operation="load_schema", extra={"source": source}):
        extensions = data.get("extensions") or []
        if isinstance(extensions, str):
            extensions = [extensions]
        if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
            raise SchemaFileError(source, "extensions must be a name or a list of names")

        try:
            enums = {
                name: Enum(name, values)
                for name, values in (data.get("enums") or {}).items()
            }

            tables = []
            for table_name, table_data in (data.get("tables") or {}).items():
                table_data = dict(table_data or {})
                table_data["name"] = table_name
                table_data["columns"] = {
                    column_name: _column_spec(column_name, spec, enums)
                    for column_name, spec in (table_data.get("columns") or {}).items()
                }
                tables.append(Table(**table_data))
        except (PydanticValidationError, UnsupportedTypeError, ValueError, TypeError, AttributeError) as e:
            raise SchemaFileError(source, str(e)) from e

        for extension in extensions:
            registry.add_extension(extension)
        registry.add_tables(tables)

    logger.info(f"Loaded {len(tables)} tables from {source}")
    return registry


def load_schema_file(
    path: Union[str, Path],
    registry: Optional[SchemaRegistry] = None,
) -> SchemaRegistry:
    """
    Load a schema from a YAML file.

    Args:
        path: Path to YAML file
        registry: Registry to add to (a new one if omitted)

    Returns:
        The registry
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SchemaFileError(path, f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise SchemaFileError(path, f"invalid YAML: {e}") from e

    return load_schema(data, registry=registry, source=str(path))


__all__ = ["load_schema", "load_schema_file"]
