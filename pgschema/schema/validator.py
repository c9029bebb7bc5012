# ============================================================================
# SCHEMA VALIDATOR
# ============================================================================
# STATUS: Core - Structural and referential checks
# PURPOSE: Collect every problem in a table (or a whole schema) in one pass
# CREATED: 18 OCT 2026
# EXPORTS: SchemaValidator
# ============================================================================
"""
Schema Validator

Checks, per table, in order:
    1. No duplicate column names
    2. At least one primary-key column, each naming an existing column
    3. Foreign keys: local column exists, is used by one foreign key only,
       target table exists elsewhere and defines the referenced column,
       and both columns have the same value type
    4. TypeScript output compiles: enum values map to distinct member
       names, and no enum or record type reuses a name already declared
       by this table or any other

Whole-schema validation also rejects repeated table names.

Problems are accumulated, never short-circuited across checks, and
returned as ValidationIssue lists; the registry raises them together.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from pgschema.contracts import IssueCode
from pgschema.errors import ValidationIssue
from pgschema.logging import get_logger, ComponentType
from pgschema.models.table import Table

logger = get_logger(__name__, ComponentType.VALIDATOR)


class SchemaValidator:
    """
    Validates tables against a collection of known tables.

    Foreign keys are resolved by name against `tables` at call time.
    """

    def __init__(self, tables: Sequence[Table]):
        self.tables = tables

    def find_table(self, name: str, exclude: Optional[str] = None) -> Optional[Table]:
        """First table named `name`, skipping tables named `exclude`."""
        for table in self.tables:
            if table.name == name and table.name != exclude:
                return table
        return None

    def _typescript_names(self, exclude: str) -> Dict[str, Tuple[str, str]]:
        """
        TypeScript name -> (owner key, description) for every record and
        enum type declared by tables other than `exclude`.

        An enum shared by several tables has one owner key, so reusing it
        is not a collision.
        """
        declared: Dict[str, Tuple[str, str]] = {}
        for other in self.tables:
            if other.name == exclude:
                continue
            declared.setdefault(
                other.type_name,
                (f"table:{other.name}", f'type of table "{other.name}"'),
            )
            for enum_type in other.enum_types:
                declared.setdefault(
                    enum_type.typescript_name,
                    (f"enum:{enum_type.name}", f'enum "{enum_type.name}"'),
                )
        return declared

    # =========================================================================
    # SINGLE TABLE
    # =========================================================================

    def validate_table(self, table: Table) -> List[ValidationIssue]:
        """
        Validate one table.

        Returns:
            List of issues (empty if valid)
        """
        issues: List[ValidationIssue] = []

        def report(code: IssueCode, message: str) -> None:
            issues.append(ValidationIssue(table=table.name, code=code, message=message))

        # Duplicate columns
        seen_columns = set()
        for name in table.column_names:
            if name in seen_columns:
                report(IssueCode.DUPLICATE_COLUMN, f'Duplicate column "{name}" in table "{table.name}"')
            seen_columns.add(name)

        # Primary key
        if not table.primary_keys:
            report(IssueCode.MISSING_PRIMARY_KEY, f'Table "{table.name}" must have a primary key')

        for key in table.primary_keys:
            if not table.has_column(key):
                report(
                    IssueCode.UNKNOWN_PRIMARY_KEY_COLUMN,
                    f'Table "{table.name}" is missing column "{key}" for primary key constraint',
                )

        # Foreign keys
        seen_fk_columns = set()
        for fk in table.foreign_keys:
            for ref in fk.columns:
                local_col = table.column(ref.local)
                if local_col is None:
                    report(
                        IssueCode.UNKNOWN_FOREIGN_KEY_COLUMN,
                        f'Local column "{ref.local}" not found for foreign key '
                        f'{fk.describe(table.name)}',
                    )
                    continue

                if ref.local in seen_fk_columns:
                    report(
                        IssueCode.DUPLICATE_FOREIGN_KEY,
                        f'Duplicate foreign key on column "{ref.local}" in table "{table.name}"',
                    )
                    continue
                seen_fk_columns.add(ref.local)

                foreign_table = self.find_table(fk.table, exclude=table.name)
                if foreign_table is None:
                    report(
                        IssueCode.DANGLING_FOREIGN_KEY,
                        f'No foreign table "{fk.table}" exists for foreign key '
                        f'{fk.describe(table.name)}',
                    )
                    continue

                foreign_col = foreign_table.column(ref.foreign)
                if foreign_col is None:
                    report(
                        IssueCode.DANGLING_FOREIGN_KEY,
                        f'Foreign table "{fk.table}" has no column "{ref.foreign}" '
                        f'for foreign key {fk.describe(table.name)}',
                    )
                    continue

                if foreign_col.type != local_col.type:
                    report(
                        IssueCode.FOREIGN_KEY_TYPE_MISMATCH,
                        f'Column type mismatch on foreign key "{ref.local}" in table '
                        f'"{table.name}": {local_col.type} does not match '
                        f'{fk.table}.{ref.foreign} {foreign_col.type}',
                    )

        # TypeScript names
        for enum_type in table.enum_types:
            for member, values in enum_type.member_collisions().items():
                quoted = ", ".join(f'"{v}"' for v in values)
                report(
                    IssueCode.ENUM_MEMBER_COLLISION,
                    f'Enum "{enum_type.name}" values {quoted} share TypeScript member "{member}"',
                )

        declared = self._typescript_names(exclude=table.name)
        own = [(table.type_name, f"table:{table.name}", f'type of table "{table.name}"')]
        own.extend(
            (e.typescript_name, f"enum:{e.name}", f'enum "{e.name}"') for e in table.enum_types
        )
        for ts_name, owner, description in own:
            existing = declared.setdefault(ts_name, (owner, description))
            if existing[0] != owner:
                report(
                    IssueCode.TYPE_NAME_COLLISION,
                    f'TypeScript name "{ts_name}" of {description} collides with {existing[1]}',
                )

        if issues:
            logger.debug(f"Table {table.name}: {len(issues)} validation issue(s)")
        return issues

    # =========================================================================
    # WHOLE SCHEMA
    # =========================================================================

    def validate_all(self) -> List[ValidationIssue]:
        """
        Validate every table plus cross-table name uniqueness.

        Returns:
            List of issues across all tables (empty if valid)
        """
        issues: List[ValidationIssue] = []
        seen_names = set()

        for table in self.tables:
            if table.name in seen_names:
                issues.append(ValidationIssue(
                    table=table.name,
                    code=IssueCode.DUPLICATE_TABLE,
                    message=f'Table "{table.name}" already exists',
                ))
            seen_names.add(table.name)

            issues.extend(self.validate_table(table))

        return issues


__all__ = ["SchemaValidator"]
