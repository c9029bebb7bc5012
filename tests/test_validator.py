# ============================================================================
# SCHEMA VALIDATOR TESTS
# ============================================================================
# STATUS: Tests - Structural and referential checks
# PURPOSE: Verify every issue code and that problems are accumulated
# CREATED: 18 OCT 2026
# ============================================================================
"""
Schema Validator Tests

- One test per issue code
- Accumulation of several problems in one table
- Foreign key resolution against other tables only
- Whole-schema duplicate table names

Run with:
    pytest tests/test_validator.py -v
"""

import pytest

from pgschema.contracts import IssueCode
from pgschema.models.column import Column
from pgschema.models.table import Table
from pgschema.models.value_types import Enum, Integer, Text, UUID, VarChar
from pgschema.schema.validator import SchemaValidator


@pytest.fixture
def users():
    return Table(
        name="users",
        type_name="User",
        columns={"id": {"type": UUID}, "name": {"type": Text}},
        primary_keys=["id"],
    )


def orders(user_id_type=UUID, **overrides):
    data = dict(
        name="orders",
        type_name="Order",
        columns={"id": {"type": UUID}, "user_id": {"type": user_id_type}},
        primary_keys=["id"],
        foreign_keys=[{"table": "users", "columns": [{"local": "user_id", "foreign": "id"}]}],
    )
    data.update(overrides)
    return Table(**data)


def codes(issues):
    return [i.code for i in issues]


# ============================================================================
# VALID TABLES
# ============================================================================


class TestValidTables:
    def test_standalone_table(self, users):
        assert SchemaValidator([]).validate_table(users) == []

    def test_resolved_foreign_key(self, users):
        assert SchemaValidator([users]).validate_table(orders()) == []

    def test_matching_enum_types(self):
        level = Enum("level", ["high", "low"])
        levels = Table(
            name="levels", type_name="LevelRow",
            columns={"level": {"type": level}}, primary_keys="level",
        )
        tasks = Table(
            name="tasks", type_name="Task",
            columns={"id": {"type": Integer}, "level": {"type": Enum("level", ["high"])}},
            primary_keys="id",
            foreign_keys=[{"table": "levels", "columns": [{"local": "level", "foreign": "level"}]}],
        )
        assert SchemaValidator([levels]).validate_table(tasks) == []


# ============================================================================
# ISSUE CODES
# ============================================================================


class TestIssueCodes:
    def test_duplicate_column(self):
        table = Table(
            name="users", type_name="User",
            columns=[Column(name="id", type=UUID), Column(name="id", type=UUID)],
            primary_keys=["id"],
        )
        issues = SchemaValidator([]).validate_table(table)
        assert codes(issues) == [IssueCode.DUPLICATE_COLUMN]
        assert issues[0].message == 'Duplicate column "id" in table "users"'

    def test_missing_primary_key(self):
        table = Table(name="users", type_name="User", columns={"id": {"type": UUID}})
        issues = SchemaValidator([]).validate_table(table)
        assert codes(issues) == [IssueCode.MISSING_PRIMARY_KEY]
        assert "users" in issues[0].message

    def test_unknown_primary_key_column(self):
        table = Table(
            name="users", type_name="User",
            columns={"id": {"type": UUID}}, primary_keys=["id", "email"],
        )
        issues = SchemaValidator([]).validate_table(table)
        assert codes(issues) == [IssueCode.UNKNOWN_PRIMARY_KEY_COLUMN]
        assert '"email"' in issues[0].message

    def test_unknown_foreign_key_column(self, users):
        table = orders(columns={"id": {"type": UUID}})
        issues = SchemaValidator([users]).validate_table(table)
        assert codes(issues) == [IssueCode.UNKNOWN_FOREIGN_KEY_COLUMN]
        assert "orders(user_id) -> users(id)" in issues[0].message

    def test_duplicate_foreign_key(self, users):
        fk = {"table": "users", "columns": [{"local": "user_id", "foreign": "id"}]}
        table = orders(foreign_keys=[fk, fk])
        issues = SchemaValidator([users]).validate_table(table)
        assert codes(issues) == [IssueCode.DUPLICATE_FOREIGN_KEY]

    def test_missing_foreign_table(self):
        issues = SchemaValidator([]).validate_table(orders())
        assert codes(issues) == [IssueCode.DANGLING_FOREIGN_KEY]
        assert issues[0].message.startswith('No foreign table "users" exists')

    def test_missing_foreign_column(self, users):
        table = orders(foreign_keys=[
            {"table": "users", "columns": [{"local": "user_id", "foreign": "uuid"}]},
        ])
        issues = SchemaValidator([users]).validate_table(table)
        assert codes(issues) == [IssueCode.DANGLING_FOREIGN_KEY]
        assert 'has no column "uuid"' in issues[0].message

    def test_type_mismatch(self, users):
        issues = SchemaValidator([users]).validate_table(orders(user_id_type=Integer))
        assert codes(issues) == [IssueCode.FOREIGN_KEY_TYPE_MISMATCH]
        assert issues[0].message == (
            'Column type mismatch on foreign key "user_id" in table "orders": '
            "INTEGER does not match users.id UUID"
        )

    def test_varchar_length_mismatch(self):
        parents = Table(
            name="parents", type_name="Parent",
            columns={"code": {"type": VarChar(8)}}, primary_keys="code",
        )
        children = Table(
            name="children", type_name="Child",
            columns={"code": {"type": VarChar(16)}}, primary_keys="code",
            foreign_keys=[{"table": "parents", "columns": [{"local": "code", "foreign": "code"}]}],
        )
        issues = SchemaValidator([parents]).validate_table(children)
        assert codes(issues) == [IssueCode.FOREIGN_KEY_TYPE_MISMATCH]

    def test_self_reference_is_dangling(self):
        table = Table(
            name="nodes", type_name="Node",
            columns={"id": {"type": Integer}, "parent_id": {"type": Integer}},
            primary_keys="id",
            foreign_keys=[{"table": "nodes", "columns": [{"local": "parent_id", "foreign": "id"}]}],
        )
        issues = SchemaValidator([table]).validate_table(table)
        assert codes(issues) == [IssueCode.DANGLING_FOREIGN_KEY]


# ============================================================================
# TYPESCRIPT NAMES
# ============================================================================


class TestTypeScriptNames:
    def test_enum_member_collision(self):
        table = Table(
            name="tasks", type_name="Task",
            columns={
                "id": {"type": UUID},
                "status": {"type": Enum("status", ["in-progress", "in_progress"])},
            },
            primary_keys="id",
        )
        issues = SchemaValidator([]).validate_table(table)
        assert codes(issues) == [IssueCode.ENUM_MEMBER_COLLISION]
        assert issues[0].message == (
            'Enum "status" values "in-progress", "in_progress" share TypeScript member "InProgress"'
        )

    def test_enum_named_like_own_record_type(self):
        table = Table(
            name="users", type_name="User",
            columns={"id": {"type": UUID}, "role": {"type": Enum("user", ["admin", "guest"])}},
            primary_keys="id",
        )
        issues = SchemaValidator([]).validate_table(table)
        assert codes(issues) == [IssueCode.TYPE_NAME_COLLISION]
        assert issues[0].message == (
            'TypeScript name "User" of enum "user" collides with type of table "users"'
        )

    def test_enum_named_like_other_record_type(self, users):
        tasks = Table(
            name="tasks", type_name="Task",
            columns={"id": {"type": UUID}, "owner": {"type": Enum("user", ["admin"])}},
            primary_keys="id",
        )
        issues = SchemaValidator([users]).validate_table(tasks)
        assert codes(issues) == [IssueCode.TYPE_NAME_COLLISION]
        assert 'collides with type of table "users"' in issues[0].message

    def test_record_type_reused(self, users):
        people = Table(
            name="people", type_name="User",
            columns={"id": {"type": UUID}}, primary_keys="id",
        )
        issues = SchemaValidator([users]).validate_table(people)
        assert codes(issues) == [IssueCode.TYPE_NAME_COLLISION]
        assert issues[0].message == (
            'TypeScript name "User" of type of table "people" collides with type of table "users"'
        )

    def test_record_type_named_like_other_enum(self):
        tasks = Table(
            name="tasks", type_name="Task",
            columns={"id": {"type": UUID}, "lvl": {"type": Enum("level", ["high"])}},
            primary_keys="id",
        )
        levels = Table(
            name="levels", type_name="Level",
            columns={"id": {"type": UUID}}, primary_keys="id",
        )
        issues = SchemaValidator([tasks]).validate_table(levels)
        assert codes(issues) == [IssueCode.TYPE_NAME_COLLISION]
        assert 'collides with enum "level"' in issues[0].message

    def test_shared_enum_is_not_a_collision(self):
        level = Enum("level", ["high", "low"])
        users = Table(
            name="users", type_name="User",
            columns={"id": {"type": UUID}, "lvl": {"type": level}}, primary_keys="id",
        )
        tasks = Table(
            name="tasks", type_name="Task",
            columns={"id": {"type": UUID}, "lvl": {"type": level}}, primary_keys="id",
        )
        assert SchemaValidator([users]).validate_table(tasks) == []


# ============================================================================
# ACCUMULATION
# ============================================================================


class TestAccumulation:
    def test_all_problems_reported(self):
        table = Table(
            name="broken", type_name="Broken",
            columns=[
                Column(name="a", type=Text),
                Column(name="a", type=Text),
                Column(name="ref", type=Integer),
            ],
            primary_keys=["missing"],
            foreign_keys=[
                {"table": "nowhere", "columns": [{"local": "ref", "foreign": "id"}]},
                {"table": "nowhere", "columns": [{"local": "ghost", "foreign": "id"}]},
            ],
        )
        issues = SchemaValidator([]).validate_table(table)
        assert codes(issues) == [
            IssueCode.DUPLICATE_COLUMN,
            IssueCode.UNKNOWN_PRIMARY_KEY_COLUMN,
            IssueCode.DANGLING_FOREIGN_KEY,
            IssueCode.UNKNOWN_FOREIGN_KEY_COLUMN,
        ]
        assert all(i.table == "broken" for i in issues)

    def test_every_pair_of_composite_key_checked(self):
        parents = Table(
            name="parents", type_name="Parent",
            columns={"a": {"type": Integer}, "b": {"type": Text}},
            primary_keys=["a", "b"],
        )
        children = Table(
            name="children", type_name="Child",
            columns={"id": {"type": Integer}, "pa": {"type": Text}, "pb": {"type": Integer}},
            primary_keys="id",
            foreign_keys=[{"table": "parents", "columns": [
                {"local": "pa", "foreign": "a"},
                {"local": "pb", "foreign": "b"},
            ]}],
        )
        issues = SchemaValidator([parents]).validate_table(children)
        assert codes(issues) == [IssueCode.FOREIGN_KEY_TYPE_MISMATCH] * 2


# ============================================================================
# WHOLE SCHEMA
# ============================================================================


class TestValidateAll:
    def test_valid_schema(self, users):
        assert SchemaValidator([users, orders()]).validate_all() == []

    def test_duplicate_table_names(self, users):
        issues = SchemaValidator([users, users]).validate_all()
        assert codes(issues) == [IssueCode.DUPLICATE_TABLE]

    def test_issues_from_every_table(self):
        lonely = Table(name="lonely", type_name="Lonely", columns={"id": {"type": UUID}})
        issues = SchemaValidator([lonely, orders()]).validate_all()
        assert [(i.table, i.code) for i in issues] == [
            ("lonely", IssueCode.MISSING_PRIMARY_KEY),
            ("orders", IssueCode.DANGLING_FOREIGN_KEY),
        ]

    def test_find_table(self, users):
        validator = SchemaValidator([users])
        assert validator.find_table("users") is users
        assert validator.find_table("users", exclude="users") is None
