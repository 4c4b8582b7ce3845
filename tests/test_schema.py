import pytest

from svckit.schema import ForeignKeyInfo, SchemaError, TableInfo, extract_table_info

USERS_SQL = """\
-- users table
CREATE TYPE user_status AS ENUM ('active', 'inactive');

CREATE TABLE IF NOT EXISTS users (
    id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
    version INTEGER NOT NULL DEFAULT 0,
    username VARCHAR(255) NOT NULL UNIQUE,
    nickname TEXT,
    "order" INTEGER NOT NULL,
    status user_status NOT NULL DEFAULT 'active',
    province_id UUID NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT now(),
    PRIMARY KEY (id),
    CONSTRAINT users_email_key UNIQUE (username)
);

ALTER TABLE users ADD CONSTRAINT fk_users_province FOREIGN KEY (province_id) REFERENCES provinces(id);
"""


@pytest.fixture
def users():
    return extract_table_info(USERS_SQL)


def test_table_name_and_enums(users):
    assert users.name == "users"
    assert users.enum_types == {"user_status"}


def test_columns_skip_base_fields_and_constraints(users):
    assert users.column_names == ["username", "nickname", "order", "status", "province_id"]
    assert users.column_types == ["VARCHAR(255)", "TEXT", "INTEGER", "user_status", "UUID"]
    assert len(users.column_tags) == len(users.column_names)


def test_tags_follow_format(users):
    for column_type, tag in zip(users.column_types, users.column_tags):
        assert tag.startswith('gorm:"type:' + column_type)
        assert tag.endswith('"')


def test_tag_flags(users):
    tags = dict(zip(users.column_names, users.column_tags))
    assert tags["username"] == 'gorm:"type:VARCHAR(255);not null;unique"'
    assert tags["nickname"] == 'gorm:"type:TEXT"'
    assert ";not null" in tags["order"]
    assert ";default:'active'" in tags["status"]
    assert tags["status"].endswith(';comment:enum type"')
    assert ";unique" not in tags["province_id"]


def test_foreign_keys(users):
    assert users.foreign_keys == [ForeignKeyInfo("province_id", "provinces", "id")]


def test_enum_keyword_in_type():
    sql = "CREATE TABLE IF NOT EXISTS items (\n    kind ENUM('a','b') NOT NULL\n);\n"
    info = extract_table_info(sql)
    assert info.column_names == ["kind"]
    assert "comment:enum type" in info.column_tags[0]
    assert info.enum_types == set()


def test_missing_table_raises():
    with pytest.raises(SchemaError):
        extract_table_info("CREATE TYPE mood AS ENUM ('ok');")


def test_table_without_if_not_exists_raises():
    with pytest.raises(SchemaError):
        extract_table_info("CREATE TABLE users (\n    name TEXT\n);")


def test_schema_error_is_value_error():
    with pytest.raises(ValueError):
        extract_table_info("")


def test_table_info_defaults_are_independent():
    first = TableInfo(name="a")
    second = TableInfo(name="b")
    first.column_names.append("x")
    assert second.column_names == []


def test_foreign_key_without_match_is_ignored():
    sql = (
        "CREATE TABLE IF NOT EXISTS orders (\n"
        "    total INTEGER NOT NULL\n"
        ");\n"
        "ALTER TABLE orders FOREIGN KEY broken\n"
    )
    info = extract_table_info(sql)
    assert info.foreign_keys == []
    assert info.column_names == ["total"]