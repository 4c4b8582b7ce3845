import pytest

from svckit.naming import (
    format_id_field,
    generate_model_name,
    is_base_model_field,
    pluralize,
    singularize,
    snake_to_camel,
    sql_type_to_go_type,
)


@pytest.mark.parametrize(
    ("sql_type", "required", "expected"),
    [
        ("VARCHAR(255)", True, "string"),
        ("varchar(255)", False, "*string"),
        ("TEXT", False, "*string"),
        ("UUID", False, "uuid.UUID"),
        ("UUID", True, "uuid.UUID"),
        ("INTEGER", True, "int"),
        ("BIGINT", False, "*int"),
        ("DECIMAL(10,2)", True, "float64"),
        ("DOUBLE", False, "*float64"),
        ("BOOLEAN", True, "bool"),
        ("BOOL", False, "*bool"),
        ("TIMESTAMP", True, "time.Time"),
        ("DATE", False, "*time.Time"),
        ("JSONB", True, "json.RawMessage"),
        ("JSON", False, "json.RawMessage"),
        ("BYTEA", True, "interface{}"),
    ],
)
def test_sql_type_to_go_type(sql_type, required, expected):
    assert sql_type_to_go_type(sql_type, required) == expected


def test_enum_flag_overrides_type():
    assert sql_type_to_go_type("user_status", True, True) == "string"
    assert sql_type_to_go_type("user_status", False, True) == "*string"
    assert sql_type_to_go_type("user_status", True) == "interface{}"


def test_enum_in_type_name():
    assert sql_type_to_go_type("ENUM('a','b')", False) == "*string"


def test_snake_to_camel():
    assert snake_to_camel("first_name") == "FirstName"
    assert snake_to_camel("") == ""


@pytest.mark.parametrize("word", ["created_by", "user_status_code", "a_b_c"])
def test_snake_to_camel_invariants(word):
    result = snake_to_camel(word)
    assert "_" not in result
    assert result.lower() == word.replace("_", "")
    assert result[0].isupper()


@pytest.mark.parametrize(
    ("plural", "singular"),
    [
        ("cities", "city"),
        ("provinces", "province"),
        ("statuses", "status"),
        ("addresses", "address"),
        ("analyses", "analysis"),
        ("boxes", "box"),
        ("beaches", "beach"),
        ("dishes", "dish"),
        ("quizzes", "quiz"),
        ("classes", "class"),
        ("wolves", "wolf"),
    ],
)
def test_singularize_rules(plural, singular):
    assert singularize(plural) == singular


@pytest.mark.parametrize("word", ["status", "campus", "bus", "virus", "data"])
def test_singularize_leaves_non_plurals(word):
    assert singularize(word) == word


@pytest.mark.parametrize(
    ("singular", "plural"),
    [
        ("Address", "Addresses"),
        ("Status", "Statuses"),
        ("Person", "People"),
        ("Child", "Children"),
        ("Mouse", "Mice"),
        ("Ox", "Oxen"),
    ],
)
def test_pluralize_irregular(singular, plural):
    assert pluralize(singular) == plural


@pytest.mark.parametrize("word", ["User", "Box", "Beach", "Dish", "City", "Class", "Wolf"])
def test_pluralize_then_singularize_round_trip(word):
    plural = pluralize(word)
    assert plural != word
    assert singularize(plural) == word


def test_pluralize_vowel_y_just_adds_s():
    assert pluralize("Day") == "Day" + "s"


def test_generate_model_name():
    assert generate_model_name("addresses") == "Address"
    assert generate_model_name("statuses") == "Status"


def test_format_id_field():
    assert format_id_field("province_id") == "ProvinceID"
    assert format_id_field("first_name") == snake_to_camel("first_name")


@pytest.mark.parametrize(
    ("column", "expected"),
    [
        ("id", True),
        ("version", True),
        ("created_at", True),
        ("created_by", True),
        ("updated_at", True),
        ("updated_by", True),
        ("deleted_at", True),
        ("username", False),
        ("province_id", False),
    ],
)
def test_is_base_model_field(column, expected):
    assert is_base_model_field(column) is expected