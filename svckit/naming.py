"""Name and type conversions used when turning SQL tables into model sources."""

BASE_MODEL_FIELDS = frozenset(
    {
        "id",
        "version",
        "created_at",
        "created_by",
        "updated_at",
        "updated_by",
        "deleted_at",
    }
)

# Ordered from most specific to most general; the first matching suffix wins.
_SINGULAR_RULES = (
    ("ies", "y"),
    ("provinces", "province"),
    ("statuses", "status"),
    ("addresses", "address"),
    ("analyses", "analysis"),
    ("series", "series"),
    ("species", "species"),
    ("xes", "x"),
    ("ches", "ch"),
    ("shes", "sh"),
    ("zzes", "z"),
    ("sses", "ss"),
    ("ves", "f"),
    ("s", ""),
)

_NON_PLURALS = frozenset({"status", "campus", "bus", "virus"})

_IRREGULAR_PLURALS = {
    "Address": "Addresses",
    "Status": "Statuses",
    "Person": "People",
    "Child": "Children",
    "Foot": "Feet",
    "Tooth": "Teeth",
    "Goose": "Geese",
    "Mouse": "Mice",
    "Man": "Men",
    "Woman": "Women",
    "Ox": "Oxen",
}

_VOWELS = frozenset("aeiou")


def _nullable(type_name, is_required):
    return type_name if is_required else "*" + type_name


def sql_type_to_go_type(sql_type, is_required, is_enum=False):
    """Return the model field type for a SQL column type.

    Optional columns get a pointer type, except for UUID and JSON columns.
    """
    sql_type = sql_type.lower()

    def has(*words):
        return any(word in sql_type for word in words)

    if is_enum or has("enum"):
        return _nullable("string", is_required)
    if has("uuid"):
        return "uuid.UUID"
    if has("varchar", "text"):
        return _nullable("string", is_required)
    if has("integer", "int"):
        return _nullable("int", is_required)
    if has("decimal", "numeric", "float", "double"):
        return _nullable("float64", is_required)
    if has("bool"):
        return _nullable("bool", is_required)
    if has("timestamp", "date"):
        return _nullable("time.Time", is_required)
    if has("json"):
        return "json.RawMessage"
    return "interface{}"


def snake_to_camel(s):
    """Turn ``snake_case`` into ``CamelCase``, upper-casing each word's first letter."""
    return "".join(word[:1].upper() + word[1:] for word in s.split("_"))


def singularize(s):
    """Return the singular of a plural table name, keeping the stem's case."""
    lowered = s.lower()
    for suffix, replacement in _SINGULAR_RULES:
        if lowered.endswith(suffix):
            if suffix == "s" and lowered in _NON_PLURALS:
                return s
            return s[: len(s) - len(suffix)] + replacement
    return s


def pluralize(s):
    """Return the plural of a model name, for relationship field names."""
    irregular = _IRREGULAR_PLURALS.get(s)
    if irregular is not None:
        return irregular
    if s.endswith(("s", "x", "z", "ch", "sh")):
        return s + "es"
    if s.endswith("y") and len(s) > 1 and s[-2] not in _VOWELS:
        return s[:-1] + "ies"
    return s + "s"


def generate_model_name(table_name):
    """Return the model name for a table: singular and in CamelCase."""
    return snake_to_camel(singularize(table_name))


def format_id_field(field_name):
    """Return the field name of a column, writing an ``_id`` suffix as ``ID``."""
    if field_name.endswith("_id"):
        return snake_to_camel(field_name[:-3]) + "ID"
    return snake_to_camel(field_name)


def is_base_model_field(column_name):
    """Return whether the column belongs to the shared base model."""
    return column_name in BASE_MODEL_FIELDS