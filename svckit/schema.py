"""Reading table definitions out of SQL migration scripts."""

import re
from dataclasses import dataclass, field

from svckit.naming import is_base_model_field

_ENUM_RE = re.compile(r"CREATE\s+TYPE\s+([a-zA-Z0-9_]+)\s+AS\s+ENUM", re.ASCII)
_TABLE_RE = re.compile(
    r"CREATE\s+TABLE\s+IF\s+NOT\s+EXISTS\s+([a-zA-Z0-9_]+)\s*\(", re.ASCII
)
_FOREIGN_KEY_RE = re.compile(
    r"ALTER\s+TABLE\s+[a-zA-Z0-9_]+\s+ADD\s+CONSTRAINT\s+[a-zA-Z0-9_]+\s+FOREIGN\s+KEY"
    r"\s+\(([a-zA-Z0-9_]+)\)\s+REFERENCES\s+([a-zA-Z0-9_]+)\(([a-zA-Z0-9_]+)\)",
    re.ASCII,
)
_DEFAULT_RE = re.compile(r"DEFAULT\s+([^,\s]+)", re.ASCII)

_SKIPPED_PREFIXES = ("--", "CREATE TABLE", ")", "CREATE TYPE")
_NOT_COLUMNS = frozenset({"PRIMARY", "CONSTRAINT", "FOREIGN"})


class SchemaError(ValueError):
    """Raised when a SQL script holds no table definition."""


@dataclass(frozen=True)
class ForeignKeyInfo:
    """A foreign key from one column to a column of another table."""

    column_name: str
    referenced_table: str
    referenced_column: str


@dataclass
class TableInfo:
    """A table's own columns (base model columns left out) and foreign keys.

    ``column_names``, ``column_types`` and ``column_tags`` run in parallel,
    in the order the columns are declared.
    """

    name: str
    column_names: list[str] = field(default_factory=list)
    column_types: list[str] = field(default_factory=list)
    column_tags: list[str] = field(default_factory=list)
    foreign_keys: list[ForeignKeyInfo] = field(default_factory=list)
    enum_types: set[str] = field(default_factory=set)


def _column_tag(line, column_name, column_type, is_enum):
    parts = [f"type:{column_type}"]
    upper = line.upper()
    if "NOT NULL" in upper:
        parts.append("not null")
    if "UNIQUE" in upper:
        parts.append("unique")
    default = _DEFAULT_RE.search(line)
    if default:
        parts.append(f"default:{default.group(1)}")
    if column_name == "id":
        parts.append("primaryKey")
    if is_enum:
        parts.append("comment:enum type")
    return 'gorm:"' + ";".join(parts) + '"'


def extract_table_info(sql_content):
    """Read the table, its columns and foreign keys from a SQL script.

    Raises ``SchemaError`` when no ``CREATE TABLE IF NOT EXISTS`` is found.
    """
    enum_types = set(_ENUM_RE.findall(sql_content))

    table = _TABLE_RE.search(sql_content)
    if table is None:
        raise SchemaError("table name not found")
    info = TableInfo(name=table.group(1), enum_types=enum_types)

    for raw_line in sql_content.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith(_SKIPPED_PREFIXES):
            continue

        if line.startswith("ALTER TABLE") and "FOREIGN KEY" in line:
            match = _FOREIGN_KEY_RE.search(line)
            if match:
                info.foreign_keys.append(ForeignKeyInfo(*match.groups()))
            continue

        line = line.removesuffix(",")
        parts = line.split()
        if len(parts) < 2:
            continue

        column_name = parts[0].strip('"')
        if column_name in _NOT_COLUMNS:
            continue

        column_type = parts[1]
        is_enum = column_type in enum_types or "enum" in column_type.lower()
        tag = _column_tag(line, column_name, column_type, is_enum)

        if is_base_model_field(column_name):
            continue

        info.column_names.append(column_name)
        info.column_types.append(column_type)
        info.column_tags.append(tag)

    return info