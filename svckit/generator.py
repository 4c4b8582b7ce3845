"""Generation of model source files from SQL table definitions."""

import argparse
import os
import stat
import sys
from dataclasses import dataclass

from svckit.naming import (
    format_id_field,
    generate_model_name,
    is_base_model_field,
    pluralize,
    singularize,
    snake_to_camel,
    sql_type_to_go_type,
)
from svckit.schema import SchemaError, extract_table_info

_BASE_FIELDS = (
    "\tID        uuid.UUID       `gorm:\"type:uuid;primaryKey;default:uuid_generate_v4()\"`\n"
    "\tVersion   int             `gorm:\"type:integer;not null;default:0\"`\n"
    "\tCreatedAt time.Time       `gorm:\"type:timestamp;not null;default:now()\"`\n"
    "\tCreatedBy *uuid.UUID      `gorm:\"type:uuid\"`\n"
    "\tUpdatedAt time.Time       `gorm:\"type:timestamp;not null;default:now()\"`\n"
    "\tUpdatedBy *uuid.UUID      `gorm:\"type:uuid\"`\n"
    "\tDeletedAt *gorm.DeletedAt `gorm:\"type:timestamp\"`\n\n"
)


def _sql_files(path):
    """Yield every ``.sql`` file under ``path`` in lexical walk order."""
    info = os.lstat(path)
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _sql_files(os.path.join(path, name))
    elif os.path.basename(path).lower().endswith(".sql"):
        yield path


@dataclass
class SQLToModelConverter:
    """Turns SQL table definitions under ``source_path`` into model files."""

    source_path: str
    destination_path: str

    @property
    def package_name(self):
        return os.path.basename(os.path.normpath(os.fspath(self.destination_path)))

    def collect_table_infos(self):
        """Return the tables defined by the SQL files, keyed by table name.

        Seed files are skipped; files without a table are reported and skipped.
        """
        table_infos = {}
        for sql_file in _sql_files(os.fspath(self.source_path)):
            if "seed-" in sql_file:
                continue
            with open(sql_file, encoding="utf-8", errors="replace") as handle:
                sql_content = handle.read()
            try:
                table_info = extract_table_info(sql_content)
            except SchemaError as exc:
                print(f"Error extracting table info from {sql_file}: {exc}")
                continue
            table_infos[table_info.name] = table_info
        return table_infos

    def render_model(self, table_info, all_table_infos):
        """Return the source text of the model for ``table_info``."""
        model_name = generate_model_name(table_info.name)
        fk_columns = {fk.column_name for fk in table_info.foreign_keys}
        needs_json = any("json" in col_type.lower() for col_type in table_info.column_types)

        out = [
            "// Code generated by SQL-to-Model generator.\n",
            f"package {self.package_name}\n\n",
            "import (\n",
            '\t"time"\n',
        ]
        if needs_json:
            out.append('\t"encoding/json"\n')
        out.append('\t"github.com/google/uuid"\n')
        out.append('\t"gorm.io/gorm"\n')
        out.append(")\n\n")

        out.append(f"type {model_name} struct {{\n")
        out.append(_BASE_FIELDS)

        has_regular_fields = False
        for column_name, column_type, tag in zip(
            table_info.column_names, table_info.column_types, table_info.column_tags
        ):
            if column_name in fk_columns or is_base_model_field(column_name):
                continue
            has_regular_fields = True
            is_required = "not null" in tag
            is_enum = column_type in table_info.enum_types
            go_type = sql_type_to_go_type(column_type, is_required, is_enum)
            out.append(f"\t{snake_to_camel(column_name)} {go_type} `{tag}`\n")
        if has_regular_fields:
            out.append("\n")

        written = set()
        for fk in table_info.foreign_keys:
            if fk.column_name in written:
                continue
            field_name = format_id_field(fk.column_name)
            out.append(f'\t{field_name} uuid.UUID `gorm:"type:uuid;column:{fk.column_name}"`\n')
            written.add(fk.column_name)
        if written:
            out.append("\n")

        for fk in table_info.foreign_keys:
            ref_model = generate_model_name(fk.referenced_table)
            out.append(
                f"\t{ref_model} *{ref_model} "
                f'`gorm:"foreignKey:{format_id_field(fk.column_name)};references:ID"`\n'
            )

        for other_name, other_info in all_table_infos.items():
            if other_name == table_info.name:
                continue
            for fk in other_info.foreign_keys:
                if fk.referenced_table != table_info.name:
                    continue
                other_model = generate_model_name(other_name)
                out.append(
                    f"\t{pluralize(other_model)} []{other_model} "
                    f'`gorm:"foreignKey:{format_id_field(fk.column_name)}"`\n'
                )

        out.append("}\n\n")
        out.append(f"func (r *{model_name}) BeforeUpdate(tx *gorm.DB) (err error) {{\n")
        out.append("\tr.Version++\n")
        out.append("\treturn\n")
        out.append("}\n")
        return "".join(out)

    def generate_models(self):
        """Write one model file per table into the destination directory.

        Failures to write a single model are reported and skipped.
        """
        all_table_infos = self.collect_table_infos()
        destination = os.fspath(self.destination_path)
        if not os.path.exists(destination):
            os.makedirs(destination, mode=0o755)

        for table_info in all_table_infos.values():
            file_path = os.path.join(destination, f"{singularize(table_info.name)}.go")
            try:
                text = self.render_model(table_info, all_table_infos)
                with open(file_path, "w", encoding="utf-8", newline="\n") as handle:
                    handle.write(text)
            except OSError as exc:
                print(f"Error generating model for {table_info.name}: {exc}")


def main(argv=None):
    """Generate model files from SQL definitions; return the exit status."""
    parser = argparse.ArgumentParser(
        description="Generate model files from SQL table definitions."
    )
    parser.add_argument("source", help="directory holding the SQL files")
    parser.add_argument("destination", help="directory to write the models into")
    args = parser.parse_args(argv)
    try:
        SQLToModelConverter(args.source, args.destination).generate_models()
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0