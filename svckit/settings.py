"""Service settings read from environment variables."""

import os
import re
from dataclasses import dataclass, fields

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int64(name, raw):
    if not re.fullmatch(r"[+-]?\d+", raw):
        raise ValueError(f'env: parse error on field "{name}": invalid integer {raw!r}')
    value = int(raw, 10)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'env: parse error on field "{name}": value out of range {raw!r}')
    return value


@dataclass(frozen=True)
class Settings:
    """Configuration of the service.

    Each field is read from the environment variable of the same name in
    upper case.
    """

    port: str = "8082"
    db_host: str = "localhost"
    db_user: str = "postgres"
    db_password: str = "password"
    db_name: str = "postgres"
    db_port: str = "8080"
    jwt_secret: str = "secret"
    redis_host: str = "localhost"
    redis_port: str = "8081"
    max_file_size: int = 5
    district_file_path: str = "./data/districts.json"
    sub_district_file_path: str = "./data/sub_districts.json"
    province_file_path: str = "./data/provinces.json"


def load_env(environ=None):
    """Read settings from ``environ`` (the process environment by default).

    Unset or empty variables take their defaults; a malformed value raises
    ``ValueError``.
    """
    source = os.environ if environ is None else environ
    values = {}
    for spec in fields(Settings):
        name = spec.name.upper()
        raw = source.get(name, "")
        if raw == "":
            continue
        values[spec.name] = _parse_int64(name, raw) if spec.type is int else raw
    return Settings(**values)