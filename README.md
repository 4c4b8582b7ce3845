# svckit

Small, composable pieces for building layered services on top of
SQLAlchemy, pydantic, PyJWT and bcrypt, plus a generator that turns SQL
`CREATE TABLE IF NOT EXISTS` scripts into model source files.

## Installation

```
pip install svckit
```

For running the test suite:

```
pip install "svckit[test]"
pytest
```

## What is inside

| Module                | Provides                                                        |
|-----------------------|-----------------------------------------------------------------|
| `svckit.settings`     | frozen `Settings` dataclass and `load_env(environ=None)`        |
| `svckit.database`     | `connect_db(url)` returning a SQLAlchemy session factory        |
| `svckit.models`       | `Base`, `BaseModel` (UUID key, version counter, audit columns), `PaginationQuery`, `SuccessResponse`, `ErrorResponse`, `BaseResponse` |
| `svckit.repository`   | `Condition`, `Relation` and a generic `BaseRepository`          |
| `svckit.transaction`  | `TransactionUtil` for explicit or scoped transactions           |
| `svckit.cache`        | `RedisUtil`, a thin helper over a Redis-style client            |
| `svckit.security`     | `BcryptUtil` for hashing and checking passwords                 |
| `svckit.tokens`       | `StandardClaims`, `JWTUtil` and `TokenError` for HMAC tokens    |
| `svckit.validation`   | `ValidatorUtil` for re-validating pydantic models and dataclasses |
| `svckit.errors`       | `log_error(err)`, which logs the caller's file, line and function |
| `svckit.users`        | `User`, `UserRepository`, `UserUsecase`                         |
| `svckit.naming`, `svckit.schema`, `svckit.generator` | SQL-to-model generation          |

## Configuration

`load_env` reads the process environment (or any mapping you pass). Each
field of `Settings` comes from the variable of the same name in upper case;
unset or empty variables keep their defaults, and a malformed
`MAX_FILE_SIZE` raises `ValueError`.

```python
from svckit.settings import load_env

settings = load_env({"PORT": "9000"})
print(settings.port)           # "9000"
print(settings.db_host)        # "localhost"
print(settings.max_file_size)  # 5
```

## Passwords

```python
from svckit.security import BcryptUtil

hasher = BcryptUtil()
password = "password"
hashed = hasher.generate_from_password(password, 10)
hasher.compare_hash_and_password(hashed, password)  # raises ValueError on mismatch
```

A cost below 4 falls back to 10; a cost above 31 or a password longer than
72 bytes raises `ValueError`.

## Tokens

```python
from datetime import timedelta
from svckit.tokens import JWTUtil

jwt_util = JWTUtil()
claims = jwt_util.create_standard_claims("user-1", timedelta(hours=1))
signed = jwt_util.generate(claims, "secret")

parsed = jwt_util.parse(signed, "secret")
print(parsed.id)  # "user-1"

jwt_util.extract_token_from_header({"Authorization": "Bearer token"})  # "token"
```

Tokens are signed with HS256. A header that does not start with `Bearer `,
a bad signature, a non-HMAC algorithm or an expired token raises
`TokenError`; `validate_token` does the same checks without returning the
claims.

## Database access

```python
from svckit.database import connect_db
from svckit.models import Base, PaginationQuery
from svckit.repository import Condition
from svckit.users import User, UserRepository

factory = connect_db("sqlite://")
Base.metadata.create_all(factory.kw["bind"])

users = UserRepository(factory)
password = "password"
users.create(User(username="alice", password=password,
                  email="alice@example.com", first_name="Alice",
                  last_name="Example"))

page = users.get_all(PaginationQuery(page=0, page_size=10))
alice = users.get_by(Condition("username = ?", "alice"))
```

`connect_db` raises `RuntimeError` when the database cannot be reached.
A `BaseRepository` accepts a session factory, an `Engine` or an open
`Session`; with a factory or engine each call runs in its own committed
transaction, with a session it only flushes. `get_by` raises
`sqlalchemy.exc.NoResultFound` when nothing matches. `update` writes only
the non-empty fields of an item, `save` merges every field, and each update
bumps the row's `version`.

`TransactionUtil` wraps a session factory or engine:
`execute_in_transaction(fn)` commits when `fn` returns and rolls back when
it raises, while `begin`, `commit`, `rollback` and `get_transaction` give
explicit control. `BaseRepository.with_tx(session)` returns a copy of a
repository bound to that session.

## Caching

`RedisUtil` wraps a client object you supply (for example a `redis.Redis`
instance; the client library is not installed with this package). It
offers `set(key, value, expiration=0)`, `get(key)` (raising `KeyError` for
a missing key), `delete(*keys)` and `exists(*keys)`.

## Generating models from SQL

Point the generator at a directory of SQL files (paths containing `seed-`
are skipped) and an output directory:

```
svckit-genmodels path/to/sql path/to/models
```

Each script holding a `CREATE TABLE IF NOT EXISTS` yields one model file,
named after the singular table name with a `.go` suffix, holding a struct
with the standard audit columns, typed fields, foreign-key fields and both
forward and reverse relationships. Scripts without a table are reported and
skipped. The same is available from Python through `SQLToModelConverter`,
whose `render_model` returns the text without writing it.

## What it does not do

There is no web server, routing or request handling here: the response
classes are plain pydantic models for you to serialise. `UserUsecase` only
holds a repository and defines no operations of its own.