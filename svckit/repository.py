"""Generic persistence operations over SQLAlchemy sessions."""

import copy
import uuid
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Engine, bindparam, inspect, select, text
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session, selectinload


@dataclass(init=False)
class Condition:
    """A filter: a SQL fragment with ``?`` placeholders, a mapping or an expression."""

    query: Any
    args: tuple

    def __init__(self, query, *args):
        self.query = query
        self.args = args


@dataclass(init=False)
class Relation:
    """A relationship to load eagerly, optionally narrowed by extra criteria."""

    query: str
    args: tuple

    def __init__(self, query, *args):
        self.query = query
        self.args = args


def _text_clause(query, args):
    first, *rest = query.split("?")
    if len(rest) != len(args):
        raise ValueError(
            f"condition {query!r} has {len(rest)} placeholders but {len(args)} arguments"
        )
    names = [f"p{position}" for position, _ in enumerate(args)]
    sql = first + "".join(f":{name}{piece}" for name, piece in zip(names, rest))
    clause = text(sql)
    params = []
    for name, value in zip(names, args):
        expanding = isinstance(value, (list, tuple, set, frozenset))
        params.append(bindparam(name, list(value) if expanding else value, expanding=expanding))
    return clause.bindparams(*params) if params else clause


def _clauses(model, condition):
    query, args = condition.query, condition.args
    if isinstance(query, str):
        return [_text_clause(query, args)]
    if isinstance(query, Mapping):
        return [getattr(model, key) == value for key, value in query.items()]
    return [query, *args]


def _is_zero(value):
    if value is None:
        return True
    if isinstance(value, (str, bytes, bool, int, float)):
        return not value
    if isinstance(value, uuid.UUID):
        return value.int == 0
    return False


class BaseRepository:
    """Create, read, update and delete operations for one mapped model.

    ``db`` is either a session factory (each call runs in its own committed
    transaction), an ``Engine``, or an open ``Session`` (calls join it and
    only flush).
    """

    def __init__(self, db, model):
        self._db = db
        self.model = model
        mapper = inspect(model)
        self._mapper = mapper
        self._columns = [attr.key for attr in mapper.column_attrs]
        self._pk = [mapper.get_property_by_column(column).key for column in mapper.primary_key]

    @contextmanager
    def _session(self):
        db = self._db
        if isinstance(db, Session):
            yield db
            return
        if isinstance(db, Engine):
            session = Session(db, expire_on_commit=False)
        else:
            session = db(expire_on_commit=False)
        with session, session.begin():
            yield session

    def _relationship(self, owner, name):
        if inspect(owner).relationships.get(name) is None:
            raise ValueError(f"{name}: unsupported relations for schema {owner.__name__}")
        return getattr(owner, name)

    def _loader(self, relation):
        *path, last = relation.query.split(".")
        owner = self.model
        option = None
        for name in path:
            attr = self._relationship(owner, name)
            option = selectinload(attr) if option is None else option.selectinload(attr)
            owner = attr.property.mapper.class_
        attr = self._relationship(owner, last)
        if relation.args:
            attr = attr.and_(*relation.args)
        return selectinload(attr) if option is None else option.selectinload(attr)

    def _options(self, relations):
        return [self._loader(relation) for relation in relations or ()]

    def _pk_value(self, item):
        values = tuple(getattr(item, key) for key in self._pk)
        if any(value is None for value in values):
            return None
        return values[0] if len(values) == 1 else values

    def _copy_back(self, source, target):
        if source is target:
            return
        for key in self._columns:
            setattr(target, key, getattr(source, key))

    def get_all(self, pagination=None, condition=None, relations=None):
        """Return the rows matching ``condition``, paged and sorted as requested."""
        stmt = select(self.model)
        if condition is not None:
            stmt = stmt.where(*_clauses(self.model, condition))
        if pagination is not None:
            if pagination.page is not None and pagination.page_size is not None:
                stmt = stmt.offset(pagination.page * pagination.page_size).limit(
                    pagination.page_size
                )
            if pagination.sort is not None and pagination.order is not None:
                stmt = stmt.order_by(text(f"{pagination.sort} {pagination.order}"))
        stmt = stmt.options(*self._options(relations))
        with self._session() as session:
            return list(session.scalars(stmt).all())

    def get_by(self, condition=None, relations=None):
        """Return the first row by primary key matching ``condition``.

        Raises ``NoResultFound`` when nothing matches.
        """
        stmt = select(self.model)
        if condition is not None:
            stmt = stmt.where(*_clauses(self.model, condition))
        stmt = stmt.order_by(*self._mapper.primary_key).limit(1)
        stmt = stmt.options(*self._options(relations))
        with self._session() as session:
            found = session.scalars(stmt).first()
        if found is None:
            raise NoResultFound("record not found")
        return found

    def create(self, item):
        """Insert ``item``."""
        with self._session() as session:
            session.add(item)
            session.flush()

    def create_many(self, items):
        """Insert every item of ``items``."""
        with self._session() as session:
            session.add_all(items)
            session.flush()

    def _update(self, session, item):
        if item in session:
            session.flush()
            return
        key = self._pk_value(item)
        if key is None:
            raise ValueError("WHERE conditions required")
        stored = session.get(self.model, key)
        if stored is None:
            return
        for name in self._columns:
            if name in self._pk:
                continue
            value = getattr(item, name)
            if not _is_zero(value):
                setattr(stored, name, value)
        session.flush()
        self._copy_back(stored, item)

    def update(self, item):
        """Write the non-empty fields of ``item`` to its stored row."""
        with self._session() as session:
            self._update(session, item)

    def update_many(self, items):
        """Write the non-empty fields of each item to its stored row."""
        with self._session() as session:
            for item in items:
                self._update(session, item)

    def _save(self, session, item):
        merged = session.merge(item)
        session.flush()
        self._copy_back(merged, item)

    def save(self, item):
        """Insert ``item`` or overwrite every one of its stored fields."""
        with self._session() as session:
            self._save(session, item)

    def save_many(self, items):
        """Insert or overwrite each item."""
        with self._session() as session:
            for item in items:
                self._save(session, item)

    def _delete(self, session, item):
        if item in session:
            session.delete(item)
            session.flush()
            return
        key = self._pk_value(item)
        if key is None:
            raise ValueError("WHERE conditions required")
        stored = session.get(self.model, key)
        if stored is not None:
            session.delete(stored)
            session.flush()

    def delete(self, item):
        """Delete the stored row of ``item``."""
        with self._session() as session:
            self._delete(session, item)

    def delete_many(self, items):
        """Delete the stored row of each item."""
        with self._session() as session:
            for item in items:
                self._delete(session, item)

    def with_tx(self, session):
        """Return a copy of this repository that works inside ``session``."""
        clone = copy.copy(self)
        clone._db = session
        return clone