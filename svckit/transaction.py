"""Explicit and scoped database transactions."""

from sqlalchemy import Engine
from sqlalchemy.orm import Session


def _open(db):
    if isinstance(db, Engine):
        return Session(db, expire_on_commit=False)
    return db(expire_on_commit=False)


class TransactionUtil:
    """Runs work inside transactions opened from a session factory."""

    def __init__(self, db):
        self._db = db
        self._tx = None

    def execute_in_transaction(self, fn):
        """Call ``fn`` with a transactional session and commit afterwards.

        The transaction is rolled back and the exception re-raised if ``fn``
        fails. Returns whatever ``fn`` returns.
        """
        session = _open(self._db)
        with session:
            session.begin()
            try:
                result = fn(session)
            except BaseException:
                session.rollback()
                raise
            session.commit()
            return result

    def get_transaction(self):
        """Return the open transaction's session, or the factory if none is open."""
        return self._tx if self._tx is not None else self._db

    def begin(self):
        """Open a transaction that later calls commit or roll back."""
        session = _open(self._db)
        session.begin()
        self._tx = session

    def commit(self):
        """Commit the open transaction, if any."""
        if self._tx is None:
            return
        tx, self._tx = self._tx, None
        try:
            tx.commit()
        finally:
            tx.close()

    def rollback(self):
        """Roll back the open transaction, if any."""
        if self._tx is None:
            return
        tx, self._tx = self._tx, None
        try:
            tx.rollback()
        finally:
            tx.close()