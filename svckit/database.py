"""Database connection setup."""

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker


def connect_db(url):
    """Connect to the database at ``url`` and return a session factory.

    Raises ``RuntimeError`` when the database cannot be reached.
    """
    try:
        engine = create_engine(url, echo=False)
        with engine.connect():
            pass
    except (SQLAlchemyError, ImportError) as exc:
        raise RuntimeError(f"failed to connect to database: {exc}") from exc
    return sessionmaker(bind=engine, expire_on_commit=False)