"""Base persistence model, pagination query and response shapes."""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel as _Schema
from sqlalchemy import DateTime, Integer, event
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _now():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Declarative base shared by every mapped model."""


class BaseModel(Base):
    """Columns every entity carries, with an optimistic version counter."""

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_now)
    created_by: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_now, onupdate=_now
    )
    updated_by: Mapped[Optional[uuid.UUID]] = mapped_column(nullable=True)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def before_update(self):
        """Bump the version ahead of an update."""
        self.version = (self.version or 0) + 1


@event.listens_for(BaseModel, "before_update", propagate=True)
def _bump_version(mapper, connection, target):
    target.before_update()


class PaginationQuery(_Schema):
    """Optional paging and sorting parameters of a list request."""

    page: Optional[int] = None
    page_size: Optional[int] = None
    sort: Optional[str] = None
    order: Optional[str] = None


class SuccessResponse(_Schema):
    """Body of a successful response."""

    message: str
    data: Any = None


class ErrorResponse(_Schema):
    """Body of a failed response."""

    message: str


class BaseResponse(_Schema):
    """Public view of the common model columns."""

    id: uuid.UUID
    created_at: datetime
    created_by: Optional[uuid.UUID] = None
    updated_at: datetime
    updated_by: Optional[uuid.UUID] = None

    @classmethod
    def from_model(cls, model):
        """Build a response from a persisted model."""
        return cls(
            id=model.id,
            created_at=model.created_at,
            created_by=model.created_by,
            updated_at=model.updated_at,
            updated_by=model.updated_by,
        )