"""User entity, its repository and its use cases."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from svckit.models import BaseModel
from svckit.repository import BaseRepository


class User(BaseModel):
    """An account holder."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)


class UserRepository(BaseRepository):
    """Persistence operations for users."""

    def __init__(self, db):
        super().__init__(db, User)


class UserUsecase:
    """Application logic around users."""

    def __init__(self, user_repository):
        self.user_repository = user_repository