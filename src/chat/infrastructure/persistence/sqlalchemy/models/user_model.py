"""SQLAlchemy model for User entities."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chat.domain.chat import User
from chat.infrastructure.persistence.sqlalchemy.models.base import Base


class UserModel(Base):
    """Persisted user row. Only the password hash is stored."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    about: Mapped[str] = mapped_column(Text, default="", nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    @classmethod
    def from_domain(cls, user: User) -> "UserModel":
        return cls(
            id=user.id,
            name=user.name,
            password_hash=user.password_hash,
            about=user.about,
            created_at=user.created_at,
        )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, name={self.name})>"
