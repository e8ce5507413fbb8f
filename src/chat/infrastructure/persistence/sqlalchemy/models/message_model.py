"""SQLAlchemy model for Message entities."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chat.domain.chat import Message
from chat.infrastructure.persistence.sqlalchemy.models.base import Base


class MessageModel(Base):
    """Persisted message row."""

    __tablename__ = "messages"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    conversation_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("conversations.id"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    @classmethod
    def from_domain(cls, message: Message) -> "MessageModel":
        return cls(
            id=message.id,
            conversation_id=message.conversation_id,
            author_id=message.author_id,
            content=message.content,
            created_at=message.created_at,
        )

    def __repr__(self) -> str:
        return f"<MessageModel(id={self.id}, conversation_id={self.conversation_id})>"
