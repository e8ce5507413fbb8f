"""SQLAlchemy model for Conversation entities."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chat.domain.chat import Conversation
from chat.infrastructure.persistence.sqlalchemy.models.base import Base


class ConversationModel(Base):
    """Persisted conversation row."""

    __tablename__ = "conversations"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    @classmethod
    def from_domain(cls, conversation: Conversation) -> "ConversationModel":
        return cls(
            id=conversation.id,
            owner_id=conversation.owner_id,
            title=conversation.title,
            created_at=conversation.created_at,
        )

    def __repr__(self) -> str:
        return f"<ConversationModel(id={self.id}, title={self.title})>"
