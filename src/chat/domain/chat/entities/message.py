"""Message entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from chat.domain.shared.time import utc_now


@dataclass(frozen=True)
class Message:
    """A message posted by ``author_id`` into ``conversation_id``."""

    id: UUID
    conversation_id: UUID
    author_id: UUID
    content: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.content:
            msg = "Message content cannot be empty"
            raise ValueError(msg)

    @classmethod
    def create(cls, conversation_id: UUID, author_id: UUID, content: str) -> "Message":
        return cls(
            id=uuid4(),
            conversation_id=conversation_id,
            author_id=author_id,
            content=content,
            created_at=utc_now(),
        )
