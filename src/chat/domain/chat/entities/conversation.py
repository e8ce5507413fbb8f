"""Conversation entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from chat.domain.shared.time import utc_now


@dataclass(frozen=True)
class Conversation:
    """A conversation started by a user, referenced by ``owner_id``."""

    id: UUID
    owner_id: UUID
    title: str
    created_at: datetime

    @classmethod
    def create(cls, owner_id: UUID, title: str) -> "Conversation":
        return cls(id=uuid4(), owner_id=owner_id, title=title, created_at=utc_now())
