"""User entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from chat.domain.shared.time import utc_now


@dataclass(frozen=True)
class User:
    """A registered chat user.

    ``name`` is unique across the store and never changes. ``password_hash``
    holds the salted one-way hash only.
    """

    id: UUID
    name: str
    created_at: datetime
    password_hash: str = field(repr=False)
    about: str = ""

    @classmethod
    def create(cls, name: str, password_hash: str, about: str = "") -> "User":
        return cls(
            id=uuid4(),
            name=name,
            created_at=utc_now(),
            password_hash=password_hash,
            about=about,
        )
