"""Persistence sink port.

The data store writes through this interface. Apart from one emptiness
check before seeding it never reads back from it.
"""

from abc import ABC, abstractmethod

from chat.domain.chat.entities import Conversation, Entity, Message, User


class PersistenceSink(ABC):
    """Durable write-through target for chat entities.

    Implementations return only after the entity is durable and raise
    ``PersistenceWriteError`` when it is not.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """Whether the backend holds no users yet."""

    @abstractmethod
    def persist_user(self, user: User) -> None:
        """Durably store a user."""

    @abstractmethod
    def persist_conversation(self, conversation: Conversation) -> None:
        """Durably store a conversation."""

    @abstractmethod
    def persist_message(self, message: Message) -> None:
        """Durably store a message."""

    def write_through(self, entity: Entity) -> None:
        """Dispatch ``entity`` to the matching ``persist_*`` method."""
        if isinstance(entity, User):
            self.persist_user(entity)
        elif isinstance(entity, Conversation):
            self.persist_conversation(entity)
        elif isinstance(entity, Message):
            self.persist_message(entity)
        else:
            msg = f"Unsupported entity type: {type(entity).__name__}"
            raise TypeError(msg)
