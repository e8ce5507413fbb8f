"""In-memory persistence sink.

Keeps every acknowledged write in order. Used by tests and by the "memory"
persistence backend, where nothing outlives the process.
"""

import logging
import threading
from collections.abc import Callable
from uuid import UUID

from chat.domain.chat import (
    Conversation,
    Entity,
    Message,
    PersistenceSink,
    PersistenceWriteError,
    User,
)

logger = logging.getLogger(__name__)


class InMemoryPersistenceSink(PersistenceSink):
    """Records writes and can be made to fail on demand.

    Parameters
    ----------
    fail_on
        Predicate called with each entity before it is stored; a true
        result makes that write raise ``PersistenceWriteError``.
    """

    def __init__(self, fail_on: Callable[[Entity], bool] | None = None) -> None:
        self._fail_on = fail_on
        self._lock = threading.Lock()
        self.writes: list[Entity] = []
        self.users: dict[UUID, User] = {}
        self.conversations: dict[UUID, Conversation] = {}
        self.messages: dict[UUID, Message] = {}

    def fail_on(self, predicate: Callable[[Entity], bool] | None) -> None:
        self._fail_on = predicate

    def is_empty(self) -> bool:
        return not self.users

    @property
    def write_count(self) -> int:
        return len(self.writes)

    def persist_user(self, user: User) -> None:
        self._store(user, self.users)

    def persist_conversation(self, conversation: Conversation) -> None:
        self._store(conversation, self.conversations)

    def persist_message(self, message: Message) -> None:
        self._store(message, self.messages)

    def _store(self, entity: Entity, table: dict[UUID, Entity]) -> None:
        if self._fail_on is not None and self._fail_on(entity):
            raise PersistenceWriteError(
                type(entity).__name__,
                entity.id,
                "rejected by in-memory sink",
            )
        with self._lock:
            table[entity.id] = entity
            self.writes.append(entity)
        logger.debug("Stored %s %s in memory", type(entity).__name__, entity.id)
