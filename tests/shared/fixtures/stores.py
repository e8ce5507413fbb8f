"""Builders for data stores wired to test doubles.

Usage:
    from tests.shared.fixtures import build_store

    def test_something():
        store, sink = build_store(user_count=3, conversation_count=2)
        store.initialize()
"""

import random

from chat.application.store import DataStore, SeedConfig
from chat.domain.chat import Entity
from chat.infrastructure.persistence import InMemoryPersistenceSink
from chat_auth import PasswordHashingService

RANDOM_SEED = 20171017


def fast_password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


class RecordingSink(InMemoryPersistenceSink):
    """In-memory sink that checks each entity is not yet visible in a store."""

    def __init__(self) -> None:
        super().__init__()
        self.store: DataStore | None = None
        self.visible_before_write: list[Entity] = []

    def write_through(self, entity: Entity) -> None:
        if self.store is not None and self._is_visible(entity):
            self.visible_before_write.append(entity)
        super().write_through(entity)

    def _is_visible(self, entity: Entity) -> bool:
        store = self.store
        return (
            entity.id in store.get_all_users_by_id()
            or entity in store.get_all_conversations()
            or entity in store.get_all_messages()
        )


def build_store(
    sink: InMemoryPersistenceSink | None = None,
    *,
    enabled: bool = True,
    user_count: int = 3,
    conversation_count: int = 2,
    message_count: int = 5,
    seed: int = RANDOM_SEED,
) -> tuple[DataStore, InMemoryPersistenceSink]:
    """Build an uninitialized store over ``sink`` (a fresh in-memory one by default)."""
    sink = sink if sink is not None else InMemoryPersistenceSink()
    config = SeedConfig(
        enabled=enabled,
        user_count=user_count,
        conversation_count=conversation_count,
        message_count=message_count,
    )
    store = DataStore(
        sink=sink,
        password_service=fast_password_service(),
        config=config,
        rng=random.Random(seed),
    )
    if isinstance(sink, RecordingSink):
        sink.store = store
    return store, sink
