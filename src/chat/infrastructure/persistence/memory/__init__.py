"""In-memory persistence sink."""

from chat.infrastructure.persistence.memory.sink import InMemoryPersistenceSink

__all__ = ["InMemoryPersistenceSink"]
