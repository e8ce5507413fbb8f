"""Persistence sinks for the chat data store."""

from chat.infrastructure.persistence.factory import create_persistence_sink
from chat.infrastructure.persistence.memory import InMemoryPersistenceSink
from chat.infrastructure.persistence.sqlalchemy import SQLAlchemyPersistenceSink

__all__ = [
    "InMemoryPersistenceSink",
    "SQLAlchemyPersistenceSink",
    "create_persistence_sink",
]
