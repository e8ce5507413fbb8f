"""Chat domain: users, conversations, messages and their persistence port."""

from chat.domain.chat.entities import Conversation, Entity, Message, User
from chat.domain.chat.exceptions import (
    ConfigurationError,
    DataStoreInitializationError,
    PersistenceWriteError,
    ReferentialPreconditionError,
)
from chat.domain.chat.ports import PersistenceSink

__all__ = [
    # Entities
    "Conversation",
    "Entity",
    "Message",
    "User",
    # Ports
    "PersistenceSink",
    # Exceptions
    "ConfigurationError",
    "DataStoreInitializationError",
    "PersistenceWriteError",
    "ReferentialPreconditionError",
]
