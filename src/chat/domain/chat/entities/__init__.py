"""Chat entities.

Relationships between entities are plain UUID references resolved through
the data store, never embedded objects.
"""

from chat.domain.chat.entities.conversation import Conversation
from chat.domain.chat.entities.message import Message
from chat.domain.chat.entities.user import User

Entity = User | Conversation | Message

__all__ = [
    "Conversation",
    "Entity",
    "Message",
    "User",
]
