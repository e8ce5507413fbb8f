"""SQLAlchemy models for chat entities."""

from chat.infrastructure.persistence.sqlalchemy.models.base import Base
from chat.infrastructure.persistence.sqlalchemy.models.conversation_model import (
    ConversationModel,
)
from chat.infrastructure.persistence.sqlalchemy.models.message_model import (
    MessageModel,
)
from chat.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "ConversationModel",
    "MessageModel",
    "UserModel",
]
