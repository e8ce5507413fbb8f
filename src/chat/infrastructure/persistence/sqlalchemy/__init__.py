"""SQLAlchemy implementation of the persistence sink."""

from chat.infrastructure.persistence.sqlalchemy.database import (
    create_database_engine,
    create_session_factory,
    create_tables,
)
from chat.infrastructure.persistence.sqlalchemy.models import (
    Base,
    ConversationModel,
    MessageModel,
    UserModel,
)
from chat.infrastructure.persistence.sqlalchemy.sink import SQLAlchemyPersistenceSink

__all__ = [
    "Base",
    "ConversationModel",
    "MessageModel",
    "SQLAlchemyPersistenceSink",
    "UserModel",
    "create_database_engine",
    "create_session_factory",
    "create_tables",
]
