"""SQLAlchemy persistence sink.

Each entity is committed in its own transaction; the write returns only
after the commit succeeded.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from chat.domain.chat import (
    Conversation,
    Message,
    PersistenceSink,
    PersistenceWriteError,
    User,
)
from chat.infrastructure.persistence.sqlalchemy.models import (
    Base,
    ConversationModel,
    MessageModel,
    UserModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyPersistenceSink(PersistenceSink):
    """Write-through sink backed by a SQLAlchemy session factory."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def is_empty(self) -> bool:
        with self._session_factory() as session:
            return session.scalar(select(UserModel.id).limit(1)) is None

    def persist_user(self, user: User) -> None:
        self._commit(UserModel.from_domain(user), "User")

    def persist_conversation(self, conversation: Conversation) -> None:
        self._commit(ConversationModel.from_domain(conversation), "Conversation")

    def persist_message(self, message: Message) -> None:
        self._commit(MessageModel.from_domain(message), "Message")

    def _commit(self, model: Base, entity_type: str) -> None:
        entity_id = model.id  # type: ignore[attr-defined]
        try:
            with self._session_factory.begin() as session:
                session.add(model)
        except SQLAlchemyError as e:
            logger.exception("Failed to persist %s %s", entity_type, entity_id)
            raise PersistenceWriteError(entity_type, entity_id, str(e)) from e

        logger.debug("Persisted %s %s", entity_type, entity_id)
