"""Select the persistence sink configured in settings."""

import logging

from chat.domain.chat import PersistenceSink
from chat.infrastructure.persistence.memory import InMemoryPersistenceSink
from chat.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyPersistenceSink,
    create_database_engine,
    create_session_factory,
    create_tables,
)
from chat_config.settings import Settings

logger = logging.getLogger(__name__)


def create_persistence_sink(settings: Settings) -> PersistenceSink:
    """Build the sink named by ``settings.persistence_backend``."""
    if settings.persistence_backend == "memory":
        logger.warning("Using in-memory persistence; data will not survive restarts")
        return InMemoryPersistenceSink()

    db_display = settings.database_url.split("@")[-1]
    logger.info("Using SQL persistence: %s", db_display)
    engine = create_database_engine(settings.database_url)
    create_tables(engine)
    return SQLAlchemyPersistenceSink(create_session_factory(engine))
