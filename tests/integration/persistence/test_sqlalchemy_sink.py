"""Tests for the SQLAlchemy persistence sink against a SQLite file."""

import random

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from chat.application.store import DataStore, SeedConfig
from chat.domain.chat import (
    Conversation,
    DataStoreInitializationError,
    Message,
    PersistenceWriteError,
    User,
)
from chat.infrastructure.persistence.sqlalchemy import (
    ConversationModel,
    MessageModel,
    SQLAlchemyPersistenceSink,
    UserModel,
    create_database_engine,
    create_session_factory,
    create_tables,
)
from chat_auth import PasswordHashingService
from chat_config import clear_settings_cache


@pytest.fixture
def engine(tmp_path):
    engine = create_database_engine(f"sqlite:///{tmp_path / 'chat.db'}")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sink(engine) -> SQLAlchemyPersistenceSink:
    return SQLAlchemyPersistenceSink(create_session_factory(engine))


def _count(engine, model) -> int:
    with Session(engine) as session:
        return session.scalar(select(func.count()).select_from(model))


class TestSQLAlchemyPersistenceSink:
    def test_persists_each_entity_type(self, engine, sink):
        user = User.create("Ada", password_hash="$2b$04$hash", about="Write about you...")
        conversation = Conversation.create(user.id, "Conversation_1")
        message = Message.create(conversation.id, user.id, "quia dolor sit amet")

        sink.write_through(user)
        sink.write_through(conversation)
        sink.write_through(message)

        with Session(engine) as session:
            stored_user = session.get(UserModel, user.id)
            stored_conversation = session.get(ConversationModel, conversation.id)
            stored_message = session.get(MessageModel, message.id)

        assert stored_user.name == "Ada"
        assert stored_user.password_hash == "$2b$04$hash"
        assert stored_conversation.owner_id == user.id
        assert stored_conversation.title == "Conversation_1"
        assert stored_message.conversation_id == conversation.id
        assert stored_message.author_id == user.id
        assert stored_message.content == "quia dolor sit amet"

    def test_duplicate_name_is_write_error(self, engine, sink):
        sink.write_through(User.create("Ada", password_hash="x"))
        duplicate = User.create("Ada", password_hash="y")

        with pytest.raises(PersistenceWriteError) as exc_info:
            sink.write_through(duplicate)

        assert exc_info.value.entity_id == duplicate.id
        assert _count(engine, UserModel) == 1

    def test_dangling_reference_is_write_error(self, engine, sink):
        orphan = Conversation.create(User.create("Ghost", password_hash="x").id, "C")

        with pytest.raises(PersistenceWriteError):
            sink.write_through(orphan)

        assert _count(engine, ConversationModel) == 0


class TestSeedingIntoDatabase:
    def test_seeded_store_matches_database(self, engine, sink):
        store = DataStore(
            sink=sink,
            password_service=PasswordHashingService(rounds=4),
            config=SeedConfig(user_count=3, conversation_count=2, message_count=5),
            rng=random.Random(5),
        )

        store.initialize()

        assert _count(engine, UserModel) == 3
        assert _count(engine, ConversationModel) == 2
        assert _count(engine, MessageModel) == 5
        with Session(engine) as session:
            names = set(session.scalars(select(UserModel.name)))
        assert names == set(store.get_all_users_by_name())

    def test_database_failure_aborts_seeding(self, engine, sink):
        # Conversations can no longer be written
        ConversationModel.__table__.drop(engine)
        store = DataStore(
            sink=sink,
            password_service=PasswordHashingService(rounds=4),
            config=SeedConfig(user_count=2, conversation_count=1, message_count=1),
        )

        with pytest.raises(DataStoreInitializationError) as exc_info:
            store.initialize()

        assert isinstance(exc_info.value.__cause__, PersistenceWriteError)
        assert len(store.get_all_users_by_id()) == 2
        assert store.get_all_conversations() == ()
        assert store.get_all_messages() == ()


class TestIsEmpty:
    def test_new_database_is_empty(self, sink):
        assert sink.is_empty() is True

    def test_not_empty_once_a_user_is_stored(self, sink):
        sink.write_through(User.create("Ada", password_hash="x"))

        assert sink.is_empty() is False


class TestRestartOverPopulatedDatabase:
    """Default wiring started twice against the same SQLite file."""

    def test_second_start_skips_seeding(self, tmp_path, monkeypatch):
        db_file = tmp_path / "chat.db"
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
        monkeypatch.setenv("SEED_RANDOM_SEED", "1")
        monkeypatch.setenv("SEED_USER_COUNT", "3")
        monkeypatch.setenv("SEED_CONVERSATION_COUNT", "2")
        monkeypatch.setenv("SEED_MESSAGE_COUNT", "4")
        clear_settings_cache()

        first = DataStore.get_instance()
        DataStore.reset_instance()
        second = DataStore.get_instance()

        assert len(first.get_all_users_by_id()) == 3
        assert second is not first
        assert second.is_valid()
        assert second.get_all_users_by_id() == {}
        assert second.get_all_messages() == ()

        engine = create_database_engine(f"sqlite:///{db_file}")
        try:
            assert _count(engine, UserModel) == 3
            assert _count(engine, ConversationModel) == 2
            assert _count(engine, MessageModel) == 4
        finally:
            engine.dispose()
