"""Process-wide chat data store.

On first access the store seeds itself with synthetic users, conversations
and messages. Generation runs in three strict phases (users, then
conversations, then messages) so every reference points at an entity that
already exists. Each entity is written through to the persistence sink
before it is added to the in-memory collections.

Usage:
    store = DataStore.get_instance()
    store.get_all_users_by_name()["Ada"]
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar
from uuid import UUID

from chat.application.store.seed_config import SeedConfig
from chat.application.store.seed_data import (
    NAME_POOL,
    conversation_title,
    random_message_content,
)
from chat.domain.chat import (
    ConfigurationError,
    Conversation,
    DataStoreInitializationError,
    Message,
    PersistenceSink,
    PersistenceWriteError,
    ReferentialPreconditionError,
    User,
)
from chat.domain.shared.exceptions import DomainException
from chat_auth import PasswordHashingService, WeakPasswordError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedStats:
    """Statistics about what was seeded."""

    users_created: int = 0
    conversations_created: int = 0
    messages_created: int = 0

    @property
    def total(self) -> int:
        return self.users_created + self.conversations_created + self.messages_created


class DataStore:
    """In-memory users, conversations and messages backed by a write-through sink.

    Instances can be built directly (explicit service object) or obtained
    through ``get_instance()``, which constructs and seeds the process-wide
    store exactly once even under concurrent first access.
    """

    _instance: ClassVar[DataStore | None] = None
    _failure: ClassVar[DomainException | None] = None
    _factory: ClassVar[Callable[[], DataStore] | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        sink: PersistenceSink,
        password_service: PasswordHashingService,
        config: SeedConfig | None = None,
        rng: random.Random | None = None,
        name_pool: Sequence[str] = NAME_POOL,
    ) -> None:
        self._sink = sink
        self._password_service = password_service
        self._config = config or SeedConfig()
        self._rng = rng or random.Random(self._config.random_seed)
        self._name_pool = tuple(dict.fromkeys(name_pool))

        self._users_by_id: dict[UUID, User] = {}
        self._users_by_name: dict[str, User] = {}
        self._conversations: list[Conversation] = []
        self._messages: list[Message] = []

        self._users_by_id_view = MappingProxyType(self._users_by_id)
        self._users_by_name_view = MappingProxyType(self._users_by_name)

        self._init_lock = threading.Lock()
        self._stats: SeedStats | None = None
        self._failed = False

    # -------------------------------------------------------------------------
    # Process-wide instance
    # -------------------------------------------------------------------------

    @classmethod
    def get_instance(cls) -> DataStore:
        """Return the process-wide store, constructing and seeding it once.

        The instance is published only after seeding completed, under the
        class lock, so every caller observes the fully populated store.

        Raises
        ------
        ConfigurationError
            On the first call, if the seeding options are inconsistent
        DataStoreInitializationError
            If seeding failed, on this or any later call
        """
        instance = cls._instance
        if instance is not None:
            return instance

        with cls._lock:
            if cls._instance is not None:
                return cls._instance

            if cls._failure is not None:
                msg = f"Data store failed to initialize: {cls._failure.message}"
                raise DataStoreInitializationError(msg) from cls._failure

            factory = cls._factory or _build_default_store
            try:
                store = factory()
                store.initialize()
            except DomainException as exc:
                cls._failure = exc
                raise
            except Exception as exc:
                msg = f"Data store failed to initialize: {exc}"
                failure = DataStoreInitializationError(msg)
                cls._failure = failure
                raise failure from exc

            cls._instance = store
            return store

    @classmethod
    def configure(cls, factory: Callable[[], DataStore]) -> None:
        """Set the factory used to build the process-wide store.

        Must be called before the first ``get_instance()``.
        """
        with cls._lock:
            if cls._instance is not None:
                msg = "Data store is already initialized"
                raise RuntimeError(msg)
            cls._factory = factory

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the process-wide store, any recorded failure and the factory."""
        with cls._lock:
            cls._instance = None
            cls._failure = None
            cls._factory = None

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    def initialize(self) -> SeedStats:
        """Seed this store if enabled and the backend is empty. Runs at most once.

        Seeding is skipped when the sink already holds users. Any failure
        during seeding aborts the whole run; the store then stays
        unusable rather than being reseeded over a partially written backend.

        Raises
        ------
        ConfigurationError
            If the seeding options are inconsistent (nothing is written)
        DataStoreInitializationError
            If a write-through failed, or a previous run already failed
        """
        with self._init_lock:
            if self._failed:
                msg = "Data store failed to initialize earlier and cannot be reused"
                raise DataStoreInitializationError(msg)
            if self._stats is not None:
                return self._stats

            if not self._config.enabled:
                logger.info("Synthetic data disabled, starting with an empty store")
                self._stats = SeedStats()
                return self._stats

            self._validate_config()
            try:
                if not self._sink.is_empty():
                    logger.info("Persistence backend already holds data, skipping seeding")
                    self._stats = SeedStats()
                    return self._stats
                self._stats = self._seed()
            except PersistenceWriteError as e:
                self._failed = True
                logger.error("Seeding aborted: %s", e.message)
                msg = f"Data store failed to initialize: {e.message}"
                raise DataStoreInitializationError(msg) from e
            except Exception:
                self._failed = True
                logger.exception("Seeding aborted")
                raise
            return self._stats

    def is_valid(self) -> bool:
        """Whether the store finished initialization and can be read."""
        return self._stats is not None and not self._failed

    def _validate_config(self) -> None:
        self._config.validate(len(self._name_pool))
        try:
            self._password_service.validate_strength(self._config.user_password)
        except WeakPasswordError as e:
            msg = f"Seed user password rejected: {e.message}"
            raise ConfigurationError(msg) from e

    def _seed(self) -> SeedStats:
        logger.info(
            "Seeding data store (%d users, %d conversations, %d messages)",
            self._config.user_count,
            self._config.conversation_count,
            self._config.message_count,
        )
        stats = SeedStats(
            users_created=self._add_random_users(),
            conversations_created=self._add_random_conversations(),
            messages_created=self._add_random_messages(),
        )
        logger.info("Data store seeded with %d entities", stats.total)
        return stats

    # -------------------------------------------------------------------------
    # Generation phases
    # -------------------------------------------------------------------------

    def _add_random_users(self) -> int:
        names = list(self._name_pool)
        self._rng.shuffle(names)

        # No password pool: every user gets the placeholder secret under a fresh salt
        for name in names[: self._config.user_count]:
            password_hash = self._password_service.hash(
                self._config.user_password,
                self._password_service.generate_salt(),
            )
            user = User.create(
                name=name,
                password_hash=password_hash,
                about=self._config.user_about,
            )
            self._sink.write_through(user)
            self._index_user(user)

        logger.info("Created %d users", len(self._users_by_id))
        return len(self._users_by_id)

    def _add_random_conversations(self) -> int:
        if not self._config.conversation_count:
            return 0
        self._require(bool(self._users_by_id), "Conversation", "user")

        owners = list(self._users_by_id.values())
        for sequence in range(1, self._config.conversation_count + 1):
            owner = self._rng.choice(owners)
            conversation = Conversation.create(
                owner_id=owner.id,
                title=conversation_title(sequence),
            )
            self._sink.write_through(conversation)
            self._conversations.append(conversation)
            logger.debug("Created %s for %s", conversation.title, owner.name)

        logger.info("Created %d conversations", len(self._conversations))
        return len(self._conversations)

    def _add_random_messages(self) -> int:
        if not self._config.message_count:
            return 0
        self._require(bool(self._conversations), "Message", "conversation")
        self._require(bool(self._users_by_id), "Message", "user")

        authors = list(self._users_by_id.values())
        for _ in range(self._config.message_count):
            conversation = self._rng.choice(self._conversations)
            author = self._rng.choice(authors)
            message = Message.create(
                conversation_id=conversation.id,
                author_id=author.id,
                content=random_message_content(self._rng),
            )
            self._sink.write_through(message)
            self._messages.append(message)

        logger.info("Created %d messages", len(self._messages))
        return len(self._messages)

    def _index_user(self, user: User) -> None:
        self._users_by_id[user.id] = user
        self._users_by_name[user.name] = user
        logger.debug("Created user: %s (%s)", user.name, user.id)

    @staticmethod
    def _require(present: bool, phase: str, missing: str) -> None:
        if not present:
            raise ReferentialPreconditionError(phase, missing)

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    def get_all_users_by_id(self) -> Mapping[UUID, User]:
        return self._users_by_id_view

    def get_all_users_by_name(self) -> Mapping[str, User]:
        return self._users_by_name_view

    def get_all_conversations(self) -> Sequence[Conversation]:
        """All conversations in generation order."""
        return tuple(self._conversations)

    def get_all_messages(self) -> Sequence[Message]:
        """All messages in generation order."""
        return tuple(self._messages)


def _build_default_store() -> DataStore:
    """Build a store from application settings."""
    from chat.infrastructure.persistence import create_persistence_sink
    from chat_config import get_settings

    settings = get_settings()
    return DataStore(
        sink=create_persistence_sink(settings),
        password_service=PasswordHashingService(rounds=settings.password_hash_rounds),
        config=SeedConfig.from_settings(settings),
    )
