"""Seeding options for the data store."""

from dataclasses import dataclass

from chat.application.store.seed_data import DEFAULT_ABOUT
from chat.domain.chat.exceptions import ConfigurationError
from chat_config.settings import Settings


@dataclass(frozen=True)
class SeedConfig:
    """What the data store generates on first access."""

    enabled: bool = True
    user_count: int = 9
    conversation_count: int = 10
    message_count: int = 100
    user_password: str = "password"
    user_about: str = DEFAULT_ABOUT
    random_seed: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "SeedConfig":
        return cls(
            enabled=settings.seed_enabled,
            user_count=settings.seed_user_count,
            conversation_count=settings.seed_conversation_count,
            message_count=settings.seed_message_count,
            user_password=settings.seed_user_password.get_secret_value(),
            random_seed=settings.seed_random_seed,
        )

    def validate(self, name_pool_size: int) -> None:
        """Reject counts that cannot produce a consistent dataset.

        Conversation and message counts have no upper bound.

        Raises
        ------
        ConfigurationError
            If a count is negative, exceeds the unique-name pool, or asks for
            entities whose prerequisites would never be generated
        """
        counts = {
            "user_count": self.user_count,
            "conversation_count": self.conversation_count,
            "message_count": self.message_count,
        }
        for name, value in counts.items():
            if value < 0:
                msg = f"{name} cannot be negative (got {value})"
                raise ConfigurationError(msg, counts)

        if self.user_count > name_pool_size:
            msg = (
                f"user_count {self.user_count} exceeds the {name_pool_size} "
                "unique names available"
            )
            raise ConfigurationError(msg, counts)

        if self.conversation_count and not self.user_count:
            msg = "Conversations need at least one user to own them"
            raise ConfigurationError(msg, counts)

        if self.message_count and not (self.conversation_count and self.user_count):
            msg = "Messages need at least one conversation and one user"
            raise ConfigurationError(msg, counts)
