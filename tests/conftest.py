"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (in-memory sink)
    ├── integration/       # Tests against a real SQLAlchemy database (SQLite file)
    └── shared/            # Shared fixtures and utilities

Every test runs against default settings (low bcrypt rounds) and a fresh
process-wide data store.
"""

import pytest

from chat.application.store import DataStore
from chat_config import clear_settings_cache

_SETTINGS_ENV_VARS = (
    "SEED_ENABLED",
    "SEED_USER_COUNT",
    "SEED_CONVERSATION_COUNT",
    "SEED_MESSAGE_COUNT",
    "SEED_USER_PASSWORD",
    "SEED_RANDOM_SEED",
    "PASSWORD_HASH_ROUNDS",
    "PERSISTENCE_BACKEND",
    "DATABASE_URL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings and a fresh data store."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")  # Low rounds for fast tests
    clear_settings_cache()
    DataStore.reset_instance()
    yield
    DataStore.reset_instance()
    clear_settings_cache()
