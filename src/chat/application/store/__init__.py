"""Process-wide chat data store and its seeding pipeline."""

from chat.application.store.data_store import DataStore, SeedStats
from chat.application.store.seed_config import SeedConfig
from chat.application.store.seed_data import NAME_POOL

__all__ = [
    "NAME_POOL",
    "DataStore",
    "SeedConfig",
    "SeedStats",
]
