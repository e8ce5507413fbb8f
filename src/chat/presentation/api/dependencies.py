"""FastAPI dependency injection for the chat API."""

from typing import Annotated

from fastapi import Depends

from chat.application.store import DataStore


def get_data_store() -> DataStore:
    """Return the process-wide data store.

    Raises ``DataStoreInitializationError`` if seeding failed, which the
    exception handlers turn into a 503.
    """
    return DataStore.get_instance()


Store = Annotated[DataStore, Depends(get_data_store)]
