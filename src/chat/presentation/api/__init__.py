"""HTTP API exposing the data store's read accessors."""

from chat.presentation.api.app import create_app

__all__ = ["create_app"]
