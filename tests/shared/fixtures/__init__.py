"""Shared pytest fixtures and builders."""

from tests.shared.fixtures.stores import (
    RecordingSink,
    build_store,
    fast_password_service,
)

__all__ = [
    "RecordingSink",
    "build_store",
    "fast_password_service",
]
