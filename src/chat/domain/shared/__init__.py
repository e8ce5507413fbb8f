"""Shared domain building blocks."""

from chat.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)
from chat.domain.shared.time import utc_now

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "utc_now",
]
