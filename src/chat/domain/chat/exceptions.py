"""Chat data store exceptions.

ConfigurationError and PersistenceWriteError are recoverable only by fixing
configuration or the backend; both end a seeding run.
ReferentialPreconditionError is a programming error and is never caught.
"""

from typing import Any
from uuid import UUID

from chat.domain.shared.exceptions import DomainException, ErrorCode


class ConfigurationError(DomainException):
    """Raised when seeding options cannot produce a consistent dataset."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.INVALID_CONFIGURATION, details)


class PersistenceWriteError(DomainException):
    """Raised by a persistence sink when a write-through is not acknowledged."""

    def __init__(
        self,
        entity_type: str,
        entity_id: UUID,
        reason: str = "write-through failed",
    ) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"Could not persist {entity_type} {entity_id}: {reason}",
            ErrorCode.PERSISTENCE_WRITE_FAILED,
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DataStoreInitializationError(DomainException):
    """Raised when the data store could not be initialized.

    The store is unusable afterwards; callers must not serve requests that
    depend on it.
    """

    def __init__(self, message: str = "Data store failed to initialize") -> None:
        super().__init__(message, ErrorCode.STORE_UNAVAILABLE)


class ReferentialPreconditionError(AssertionError):
    """A generation phase ran before the collection it draws from was filled."""

    def __init__(self, phase: str, missing: str) -> None:
        self.phase = phase
        self.missing = missing
        super().__init__(f"{phase} phase requires at least one {missing}")
