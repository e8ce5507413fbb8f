"""Authentication services."""

from chat_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
]
