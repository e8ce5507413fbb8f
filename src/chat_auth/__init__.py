"""Chat Auth - credential hashing for chat users.

Architecture:
    chat_auth/
    ├── services/           # Pure logic (password hashing)
    └── exceptions.py       # Auth exceptions

Usage:
    from chat_auth import PasswordHashingService
"""

from chat_auth.exceptions import AuthError, WeakPasswordError
from chat_auth.services import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "AuthError",
    "WeakPasswordError",
]
