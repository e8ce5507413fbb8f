"""Password hashing service using bcrypt.

The hash is a one-way transform of a secret and a per-call random salt;
plaintext secrets are never stored.
"""

import bcrypt

from chat_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for salted password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("password")
    >>> service.verify("password", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    # Password requirements
    MIN_LENGTH = 8
    MAX_LENGTH = 72  # bcrypt only looks at the first 72 bytes

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Seeding hashes one
            secret per generated user, so tests pass a low value here.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def generate_salt(self) -> bytes:
        """Return a fresh random bcrypt salt for the configured work factor."""
        return bcrypt.gensalt(rounds=self._rounds)

    def hash(self, password: str, salt: bytes | None = None) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash
        salt
            A salt from ``generate_salt()``; a fresh one is drawn when omitted

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt or self.generate_salt())
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a password against a previously produced hash."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was produced with a different work factor."""
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True
