"""Unit tests for PasswordHashingService."""

import pytest

from chat_auth import PasswordHashingService, WeakPasswordError


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("password")

        assert hashed.startswith("$2")
        assert len(hashed) >= 50

    def test_hash_never_contains_plaintext(self):
        hashed = self.service.hash("placeholder-secret")

        assert "placeholder-secret" not in hashed

    def test_verify_correct_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True

    def test_verify_incorrect_password(self):
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_same_password_gets_fresh_salt_each_time(self):
        """Hashing the same secret twice yields different hashes that both verify."""
        hash1 = self.service.hash("password")
        hash2 = self.service.hash("password")

        assert hash1 != hash2
        assert self.service.verify("password", hash1)
        assert self.service.verify("password", hash2)

    def test_explicit_salt_is_used(self):
        salt = self.service.generate_salt()

        assert self.service.hash("password", salt) == self.service.hash("password", salt)

    def test_salt_encodes_work_factor(self):
        assert self.service.generate_salt().startswith(b"$2b$04$")


class TestPasswordValidation:
    """Tests for password strength validation."""

    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_validate_empty_password_raises(self):
        with pytest.raises(WeakPasswordError, match="cannot be empty"):
            self.service.validate_strength("")

    def test_validate_short_password_raises(self):
        with pytest.raises(WeakPasswordError, match="at least 8 characters"):
            self.service.validate_strength("pass1")

    def test_validate_too_long_password_raises(self):
        with pytest.raises(WeakPasswordError, match="cannot exceed 72"):
            self.service.validate_strength("a" * 73)

    def test_hash_rejects_weak_password(self):
        with pytest.raises(WeakPasswordError):
            self.service.hash("short")


class TestNeedsRehash:
    def test_same_rounds_does_not_need_rehash(self):
        service = PasswordHashingService(rounds=4)

        assert service.needs_rehash(service.hash("password")) is False

    def test_different_rounds_needs_rehash(self):
        old = PasswordHashingService(rounds=4).hash("password")

        assert PasswordHashingService(rounds=5).needs_rehash(old) is True

    def test_garbage_hash_needs_rehash(self):
        assert PasswordHashingService(rounds=4).needs_rehash("garbage") is True
