"""Tests for hashing utilities."""

import pytest

from src.utils.hashing import HashingService


def test_hash_password_creates_different_hashes_for_same_input():
    """Hashing the same password twice produces different hashes due to salt."""
    password = "test_password_123"

    hash1 = HashingService.hash_password(password)
    hash2 = HashingService.hash_password(password)

    assert hash1 != hash2
    assert hash1.startswith("$2b$")
    assert hash2.startswith("$2b$")


def test_verify_password_with_correct_password_returns_true():
    password = "secure_password_456"
    hashed_password = HashingService.hash_password(password)

    assert HashingService.verify_password(password, hashed_password) is True


def test_verify_password_with_incorrect_password_returns_false():
    password = "secure_password_789"
    hashed_password = HashingService.hash_password(password)

    assert HashingService.verify_password("wrong_password_123", hashed_password) is False


def test_verify_password_with_invalid_hash_returns_false():
    """Verification fails gracefully with an invalid hash format."""
    assert HashingService.verify_password("password", "not_a_valid_bcrypt_hash") is False


def test_long_passwords_are_not_truncated():
    """Passwords differing only after byte 72 must not verify against each other."""
    base = "p" * 80
    hashed = HashingService.hash_password(base + "a")

    assert HashingService.verify_password(base + "a", hashed) is True
    assert HashingService.verify_password(base + "b", hashed) is False


@pytest.mark.parametrize(
    "password",
    [
        "short",
        "password-with-special-chars!@#$%^&*()",
        "password_with_unicode_ñ_characters_🔑",
        "123456",
    ],
)
def test_hash_and_verify_with_various_password_formats(password: str):
    hashed = HashingService.hash_password(password)
    assert HashingService.verify_password(password, hashed) is True
    assert HashingService.verify_password(password + "x", hashed) is False
