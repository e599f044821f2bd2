"""
Password hashing with PBKDF2-SHA256.

Hashes are stored as "<hex_salt>:<hex_key>".
"""

import hashlib
import hmac
import os

_ITERATIONS = 100_000
_SALT_BYTES = 32


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    salt = os.urandom(_SALT_BYTES)
    key = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _ITERATIONS)
    return salt.hex() + ":" + key.hex()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash. Malformed hashes never match."""
    try:
        salt_hex, key_hex = hashed_password.split(":", 1)
        salt = bytes.fromhex(salt_hex)
        expected_key = bytes.fromhex(key_hex)
    except (ValueError, TypeError):
        return False
    actual_key = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, _ITERATIONS)
    return hmac.compare_digest(actual_key, expected_key)
