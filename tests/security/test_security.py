"""
Unit tests for password hashing and token handling.
"""

import logging
from datetime import timedelta
from types import SimpleNamespace

import pytest
from jose import jwt

from movielist.errors import UnauthorizedError
from movielist.security.passwords import hash_password, verify_password
from movielist.security.tokens import create_token, decode_token


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("password1")
        assert hashed != "password1"
        assert verify_password("password1", hashed)
        assert not verify_password("password2", hashed)

    def test_hashes_are_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_malformed_hash_never_matches(self):
        assert not verify_password("password1", "not-a-hash")
        assert not verify_password("password1", "zz:zz")


class TestTokens:

    def test_round_trip_claims(self):
        user = SimpleNamespace(username="alice", is_admin=False)
        claims = decode_token(create_token(user))
        assert claims["username"] == "alice"
        assert claims["isAdmin"] is False
        assert claims["exp"] > claims["iat"]

    def test_admin_claim(self):
        user = SimpleNamespace(username="root", is_admin=True)
        assert decode_token(create_token(user))["isAdmin"] is True

    def test_expired_token(self):
        user = SimpleNamespace(username="alice", is_admin=False)
        token = create_token(user, expires_delta=timedelta(seconds=-10))
        with pytest.raises(UnauthorizedError, match="expired"):
            decode_token(token)

    def test_forged_token(self):
        forged = jwt.encode({"username": "alice", "isAdmin": True}, "wrong-key", algorithm="HS256")
        with pytest.raises(UnauthorizedError, match="Invalid"):
            decode_token(forged)

    def test_garbage_token(self):
        with pytest.raises(UnauthorizedError):
            decode_token("not.a.token")

    def test_secret_key_from_env(self, monkeypatch):
        user = SimpleNamespace(username="alice", is_admin=False)
        token = create_token(user)
        monkeypatch.setenv("SECRET_KEY", "another-key")
        with pytest.raises(UnauthorizedError):
            decode_token(token)

    def test_invalid_token_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="movielist.security.tokens"):
            with pytest.raises(UnauthorizedError):
                decode_token("not.a.token")
        record = caplog.records[-1]
        assert record.msg == "Invalid token: %s"
        assert record.getMessage().startswith("Invalid token: ")
