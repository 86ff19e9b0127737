"""Tests for the PBKDF2 password hasher."""

import pytest


class TestPbkdf2PasswordHasher:
    def test_hash_verifies_and_is_salted(self, password_hasher):
        first = password_hasher.hash("secret123")
        second = password_hasher.hash("secret123")

        assert first != second
        assert first.startswith("pbkdf2_sha256$1000$")
        assert password_hasher.verify("secret123", first)
        assert not password_hasher.verify("Secret123", first)

    @pytest.mark.parametrize(
        "stored",
        ["", "plain-text", "md5$1000$abcd$ef", "pbkdf2_sha256$many$zz$zz"],
    )
    def test_malformed_hashes_never_verify(self, password_hasher, stored):
        assert password_hasher.verify("secret123", stored) is False
