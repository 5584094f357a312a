"""
Password hashing for account sign-in.
"""

import pytest

from genealogy.core.crypto import BCRYPT_MAX_BYTES, hash_password, needs_rehash, verify_password


def test_hash_and_verify():
    password_hash = hash_password("secret123", rounds=4)
    assert verify_password("secret123", password_hash)
    assert not verify_password("secret124", password_hash)


def test_rounds_are_stored_in_the_hash():
    password_hash = hash_password("secret123", rounds=5)
    assert not needs_rehash(password_hash, rounds=5)
    assert needs_rehash(password_hash, rounds=6)


def test_malformed_hash():
    assert not verify_password("secret123", "not-a-bcrypt-hash")
    assert not verify_password("secret123", "")
    assert needs_rehash("not-a-bcrypt-hash", rounds=4)


def test_overlong_password_is_rejected():
    with pytest.raises(ValueError):
        hash_password("x" * (BCRYPT_MAX_BYTES + 1), rounds=4)
    assert not verify_password("x" * (BCRYPT_MAX_BYTES + 1), hash_password("secret123", rounds=4))
