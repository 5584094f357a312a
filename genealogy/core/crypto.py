"""bcrypt password hashing for account sign-in.

The work factor comes from ``settings.security.bcrypt_rounds``. Hashes
made with a different factor still verify, and :func:`needs_rehash`
tells the caller to replace them after a successful sign-in.
"""

from __future__ import annotations

from typing import Optional

import bcrypt

from genealogy.core.config import get_settings

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    data = password.encode("utf-8")
    if len(data) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Passwords are limited to {BCRYPT_MAX_BYTES} bytes")
    return data


def _rounds(rounds: Optional[int]) -> int:
    return rounds if rounds is not None else get_settings().security.bcrypt_rounds


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    salt = bcrypt.gensalt(rounds=_rounds(rounds))
    return bcrypt.hashpw(_encode(password), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
    except ValueError:
        return False


def needs_rehash(password_hash: str, rounds: Optional[int] = None) -> bool:
    """True when ``password_hash`` was made with another work factor."""
    try:
        cost = int(password_hash.split("$")[2])
    except (IndexError, ValueError):
        return True
    return cost != _rounds(rounds)


__all__ = ["BCRYPT_MAX_BYTES", "hash_password", "needs_rehash", "verify_password"]
