from __future__ import annotations

from typing import Optional

from passlib.hash import hex_md5
from passlib.utils import consteq


def hash_one_way(plain_password: str) -> str:
    """Hash a plaintext the way stored admin passwords were hashed.

    The stored credential is the lowercase MD5 hex digest of the UTF-8
    encoded password. Changing the algorithm or the encoding invalidates
    every stored password.
    """
    return hex_md5.hash(plain_password)


def verify_password(plain_password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    return consteq(hash_one_way(plain_password), password_hash)


class AccessDeniedError(Exception):
    pass


class AdminNotFoundError(LookupError):
    pass
