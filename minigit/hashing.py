"""SHA-1 content hashing."""

from __future__ import annotations

import hashlib


def _as_bytes(content: str | bytes) -> bytes:
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


def sha1(content: str | bytes) -> str:
    """Return the lowercase hex SHA-1 digest of ``content``."""
    return hashlib.sha1(_as_bytes(content)).hexdigest()


def generate_hash(content: str | bytes) -> str:
    """Return the identifier used for commits: the hex SHA-1 of ``content``."""
    return sha1(content)