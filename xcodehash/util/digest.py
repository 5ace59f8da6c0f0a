"""
MIT License

Digest primitives backing identifier hashing.
"""

from __future__ import annotations

import hashlib
from typing import Callable

DigestFn = Callable[[bytes], bytes]

MD5_DIGEST_SIZE = 16


def md5_digest(data: bytes) -> bytes:
    """Return the raw 16-byte MD5 digest of ``data``."""
    # Used as a mixing function only, so FIPS builds must not refuse it.
    return hashlib.md5(data, usedforsecurity=False).digest()


def resolve_digest(algorithm: str) -> DigestFn:
    """
    Return a callable producing the raw digest for a ``hashlib`` algorithm.

    Parameters
    ----------
    algorithm:
        Name understood by :func:`hashlib.new`, e.g. ``md5`` or ``sha1``.
    """
    if algorithm == "md5":
        return md5_digest
    # shake_* digests need an explicit length and have no fixed size.
    if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake_"):
        raise ValueError(f"Unsupported digest algorithm: {algorithm}")

    def _digest(data: bytes) -> bytes:
        return hashlib.new(algorithm, data, usedforsecurity=False).digest()

    return _digest


__all__ = ["DigestFn", "MD5_DIGEST_SIZE", "md5_digest", "resolve_digest"]
