"""
MIT License

Exceptions raised while deriving identifiers.
"""

from __future__ import annotations


class HashingError(ValueError):
    """Base class for identifier hashing failures."""


class InvalidPartitioningError(HashingError):
    """The digest could not be split into two 8-byte halves."""

    def __init__(self, digest_size: int) -> None:
        self.digest_size = digest_size
        super().__init__(f"digest of {digest_size} bytes cannot be split into two 8-byte halves")


__all__ = ["HashingError", "InvalidPartitioningError"]
