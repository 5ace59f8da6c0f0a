"""
MIT License

Path to identifier hashing, compatible with Xcode DerivedData folder names.

The input is MD5-hashed as UTF-8, the 16-byte digest is read as two unsigned
64-bit big-endian integers and each integer is written as 14 base-26 letters,
most significant digit first.
"""

from __future__ import annotations

import numbers
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..util.digest import DigestFn
from ..util.logging import get_logger
from .config import DEFAULT_CONFIG, HasherConfig
from .errors import InvalidPartitioningError

LOGGER = get_logger(__name__)

HALF_BYTES = 8
HALF_WIDTH = 14
IDENTIFIER_LENGTH = 2 * HALF_WIDTH

_BASE = np.uint64(26)
_FIRST_LETTER = ord("a")
_BIG_ENDIAN_U64 = np.dtype(">u8")
_U64_LIMIT = 1 << 64


def _halves(digest: bytes) -> np.ndarray:
    if len(digest) != 2 * HALF_BYTES:
        LOGGER.error("Cannot partition digest of %d bytes", len(digest))
        raise InvalidPartitioningError(len(digest))
    return np.frombuffer(digest, dtype=_BIG_ENDIAN_U64).astype(np.uint64)


def _encode_values(values: np.ndarray) -> str:
    """Encode each uint64 in ``values`` as 14 letters and join the blocks in order."""
    remaining = values.astype(np.uint64)
    digits = np.empty((remaining.size, HALF_WIDTH), dtype=np.uint8)
    # Least significant digit first, written from the right.
    for position in range(HALF_WIDTH - 1, -1, -1):
        digits[:, position] = (remaining % _BASE).astype(np.uint8)
        remaining //= _BASE
    return (digits + _FIRST_LETTER).tobytes().decode("ascii")


def split_digest(digest: bytes) -> Tuple[int, int]:
    """
    Split a 16-byte digest into two unsigned big-endian 64-bit integers.

    Raises
    ------
    InvalidPartitioningError
        If ``digest`` is not exactly 16 bytes long.
    """
    first, second = _halves(digest)
    return int(first), int(second)


def encode_half(value: int) -> str:
    """Return the 14-letter base-26 rendering of an unsigned 64-bit integer."""
    if not isinstance(value, numbers.Integral):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    value = int(value)
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"Value out of unsigned 64-bit range: {value}")
    return _encode_values(np.array([value], dtype=np.uint64))


class IdentifierHasher:
    """Derive 28-letter identifiers from strings."""

    def __init__(self, config: Optional[HasherConfig] = None, digest: Optional[DigestFn] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._digest = digest or self.config.digest_fn()

    def digest(self, text: str) -> bytes:
        return self._digest(text.encode("utf-8"))

    def hash(self, text: str) -> str:
        """
        Return the 28-letter identifier for ``text``.

        No Unicode normalization is applied, so NFC and NFD spellings of the
        same path yield different identifiers.
        """
        identifier = _encode_values(_halves(self.digest(text)))
        LOGGER.debug("Hashed %r -> %s", text, identifier)
        return identifier

    def hash_many(self, texts: Iterable[str]) -> List[str]:
        """Hash every entry of ``texts``, preserving order."""
        digests: Sequence[bytes] = [self.digest(text) for text in texts]
        if not digests:
            return []
        values = np.concatenate([_halves(digest) for digest in digests])
        encoded = _encode_values(values)
        return [
            encoded[offset : offset + IDENTIFIER_LENGTH]
            for offset in range(0, len(encoded), IDENTIFIER_LENGTH)
        ]


_DEFAULT_HASHER = IdentifierHasher()


def hash_string(text: str) -> str:
    """Return the Xcode-compatible identifier for ``text`` using MD5."""
    return _DEFAULT_HASHER.hash(text)


__all__ = [
    "HALF_WIDTH",
    "IDENTIFIER_LENGTH",
    "IdentifierHasher",
    "encode_half",
    "hash_string",
    "split_digest",
]
