"""
MIT License

Hasher configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..util.digest import DigestFn, resolve_digest


@dataclass(frozen=True)
class HasherConfig:
    algorithm: str = "md5"

    def digest_fn(self) -> DigestFn:
        return resolve_digest(self.algorithm)


def make_hasher_config(algorithm: str = "md5") -> HasherConfig:
    """Build a :class:`HasherConfig`, failing early on unknown algorithms."""
    name = algorithm.strip().lower()
    if not name:
        raise ValueError("Digest algorithm must not be empty")
    resolve_digest(name)
    return HasherConfig(algorithm=name)


DEFAULT_CONFIG = HasherConfig()


__all__ = ["HasherConfig", "make_hasher_config", "DEFAULT_CONFIG"]
