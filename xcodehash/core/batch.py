"""
MIT License

Tabular identifier hashing for many inputs at once.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from ..util.logging import get_logger
from .hasher import IdentifierHasher

LOGGER = get_logger(__name__)

TABLE_COLUMNS = ["input", "identifier"]


def identifier_table(inputs: Iterable[str], hasher: Optional[IdentifierHasher] = None) -> pd.DataFrame:
    """
    Hash every input and return a DataFrame in input order.

    Parameters
    ----------
    inputs:
        Strings to hash, typically project paths.
    hasher:
        Hasher to use; defaults to the MD5 hasher.
    """
    texts = list(inputs)
    hasher = hasher or IdentifierHasher()
    identifiers = hasher.hash_many(texts)
    table = pd.DataFrame({"input": texts, "identifier": identifiers}, columns=TABLE_COLUMNS)
    collisions = find_collisions(table)
    if not collisions.empty:
        LOGGER.warning(
            "%d identifiers shared by distinct inputs", collisions["identifier"].nunique()
        )
    return table


def find_collisions(table: pd.DataFrame) -> pd.DataFrame:
    """Return rows whose identifier belongs to more than one distinct input."""
    if table.empty:
        return table.iloc[0:0][TABLE_COLUMNS]
    distinct = table.drop_duplicates(TABLE_COLUMNS)
    counts = distinct.groupby("identifier")["input"].transform("count")
    clashing = distinct[counts > 1]
    return clashing.sort_values(["identifier", "input"]).reset_index(drop=True)[TABLE_COLUMNS]


__all__ = ["TABLE_COLUMNS", "identifier_table", "find_collisions"]
