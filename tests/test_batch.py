"""Tests for tabular hashing."""

import logging

import pandas as pd

from xcodehash.core.batch import TABLE_COLUMNS, find_collisions, identifier_table
from xcodehash.core.hasher import IdentifierHasher, hash_string


def test_identifier_table_preserves_order():
    paths = ["/Users/example/Projects", "", "/Users/example/Project"]
    table = identifier_table(paths)
    assert list(table.columns) == TABLE_COLUMNS
    assert table["input"].tolist() == paths
    assert table["identifier"].tolist() == [hash_string(path) for path in paths]


def test_identifier_table_empty():
    table = identifier_table([])
    assert table.empty
    assert list(table.columns) == TABLE_COLUMNS
    assert find_collisions(table).empty


def test_distinct_paths_do_not_collide():
    paths = [f"/Users/example/Project{i}" for i in range(200)]
    table = identifier_table(paths)
    assert table["identifier"].is_unique
    assert find_collisions(table).empty


def test_repeated_input_is_not_a_collision():
    table = identifier_table(["/a", "/a", "/b"])
    assert find_collisions(table).empty


def test_collisions_reported(caplog):
    hasher = IdentifierHasher(digest=lambda data: bytes(16))
    logger = logging.getLogger("xcodehash")
    logger.addHandler(caplog.handler)
    try:
        table = identifier_table(["/b", "/a", "/a"], hasher=hasher)
    finally:
        logger.removeHandler(caplog.handler)
    collisions = find_collisions(table)
    assert collisions["input"].tolist() == ["/a", "/b"]
    assert set(collisions["identifier"]) == {"a" * 28}
    assert "shared by distinct inputs" in caplog.text


def test_find_collisions_on_handmade_table():
    table = pd.DataFrame(
        {
            "input": ["x", "y", "z", "w"],
            "identifier": ["id2", "id1", "id2", "id3"],
        }
    )
    collisions = find_collisions(table)
    assert collisions.to_dict(orient="records") == [
        {"input": "x", "identifier": "id2"},
        {"input": "z", "identifier": "id2"},
    ]
