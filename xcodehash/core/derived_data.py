"""
MIT License

Xcode DerivedData folder naming.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional

from .hasher import IdentifierHasher, hash_string


def project_name(project_path: str | PurePosixPath) -> str:
    """Return the project or workspace name as Xcode spells it in folder names."""
    name = PurePosixPath(project_path).stem
    return name.replace(" ", "_")


def derived_data_folder_name(
    project_path: str | PurePosixPath,
    hasher: Optional[IdentifierHasher] = None,
) -> str:
    """
    Return ``<ProjectName>-<identifier>`` for a ``.xcodeproj``/``.xcworkspace`` path.

    The path is treated as POSIX regardless of the host and is hashed in its
    :class:`~pathlib.PurePosixPath` spelling: a trailing separator is dropped,
    repeated separators collapse and ``.`` segments disappear. ``..`` is kept
    as written. Nothing is read from disk.
    """
    if not str(project_path).strip():
        raise ValueError("Project path must not be empty")
    normalized = str(PurePosixPath(project_path))
    identifier = hasher.hash(normalized) if hasher is not None else hash_string(normalized)
    return f"{project_name(normalized)}-{identifier}"


__all__ = ["project_name", "derived_data_folder_name"]
