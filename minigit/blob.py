"""Content-addressed storage of file snapshots."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.errors import NotInitializedError
from minigit.hashing import sha1

MGIT_DIR = ".minigit"


def create_blob(filepath: str | os.PathLike[str], root: str | os.PathLike[str] = ".") -> str:
    """Store the contents of ``filepath`` as a blob and return its hash.

    A relative ``filepath`` is taken relative to ``root``. An existing blob
    with the same hash is left untouched.
    """
    root_path = Path(root)
    source = root_path / filepath
    content = source.read_bytes()
    digest = sha1(content)

    blobs_dir = root_path / MGIT_DIR / "blobs"
    if not blobs_dir.is_dir():
        raise NotInitializedError()

    blob_path = blobs_dir / digest
    if not blob_path.exists():
        blob_path.write_bytes(content)
    return digest