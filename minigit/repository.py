"""Creating a repository and staging files into it."""

from __future__ import annotations

import json
import os
from pathlib import Path

from minigit.blob import create_blob
from minigit.errors import MinigitError
from minigit.fileio import read_file

MGIT_DIR = ".minigit"
DEFAULT_BRANCH = "main"


class Repository:
    """A minigit repository whose working tree is ``root``."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.mgit_dir = self.root / MGIT_DIR
        self.commits_dir = self.mgit_dir / "commits"
        self.branches_dir = self.mgit_dir / "branches"
        self.blobs_dir = self.mgit_dir / "blobs"
        self.head_file = self.mgit_dir / "HEAD"
        self.staging_file = self.mgit_dir / "staging_area.json"

    def is_initialized(self) -> bool:
        """Return True if the repository directory, commits and HEAD exist."""
        return (
            self.mgit_dir.exists()
            and self.commits_dir.exists()
            and self.head_file.exists()
        )

    def init(self) -> bool:
        """Create an empty repository.

        Returns False, changing nothing, if the repository directory already
        exists, and True once a new repository has been created.
        """
        if self.mgit_dir.exists():
            return False
        try:
            for directory in (self.branches_dir, self.commits_dir, self.blobs_dir):
                directory.mkdir(parents=True, exist_ok=True)
            self.head_file.write_text(DEFAULT_BRANCH, encoding="utf-8")
            (self.branches_dir / DEFAULT_BRANCH).write_text("", encoding="utf-8")
            self.staging_file.write_text("{}", encoding="utf-8")
        except OSError as exc:
            raise MinigitError(f"Error initializing repository: {exc}") from exc
        return True

    def _read_staging(self) -> dict[str, str]:
        text = read_file(self.staging_file)
        if not text:
            return {}
        try:
            staging = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MinigitError(f"Cannot read staging area: {exc}") from exc
        if not isinstance(staging, dict):
            raise MinigitError("Cannot read staging area: expected an object")
        return staging

    def add(self, file: str | os.PathLike[str]) -> str:
        """Store ``file`` as a blob, stage it and return the blob hash."""
        name = os.fspath(file)
        if not (self.root / name).is_file():
            raise MinigitError(f"File not found: {name}")

        blob_hash = create_blob(name, self.root)
        staging = self._read_staging()
        staging[name] = blob_hash
        self.staging_file.write_text(
            json.dumps(staging, indent=4, sort_keys=True, ensure_ascii=False),
            encoding="utf-8",
        )
        return blob_hash