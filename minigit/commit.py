"""Commit records and the store that reads and writes them."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from minigit.errors import MinigitError, NotInitializedError
from minigit.fileio import current_timestamp, read_file
from minigit.hashing import generate_hash

MGIT_DIR = ".minigit"
_STRING_FIELDS = ("hash", "parent", "message", "timestamp")


@dataclass
class CommitRecord:
    """A single commit: its identity, parent, message, time and staged files."""

    hash: str = ""
    parent: str = ""
    message: str = ""
    timestamp: str = ""
    files: dict[str, str] = field(default_factory=dict)

    def serialize(self) -> str:
        """Return the commit as indented JSON with keys in sorted order."""
        data = {
            "hash": self.hash,
            "parent": self.parent,
            "message": self.message,
            "timestamp": self.timestamp,
            "files": dict(self.files),
        }
        return json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False)

    @classmethod
    def deserialize(cls, content: str) -> "CommitRecord":
        """Build a commit from JSON produced by :meth:`serialize`."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise MinigitError(f"Malformed commit data: {exc}") from exc
        if not isinstance(data, dict):
            raise MinigitError("Malformed commit data: expected an object")

        values = {}
        for name in _STRING_FIELDS:
            if name not in data:
                raise MinigitError(f"Malformed commit data: missing '{name}'")
            if not isinstance(data[name], str):
                raise MinigitError(f"Malformed commit data: '{name}' is not a string")
            values[name] = data[name]

        files = data.get("files")
        if "files" not in data:
            raise MinigitError("Malformed commit data: missing 'files'")
        values["files"] = _string_map(files, "files")
        return cls(**values)


def _string_map(value: object, what: str) -> dict[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise MinigitError(f"Malformed {what}: expected a map of strings")
    return dict(value)


class CommitStore:
    """Reads and writes commits inside a repository rooted at ``root``."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.mgit_dir = self.root / MGIT_DIR
        self.branches_dir = self.mgit_dir / "branches"
        self.commits_dir = self.mgit_dir / "commits"
        self.head_file = self.mgit_dir / "HEAD"
        self.staging_file = self.mgit_dir / "staging_area.json"

    def head_branch_path(self) -> Optional[Path]:
        """Return the path of the branch file HEAD names, or None if unset."""
        if not self.head_file.exists():
            return None
        branch = read_file(self.head_file)
        if not branch:
            return None
        return self.branches_dir / branch

    def _load(self, path: Path) -> Optional[CommitRecord]:
        if not path.is_file():
            return None
        return CommitRecord.deserialize(read_file(path))

    def head_commit(self) -> Optional[CommitRecord]:
        """Return the commit the current branch points to, if any."""
        branch_path = self.head_branch_path()
        if branch_path is None:
            return None
        head_id = read_file(branch_path)
        return self._load(self.commits_dir / f"{head_id}.json")

    def commit_by_id(self, commit_hash: str) -> Optional[CommitRecord]:
        """Return the commit with the given hash, or None if it is unknown."""
        return self._load(self.commits_dir / f"{commit_hash}.json")

    def commit(self, message: str) -> CommitRecord:
        """Record the staged files as a new commit on the current branch."""
        branch_path = self.head_branch_path()
        if branch_path is None:
            raise NotInitializedError()

        head = self.head_commit()
        parent = head.hash if head is not None else ""

        try:
            staged = json.loads(read_file(self.staging_file))
        except json.JSONDecodeError as exc:
            raise MinigitError(f"Cannot read staging area: {exc}") from exc

        record = CommitRecord(
            parent=parent,
            message=message,
            timestamp=current_timestamp(),
            files=_string_map(staged, "staging area"),
        )
        record.hash = generate_hash(record.serialize())

        branch_path.write_text(record.hash, encoding="utf-8")
        (self.commits_dir / f"{record.hash}.json").write_text(
            record.serialize(), encoding="utf-8"
        )
        self.staging_file.write_text("{}", encoding="utf-8")
        return record

    def history(self) -> Iterator[CommitRecord]:
        """Yield commits from HEAD back through their parents."""
        current = self.head_commit()
        while current is not None and current.hash:
            yield current
            if not current.parent:
                break
            current = self.commit_by_id(current.parent)