"""Fast-forward merging between branches."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.commit import CommitStore
from minigit.errors import MinigitError
from minigit.fileio import read_file

MGIT_DIR = ".minigit"


class Merger:
    """Moves branch pointers forward along shared history."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.mgit_dir = self.root / MGIT_DIR
        self.branches_dir = self.mgit_dir / "branches"
        self.commits_dir = self.mgit_dir / "commits"
        self.head_file = self.mgit_dir / "HEAD"
        self._store = CommitStore(self.root)

    def branch_exists(self, name: str) -> bool:
        """Return True if a branch called ``name`` exists."""
        return (self.branches_dir / name).exists()

    def is_ancestor(self, from_hash: str, to_hash: str) -> bool:
        """Return True if ``to_hash`` is ``from_hash`` or one of its ancestors."""
        current = self._store.commit_by_id(from_hash) if from_hash else None
        while current is not None and current.hash:
            if current.hash == to_hash:
                return True
            current = self._store.commit_by_id(current.parent) if current.parent else None
        return False

    def _tips(self, name: str) -> tuple[str, str, str]:
        if not self.branch_exists(name):
            raise MinigitError(
                f"branch named '{name}' doesn't exist, please enter a valid branch name."
            )
        head = read_file(self.head_file)
        head_commit = read_file(self.branches_dir / head) if head else ""
        other_commit = read_file(self.branches_dir / name)
        return head, head_commit, other_commit

    def merge(self, name: str) -> str:
        """Move branch ``name`` forward to the current branch's commit.

        Returns the name of the current branch.
        """
        head, head_commit, other_commit = self._tips(name)
        if not self.is_ancestor(head_commit, other_commit):
            raise MinigitError(
                f"failed to merge branches '{head}' and '{name}'. No matching commits found"
            )
        (self.branches_dir / name).write_text(head_commit, encoding="utf-8")
        return head

    def pull(self, name: str) -> str:
        """Move the current branch forward to the commit of branch ``name``.

        Returns the name of the current branch.
        """
        head, head_commit, other_commit = self._tips(name)
        if not head or not self.is_ancestor(other_commit, head_commit):
            raise MinigitError(
                f"failed to merge branches '{name}' and '{head}'. No matching commits found"
            )
        (self.branches_dir / head).write_text(other_commit, encoding="utf-8")
        return head