"""Creating and switching branches."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.errors import MinigitError
from minigit.fileio import read_file

MGIT_DIR = ".minigit"


class BranchManager:
    """Manages the branch pointers of the repository at ``root``."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.mgit_dir = self.root / MGIT_DIR
        self.branches_dir = self.mgit_dir / "branches"
        self.head_file = self.mgit_dir / "HEAD"

    def exists(self, name: str) -> bool:
        """Return True if a branch called ``name`` exists."""
        return (self.branches_dir / name).exists()

    def create(self, name: str) -> str:
        """Create ``name`` pointing at the current branch's commit.

        Returns the name of the branch it was created from.
        """
        if self.exists(name):
            raise MinigitError(
                f"branch named '{name}' already exists. Please use a different Name"
            )
        head = read_file(self.head_file)
        commit_hash = read_file(self.branches_dir / head) if head else ""
        (self.branches_dir / name).write_text(commit_hash, encoding="utf-8")
        return head

    def checkout(self, name: str) -> None:
        """Make ``name`` the current branch."""
        if not self.exists(name):
            raise MinigitError(f"branch name '{name}' doesn't exist.")
        self.head_file.write_text(name, encoding="utf-8")

    def create_and_checkout(self, name: str) -> str:
        """Create ``name`` and switch to it; return the branch it came from."""
        origin = self.create(name)
        self.checkout(name)
        return origin