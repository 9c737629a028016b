"""Command-line entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from minigit.branch import BranchManager
from minigit.commit import CommitRecord, CommitStore
from minigit.errors import MinigitError, NotInitializedError
from minigit.merge import Merger
from minigit.repository import Repository


def format_log(commits: Iterable[CommitRecord]) -> str:
    """Render commits the way ``minigit log`` prints them."""
    blocks = []
    for record in commits:
        lines = [
            f"commit: {record.hash}",
            f"Date: {record.timestamp}",
            f"Message: {record.message}",
            "Files:",
        ]
        lines.extend(f"  {name}" for name in sorted(record.files))
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


def _usage(text: str) -> int:
    print(f"Usage: {text}", file=sys.stderr)
    return 1


def _require_repository(root: Path) -> None:
    if not Repository(root).is_initialized():
        raise NotInitializedError()


def _cmd_init(args: list[str], root: Path) -> int:
    if Repository(root).init():
        print("Initialized empty miniGit repository.")
    else:
        print("Repository already initialized.")
    return 0


def _cmd_add(args: list[str], root: Path) -> int:
    if not args:
        return _usage("minigit add <file>")
    Repository(root).add(args[0])
    print(f"Added {args[0]} to staging area.")
    return 0


def _cmd_commit(args: list[str], root: Path) -> int:
    if len(args) < 2 or args[0] != "-m":
        return _usage('minigit commit -m "message"')
    _require_repository(root)
    record = CommitStore(root).commit(args[1])
    print(f"Committed as {record.hash}")
    return 0


def _cmd_log(args: list[str], root: Path) -> int:
    _require_repository(root)
    print(format_log(CommitStore(root).history()), end="")
    return 0


def _report_created(origin: str, name: str) -> None:
    print(f"Written commit hash from '{origin}' to '{name}'")
    print("Branch creation success!")


def _cmd_branch(args: list[str], root: Path) -> int:
    if not args:
        return _usage("minigit branch <branchName>")
    _require_repository(root)
    _report_created(BranchManager(root).create(args[0]), args[0])
    return 0


def _cmd_checkout(args: list[str], root: Path) -> int:
    if len(args) >= 2 and args[0] == "-b":
        _require_repository(root)
        name = args[1]
        _report_created(BranchManager(root).create_and_checkout(name), name)
    elif args:
        _require_repository(root)
        name = args[0]
        BranchManager(root).checkout(name)
    else:
        return _usage("minigit checkout [-b] <branchName>")
    print(f"You have checked out to '{name}'")
    return 0


def _cmd_merge(args: list[str], root: Path) -> int:
    if not args:
        return _usage("minigit merge <branchName>")
    _require_repository(root)
    name = args[0]
    head = Merger(root).merge(name)
    print(f"merging from '{head}' to '{name}'")
    print(f"merged branches '{head}' and '{name}'")
    return 0


def _cmd_pull(args: list[str], root: Path) -> int:
    if not args:
        return _usage("minigit pull <branchName>")
    _require_repository(root)
    name = args[0]
    head = Merger(root).pull(name)
    print(f"merging from '{name}' to '{head}'")
    print(f"merged branches '{name}' and '{head}'")
    return 0


_COMMANDS: dict[str, Callable[[list[str], Path], int]] = {
    "init": _cmd_init,
    "add": _cmd_add,
    "commit": _cmd_commit,
    "log": _cmd_log,
    "branch": _cmd_branch,
    "checkout": _cmd_checkout,
    "merge": _cmd_merge,
    "pull": _cmd_pull,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one minigit command in the current directory; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: minigit <command>")
        return 1

    command, rest = args[0], args[1:]
    handler = _COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        return 1

    try:
        return handler(rest, Path("."))
    except MinigitError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())