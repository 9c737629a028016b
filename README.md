# minigit

A very small version control system. It keeps its data in a `.minigit`
directory in the current working directory. It stages files as
content-addressed blobs, records commits and shows their history. It also
creates and switches branches and fast-forwards branch pointers with `merge`
and `pull`.

## Installation

```
pip install .
```

This installs the `minigit` command. `python -m minigit.cli` runs the same
command.

## Usage

Start a repository in the current directory:

```
minigit init
```

This creates `.minigit/` with `branches/`, `commits/`, `blobs/`, a `HEAD`
that names `main`, an empty `main` branch and an empty staging area. If
`.minigit` already exists, nothing changes and the command reports
`Repository already initialized.`

Stage a file and commit it:

```
minigit add notes.txt
minigit commit -m "first notes"
```

`add` stores the file's contents as a blob and records the file name in the
staging area. `commit` records every staged file in a new commit on the
current branch, prints `Committed as <hash>` and empties the staging area.

Show the history of the current branch, newest first:

```
minigit log
```

Each entry shows the commit hash, date, message and the file names it holds,
in sorted order.

Work with branches:

```
minigit branch feature          # new branch at the current branch's commit
minigit checkout feature        # switch HEAD to an existing branch
minigit checkout -b experiment  # create a branch and switch to it
```

Bring branches together:

```
minigit merge feature   # move 'feature' forward to the current branch's commit
minigit pull feature    # move the current branch forward to 'feature's commit
```

`merge` succeeds only when the commit of `feature` is the current branch's
commit or one of its ancestors. `pull` succeeds only when the current
branch's commit is the commit of `feature` or one of its ancestors. Both fail
when either branch has no commit yet.

Errors (a missing repository, a missing file, an unknown or existing branch,
a failed merge) are printed to standard error and the command exits with
status 1. A missing argument prints a usage line and exits with status 1.

## Storage layout

- `.minigit/HEAD` holds the name of the current branch.
- `.minigit/branches/<name>` holds the hash of the branch's latest commit.
- `.minigit/commits/<hash>.json` holds a commit: hash, parent, message,
  timestamp and the staged files mapped to their blob hashes.
- `.minigit/blobs/<sha1>` holds the contents of a staged file.
- `.minigit/staging_area.json` maps staged file names to blob hashes.

## Library use

The same operations are available from Python. Each class takes the
directory that contains `.minigit`; failures raise `minigit.errors.MinigitError`
(or its subclass `NotInitializedError`).

```python
from pathlib import Path

from minigit.repository import Repository
from minigit.commit import CommitStore
from minigit.branch import BranchManager
from minigit.merge import Merger

root = Path(".")
repo = Repository(root)
repo.init()                  # False if the repository already exists
repo.add("notes.txt")        # returns the blob hash

store = CommitStore(root)
store.commit("first notes")  # returns a CommitRecord
for record in store.history():
    print(record.hash, record.message)

BranchManager(root).create_and_checkout("feature")
Merger(root).merge("main")
```

`minigit.cli.format_log` renders an iterable of `CommitRecord` objects as
`minigit log` prints them. `minigit.hashing.sha1` and
`minigit.hashing.generate_hash` return hex SHA-1 digests.

## What it does not do

- `checkout`, `merge` and `pull` only move branch pointers and `HEAD`; they
  never write blob contents back into the working directory.
- There is no three-way merge: branches that have diverged cannot be merged.
- There are no `status`, `diff`, `rm` or `reset` commands, and no remotes:
  `pull` works between local branches only.