"""A tiny version control system with blobs, commits, branches, merge and pull."""

__version__ = "0.1.0"