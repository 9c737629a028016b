"""Exceptions raised by minigit."""


class MinigitError(Exception):
    """Base class for all minigit errors."""


class NotInitializedError(MinigitError):
    """Raised when an operation needs a repository that does not exist."""

    def __init__(self, message: str = "Repository not initialized.") -> None:
        super().__init__(message)