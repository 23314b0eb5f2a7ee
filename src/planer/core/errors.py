# src/planer/core/errors.py

from __future__ import annotations


class PlanerError(Exception):
    """Base class for all planer errors."""


class TaskValidationError(PlanerError, ValueError):
    """User input was rejected before a Task was built."""

    message = "Invalid task text"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyInput(TaskValidationError):
    message = "Please enter the task text"


class TooLong(TaskValidationError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Maximum {limit} characters")


class StorageReadFailure(PlanerError):
    """Stored data is missing its expected structure or cannot be read."""


class StorageWriteFailure(PlanerError):
    """Writing the task snapshot failed (disk full, permissions, bad data)."""


class RemoteSyncFailure(PlanerError):
    """The remote mirror answered with a non-2xx status or was unreachable."""
