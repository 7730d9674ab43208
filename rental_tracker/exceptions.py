"""
Custom exception classes for the rental tracker.

Every rule violation in the entities and services is reported as an
InvalidArgumentError; the interactive shell catches it and prints the
message instead of crashing the menu loop.
"""


class InvalidArgumentError(ValueError):
    """Raised when a constructor, setter or record operation rejects its input."""

    def __init__(self, message: str = "Error: invalid argument") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class PersistenceError(OSError):
    """Raised when the data file cannot be opened for saving."""

    def __init__(self, message: str = "Error: could not open file for saving") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
