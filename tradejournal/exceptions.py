"""Exceptions for the tradejournal package."""


class JournalError(Exception):
    """Base exception for all journal errors."""

    pass


class EntryError(JournalError, ValueError):
    """A trade entry field could not be turned into a valid value."""

    def __init__(self, field: str, value: str, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class InvalidIndexError(JournalError, IndexError):
    """Delete positions fall outside the current trade sequence."""

    def __init__(self, indices, size: int):
        self.indices = sorted(indices)
        self.size = size
        super().__init__(
            f"Positions {self.indices} out of range for {size} trade(s)"
        )
