"""Foundational exception type for driftless.

Every exception the library raises on its own behalf derives from
`DriftlessError`, so callers can tell library contract breaches apart from
the failures they encode themselves in `Err` payloads.
"""

from __future__ import annotations

__all__ = ['DriftlessError']


class DriftlessError(Exception):
    """Base exception class for driftless errors.

    Attributes:
        message (str): A human-readable description of the error.
        code (str | None): An optional error code for programmatic error handling.

    Example:
        ```python
        from driftless import DriftlessError, Task

        try:
            await Task.from_(broken_thunk)
        except DriftlessError as e:
            print(f'contract broken: {e}')
        ```
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        """Initialize a DriftlessError.

        Args:
            message (str): A human-readable description of the error.
            code (str | None): An optional error code for programmatic error handling.
        """
        super().__init__(message)
        self.message: str = message
        self.code: str | None = code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        if self.code:
            return f'[{self.code}] {self.message}'
        return self.message
