"""
Error types for safecoll collection helpers.
"""

from typing import Optional


class SafeCollError(Exception):
    """Base exception for all safecoll errors."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        self.message = message
        self.argument = argument
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.argument:
            parts.append(f"[{self.argument}]")

        parts.append(self.message)

        return " ".join(parts)


class IllegalArgumentError(SafeCollError, ValueError):
    """
    Raised when an operation cannot produce a result from its arguments.

    This error is raised when:
    - The target map of a properties merge is None
    - A value passed as an array is not an array
    """

    pass
