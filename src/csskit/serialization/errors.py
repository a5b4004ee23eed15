"""Serialization error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when JSON text cannot be turned into an object.

    ``pos`` is the character offset into the text where decoding stopped;
    ``line`` and ``column`` are the same location, 1-based.
    """

    def __init__(
        self,
        message: str,
        *,
        pos: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.pos = pos
        self.line = line
        self.column = column

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"{message} (line {self.line}, column {self.column})"
