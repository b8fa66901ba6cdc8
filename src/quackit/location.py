"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking cursor positions in config text.
The scanner counts lines and columns from zero; SourceLocation always exposes
them 1-indexed.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute character offset in the scanned text (0-indexed)
        source_file: Source file path (optional, for exec'd configs)

    Examples:
        >>> loc = SourceLocation(lineno=1, col_offset=1)
        >>> str(loc)
        '1:1'

        >>> loc = SourceLocation(3, 7, source_file="autoexec.cfg")
        >>> str(loc)
        'autoexec.cfg:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "autoexec.cfg:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def as_tuple(self) -> tuple[int, int]:
        """Return the (line, column) pair."""
        return (self.lineno, self.col_offset)

    @classmethod
    def start(cls, source_file: str | None = None) -> SourceLocation:
        """Location of the first character of a text."""
        return cls(lineno=1, col_offset=1, offset=0, source_file=source_file)
