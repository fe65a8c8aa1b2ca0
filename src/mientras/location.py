"""Source location tracking for parse errors and tokens.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token in WHILE source text.

    All positions are 1-indexed (lineno and col_offset start at 1);
    offset is the absolute 0-indexed position in the source string.

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=5, source_file="rev.while")
        >>> str(loc)
        'rev.while:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.while:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
