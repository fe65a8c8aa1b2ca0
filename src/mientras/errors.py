"""Exception classes for Mientras.

Provides standardized exceptions for error handling throughout Mientras.
"""

from __future__ import annotations

from mientras.location import SourceLocation


class MientrasError(Exception):
    """Base exception for all Mientras errors.

    Subclass this for specific error categories.
    """

    pass


class EmptyListError(MientrasError):
    """A non-empty sequence was required but an empty one was given.

    Raised by the line utilities, by the command and variable printers,
    and by node constructors whose bodies must hold at least one element.
    This is a caller bug, not a recoverable condition.
    """

    def __init__(self, what: str) -> None:
        """Initialize empty list error.

        Args:
            what: Operation or field that required a non-empty sequence
        """
        self.what = what
        super().__init__(f"{what}: expected a non-empty sequence")


class ParseError(MientrasError):
    """Error during WHILE source parsing.

    Raised when the lexer or parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def at(cls, message: str, location: SourceLocation) -> ParseError:
        """Build a parse error positioned at a token or character."""
        return cls(
            message,
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=location.source_file,
        )

    @property
    def location(self) -> SourceLocation | None:
        """Where the error occurred, or None if the line is unknown."""
        if self.lineno is None:
            return None
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset or 0,
            source_file=self.source_file,
        )


class RenderError(MientrasError):
    """Error during source rendering.

    Raised when the renderer encounters an object that is not an AST node
    it knows, or a tree nested too deeply to print.
    """

    pass


class ConfigError(MientrasError, ValueError):
    """Invalid print configuration.

    Raised for indent spec entries that are not (context, width) pairs or
    whose width is not a non-negative int.
    """

    pass


class SerializationError(MientrasError, ValueError):
    """A node or document cannot be converted to or from JSON form."""

    pass
