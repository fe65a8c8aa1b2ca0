"""Token and TokenType definitions for the WHILE lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, value, and source position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto

from mientras.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    EOF = auto()

    # Identifiers
    VARIABLE = auto()  # X, Result
    SYMBOL = auto()  # a, foo (constants)

    # Expression keywords
    NIL = auto()
    CONS = auto()
    HD = auto()
    TL = auto()

    # Command keywords
    NOP = auto()
    WHILE = auto()
    FOR = auto()
    DO = auto()
    OD = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    FI = auto()

    # Program keywords
    READ = auto()
    WRITE = auto()

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    ASSIGN = auto()  # :=
    EQUALS = auto()  # =?
    SEMICOLON = auto()  # ;
    COMMA = auto()  # ,
    PERCENT = auto()  # %


KEYWORDS: dict[str, TokenType] = {
    "nil": TokenType.NIL,
    "cons": TokenType.CONS,
    "hd": TokenType.HD,
    "tl": TokenType.TL,
    "nop": TokenType.NOP,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "do": TokenType.DO,
    "od": TokenType.OD,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "fi": TokenType.FI,
    "read": TokenType.READ,
    "write": TokenType.WRITE,
}

PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ":=": TokenType.ASSIGN,
    "=?": TokenType.EQUALS,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "%": TokenType.PERCENT,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        lineno: Start line number (1-indexed)
        col_offset: Start column (1-indexed)
        offset: Absolute start position in source
        source_file: Optional source file path

    """

    type: TokenType
    value: str
    lineno: int
    col_offset: int
    offset: int
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of the token's first character."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            source_file=self.source_file,
        )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.value!r}, {self.lineno}:{self.col_offset})"
