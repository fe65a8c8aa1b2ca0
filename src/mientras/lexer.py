"""Single-pass lexer for WHILE source text.

Scans left to right, one token per step, with no regex and no rewinds.
Whitespace, newlines included, only separates tokens.

Usage:
    >>> from mientras.lexer import Lexer
    >>> for token in Lexer("X := (tl X)").tokenize():
    ...     print(token)
    Token(VARIABLE, 'X', 1:1)
    Token(ASSIGN, ':=', 1:3)
    Token(LPAREN, '(', 1:6)
    Token(TL, 'tl', 1:7)
    Token(VARIABLE, 'X', 1:10)
    Token(RPAREN, ')', 1:11)
    Token(EOF, '', 1:12)

Thread Safety:
Lexer instances are single-use. Create one per source string.

"""

from __future__ import annotations

from collections.abc import Iterator

from mientras.errors import ParseError
from mientras.location import SourceLocation
from mientras.tokens import KEYWORDS, PUNCTUATION, Token, TokenType

_WHITESPACE = frozenset(" \t\r\n\f\v")


def _is_ident_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_ident_char(char: str) -> bool:
    return char.isalnum() or char == "_"


class Lexer:
    """Tokenizer for the WHILE language.

    Identifiers beginning with an upper-case letter are variables; any
    other identifier that is not a keyword is a constant symbol.

    """

    __slots__ = ("_col", "_lineno", "_pos", "_source", "_source_file", "_source_len")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._lineno = 1
        self._col = 1

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens, ending with exactly one EOF.

        Raises:
            ParseError: On a character that starts no token.
        """
        while True:
            self._skip_whitespace()
            if self._pos >= self._source_len:
                break
            yield self._scan_token()
        yield self._make_token(TokenType.EOF, "", self._pos, self._lineno, self._col)

    def _skip_whitespace(self) -> None:
        source = self._source
        while self._pos < self._source_len and source[self._pos] in _WHITESPACE:
            if source[self._pos] == "\n":
                self._lineno += 1
                self._col = 1
            else:
                self._col += 1
            self._pos += 1

    def _scan_token(self) -> Token:
        start, lineno, col = self._pos, self._lineno, self._col
        char = self._source[start]

        if _is_ident_start(char):
            end = start + 1
            while end < self._source_len and _is_ident_char(self._source[end]):
                end += 1
            word = self._source[start:end]
            self._commit(end)
            token_type = KEYWORDS.get(word)
            if token_type is None:
                token_type = TokenType.VARIABLE if word[0].isupper() else TokenType.SYMBOL
            return self._make_token(token_type, word, start, lineno, col)

        pair = self._source[start : start + 2]
        if pair in PUNCTUATION:
            self._commit(start + 2)
            return self._make_token(PUNCTUATION[pair], pair, start, lineno, col)
        if char in PUNCTUATION:
            self._commit(start + 1)
            return self._make_token(PUNCTUATION[char], char, start, lineno, col)

        msg = f"Unexpected character {char!r}"
        raise ParseError.at(msg, SourceLocation(lineno, col, start, self._source_file))

    def _commit(self, end: int) -> None:
        """Advance to end; tokens never span lines."""
        self._col += end - self._pos
        self._pos = end

    def _make_token(
        self, token_type: TokenType, value: str, offset: int, lineno: int, col: int
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            lineno=lineno,
            col_offset=col,
            offset=offset,
            source_file=self._source_file,
        )
