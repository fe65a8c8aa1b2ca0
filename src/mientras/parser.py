"""Recursive descent parser producing a typed WHILE AST.

Consumes the token stream from Lexer and builds frozen dataclass nodes.

Grammar:
    program    := "read" variables "%" commands "%" "write" variables
    variables  := VARIABLE ("," VARIABLE)*
    commands   := command (";" command)*
    command    := "nop"
                | VARIABLE ":=" expression
                | "while" expression "do" commands "od"
                | "for" expression "do" commands "od"
                | "if" expression "then" commands "else" commands "fi"
    expression := operand ["=?" operand]
    operand    := "nil" | VARIABLE | SYMBOL
                | "(" "cons" operand operand ")"
                | "(" "hd" operand ")"
                | "(" "tl" operand ")"

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
parse operation. The resulting AST is immutable and thread-safe.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn

from mientras.errors import ParseError
from mientras.lexer import Lexer
from mientras.nodes import (
    Assign,
    Command,
    Cons,
    Constant,
    Equals,
    Expression,
    For,
    Head,
    If,
    Nil,
    Nop,
    Program,
    Tail,
    Variable,
    VariableRef,
    While,
)
from mientras.tokens import KEYWORDS, PUNCTUATION, Token, TokenType
from mientras.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Recursive descent parser for the WHILE language.

    Usage:
        >>> Parser("while X do X := (tl X) od").parse_command()
        While(condition=VariableRef(name='X'), body=(Assign(...),))

    Each ``parse_*`` entry point requires the whole source to be consumed.

    """

    __slots__ = ("_current", "_pos", "_source_file", "_tokens")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Tokenize source eagerly.

        Raises:
            ParseError: If source contains a character that starts no token.
        """
        self._source_file = source_file
        self._tokens: list[Token] = list(Lexer(source, source_file).tokenize())
        self._pos = 0
        self._current: Token = self._tokens[0]

    # =========================================================================
    # Entry points
    # =========================================================================

    def parse_expression(self) -> Expression:
        """Parse the whole source as one expression."""
        return self._parse_all(self._expression, "expression")

    def parse_command(self) -> Command:
        """Parse the whole source as one command."""
        return self._parse_all(self._command, "command")

    def parse_commands(self) -> tuple[Command, ...]:
        """Parse the whole source as a ";"-separated command sequence."""
        return self._parse_all(self._commands, "command sequence")

    def parse_program(self) -> Program:
        """Parse the whole source as a program."""
        return self._parse_all(self._program, "program")

    def _parse_all[T](self, rule: Callable[[], T], what: str) -> T:
        try:
            result = rule()
            self._expect(TokenType.EOF)
        except RecursionError as exc:
            logger.debug("Recursion limit reached while parsing %s", what)
            msg = f"{what} is nested too deeply to parse"
            raise ParseError(msg, source_file=self._source_file) from exc
        except ParseError as exc:
            logger.debug("Failed to parse %s: %s", what, exc)
            raise
        return result

    # =========================================================================
    # Token navigation
    # =========================================================================

    def _advance(self) -> Token:
        """Consume the current token and return it."""
        token = self._current
        if token.type != TokenType.EOF:
            self._pos += 1
            self._current = self._tokens[self._pos]
        return token

    def _at(self, token_type: TokenType) -> bool:
        return self._current.type == token_type

    def _expect(self, token_type: TokenType) -> Token:
        """Consume a token of the given type or raise ParseError."""
        if not self._at(token_type):
            self._error(f"expected {_describe(token_type)}")
        return self._advance()

    def _error(self, expected: str) -> NoReturn:
        token = self._current
        found = "end of input" if token.type == TokenType.EOF else repr(token.value)
        raise ParseError.at(f"{expected}, found {found}", token.location)

    # =========================================================================
    # Grammar rules
    # =========================================================================

    def _program(self) -> Program:
        self._expect(TokenType.READ)
        inputs = self._variables()
        self._expect(TokenType.PERCENT)
        body = self._commands()
        self._expect(TokenType.PERCENT)
        self._expect(TokenType.WRITE)
        outputs = self._variables()
        return Program(inputs, body, outputs)

    def _variables(self) -> tuple[Variable, ...]:
        variables = [Variable(self._expect(TokenType.VARIABLE).value)]
        while self._at(TokenType.COMMA):
            self._advance()
            variables.append(Variable(self._expect(TokenType.VARIABLE).value))
        return tuple(variables)

    def _commands(self) -> tuple[Command, ...]:
        commands = [self._command()]
        while self._at(TokenType.SEMICOLON):
            self._advance()
            commands.append(self._command())
        return tuple(commands)

    def _command(self) -> Command:
        match self._current.type:
            case TokenType.NOP:
                self._advance()
                return Nop()
            case TokenType.VARIABLE:
                target = Variable(self._advance().value)
                self._expect(TokenType.ASSIGN)
                return Assign(target, self._expression())
            case TokenType.WHILE:
                self._advance()
                condition = self._expression()
                return While(condition, self._loop_body())
            case TokenType.FOR:
                self._advance()
                count = self._expression()
                return For(count, self._loop_body())
            case TokenType.IF:
                self._advance()
                condition = self._expression()
                self._expect(TokenType.THEN)
                then_branch = self._commands()
                self._expect(TokenType.ELSE)
                else_branch = self._commands()
                self._expect(TokenType.FI)
                return If(condition, then_branch, else_branch)
            case _:
                self._error("expected a command")

    def _loop_body(self) -> tuple[Command, ...]:
        self._expect(TokenType.DO)
        body = self._commands()
        self._expect(TokenType.OD)
        return body

    def _expression(self) -> Expression:
        left = self._operand()
        if self._at(TokenType.EQUALS):
            self._advance()
            return Equals(left, self._operand())
        return left

    def _operand(self) -> Expression:
        match self._current.type:
            case TokenType.NIL:
                self._advance()
                return Nil()
            case TokenType.VARIABLE:
                return VariableRef(self._advance().value)
            case TokenType.SYMBOL:
                return Constant(self._advance().value)
            case TokenType.LPAREN:
                self._advance()
                expr = self._application()
                self._expect(TokenType.RPAREN)
                return expr
            case _:
                self._error("expected an expression")

    def _application(self) -> Expression:
        match self._current.type:
            case TokenType.CONS:
                self._advance()
                head = self._operand()
                return Cons(head, self._operand())
            case TokenType.HD:
                self._advance()
                return Head(self._operand())
            case TokenType.TL:
                self._advance()
                return Tail(self._operand())
            case _:
                self._error("expected 'cons', 'hd' or 'tl'")


def _describe(token_type: TokenType) -> str:
    match token_type:
        case TokenType.EOF:
            return "end of input"
        case TokenType.VARIABLE:
            return "a variable"
        case TokenType.SYMBOL:
            return "a symbol"
        case _:
            return repr(_SPELLINGS[token_type])


_SPELLINGS: dict[TokenType, str] = {
    token_type: spelling for spelling, token_type in (*KEYWORDS.items(), *PUNCTUATION.items())
}


def parse_expression(source: str) -> Expression:
    """Parse WHILE source text into an Expression AST.

    Raises:
        ParseError: On malformed input.
    """
    return Parser(source).parse_expression()


def parse_command(source: str) -> Command:
    """Parse WHILE source text into a single Command AST.

    Raises:
        ParseError: On malformed input.
    """
    return Parser(source).parse_command()


def parse_commands(source: str) -> tuple[Command, ...]:
    """Parse WHILE source text into a non-empty command sequence.

    Raises:
        ParseError: On malformed input.
    """
    return Parser(source).parse_commands()


def parse_program(source: str, *, source_file: str | None = None) -> Program:
    """Parse WHILE source text into a Program AST.

    Args:
        source: WHILE program text
        source_file: Optional source file path for error messages

    Raises:
        ParseError: On malformed input.
    """
    return Parser(source, source_file=source_file).parse_program()
