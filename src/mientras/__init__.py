"""
Mientras: Pretty-printer for the WHILE language

Renders the typed AST of WHILE programs (assignments, conditionals, bounded
and unbounded loops, list-structured values) back into readable,
re-parseable source, with a configurable indentation width per construct.

Quick Start:
    >>> from mientras import parse_program, pretty_print
    >>> prog = parse_program("read X % Y := nil ; while X do X := (tl X) od % write Y")
    >>> print(pretty_print(prog, [("PROGR", 2), ("WHILE", 3)]))
    read X
    %
      Y := nil ;
      while X do
         X := (tl X)
      od
    %
    write Y

    >>> # Or use the high-level formatter
    >>> from mientras import PrettyPrinter
    >>> fmt = PrettyPrinter(indent_spec=[("PROGR", 2)])
    >>> text = fmt("read X % Y := X % write Y")

Building ASTs by hand:
    >>> from mientras import Assign, Nil, Variable, render_command
    >>> render_command(Assign(Variable("Y"), Nil()))
    ['Y := nil']
"""

from mientras.config import (
    PrintConfig,
    get_print_config,
    print_config_context,
    reset_print_config,
    set_print_config,
)
from mientras.errors import (
    ConfigError,
    EmptyListError,
    MientrasError,
    ParseError,
    RenderError,
    SerializationError,
)
from mientras.indent import DEFAULT_INDENT, IndentContext, IndentSpec, make_indent, resolve_indent
from mientras.lexer import Lexer
from mientras.location import SourceLocation
from mientras.nodes import (
    NIL,
    NOP,
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
    Node,
    Nop,
    Program,
    Tail,
    Variable,
    VariableRef,
    While,
)
from mientras.parser import (
    Parser,
    parse_command,
    parse_commands,
    parse_expression,
    parse_program,
)
from mientras.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from mientras.renderers.protocol import ASTRenderer
from mientras.renderers.source import (
    SourceRenderer,
    pretty_print,
    render_command,
    render_commands,
    render_expression,
    render_program,
)
from mientras.serialization import from_dict, from_json, to_dict, to_json
from mientras.tokens import Token, TokenType
from mientras.visitor import BaseVisitor, count_nodes, iter_nodes

__version__ = "0.1.0"


class PrettyPrinter:
    """High-level WHILE formatter combining parser and renderer.

    Usage:
        >>> fmt = PrettyPrinter(indent_spec=[("PROGR", 2), ("WHILE", 4)])
        >>> print(fmt("read X % while X do X := (tl X) od % write X"))
        read X
        %
          while X do
              X := (tl X)
          od
        %
        write X

        >>> # Access the AST
        >>> prog = fmt.parse("read X % nop % write X")
        >>> prog.body
        (Nop(),)

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        PrettyPrinter instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, *, indent_spec: IndentSpec | dict[str, int] | None = None) -> None:
        """Initialize formatter.

        Args:
            indent_spec: Ordered (context, width) pairs, or a mapping. None
                indents every construct by DEFAULT_INDENT.
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = PrintConfig(indent_spec=indent_spec or ())
        self._renderer = SourceRenderer()

    @property
    def config(self) -> PrintConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse a program and return its canonical rendering.

        Raises:
            ParseError: If source is not a valid WHILE program.
        """
        return self.render(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> Program:
        """Parse WHILE source into a Program AST."""
        return parse_program(source, source_file=source_file)

    def render(self, program: Program) -> str:
        """Render a Program AST to text."""
        with print_config_context(self._config):
            return self._renderer.render(program)

    def render_lines(self, program: Program) -> list[str]:
        """Render a Program AST to its list of lines."""
        with print_config_context(self._config):
            return self._renderer.render_lines(program)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse_expression",
    "parse_command",
    "parse_commands",
    "parse_program",
    "render_expression",
    "render_command",
    "render_commands",
    "render_program",
    "pretty_print",
    # Nodes
    "Node",
    "Variable",
    "Program",
    "Expression",
    "Nil",
    "NIL",
    "Constant",
    "VariableRef",
    "Cons",
    "Head",
    "Tail",
    "Equals",
    "Command",
    "Nop",
    "NOP",
    "Assign",
    "While",
    "For",
    "If",
    # Indentation
    "DEFAULT_INDENT",
    "IndentContext",
    "IndentSpec",
    "make_indent",
    "resolve_indent",
    # Parser components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    # Renderer
    "SourceRenderer",
    "ASTRenderer",
    # Visitor
    "BaseVisitor",
    "count_nodes",
    "iter_nodes",
    # Profiling
    "RenderAccumulator",
    "profiled_render",
    "get_render_accumulator",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "PrintConfig",
    "get_print_config",
    "set_print_config",
    "reset_print_config",
    "print_config_context",
    # Errors
    "MientrasError",
    "EmptyListError",
    "ParseError",
    "RenderError",
    "ConfigError",
    "SerializationError",
    # High-level
    "PrettyPrinter",
]
