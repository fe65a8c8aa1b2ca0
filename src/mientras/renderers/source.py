"""WHILE source renderer: prints an AST back as re-parseable source text.

Every printer returns an ordered list of lines; only the final step joins
them with newlines (between lines, never after the last one). Nested bodies
are indented by the width the indent spec gives their construct.

Example:
    >>> from mientras import parse_program, pretty_print
    >>> prog = parse_program("read X % Y := nil ; while X do X := (tl X) od % write Y")
    >>> print(pretty_print(prog, [("PROGR", 2), ("WHILE", 4)]))
    read X
    %
      Y := nil ;
      while X do
          X := (tl X)
      od
    %
    write Y

Thread Safety:
Rendering is a pure function of the AST and the indent spec. A single
SourceRenderer may be shared across threads.

"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from mientras.config import resolve_spec
from mientras.errors import EmptyListError, RenderError
from mientras.indent import (
    IndentContext,
    IndentSpec,
    make_indent,
    normalize_spec,
    resolve_indent,
)
from mientras.lines import prefix_all, suffix_all_but_last, suffix_last
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
from mientras.profiling import get_render_accumulator
from mientras.utils.logger import get_logger
from mientras.visitor import count_nodes

logger = get_logger(__name__)

COMMAND_SEPARATOR = " ;"
PROGRAM_SEPARATOR = "%"


class SourceRenderer:
    """Render WHILE ASTs to concrete syntax.

    Args:
        indent_spec: Ordered (context, width) pairs, or a mapping. None reads
            the active PrintConfig at each call.

    Raises:
        ConfigError: If an explicit spec holds a malformed entry or a width
            that is not a non-negative int.

    """

    __slots__ = ("_indent_spec",)

    def __init__(self, indent_spec: IndentSpec | dict[str, int] | None = None) -> None:
        self._indent_spec = None if indent_spec is None else normalize_spec(indent_spec)

    @property
    def indent_spec(self) -> IndentSpec:
        """The spec this renderer uses right now."""
        return resolve_spec(self._indent_spec)

    def render(self, program: Program) -> str:
        """Render a program to one string, lines separated by newlines."""
        return "".join(suffix_all_but_last("\n", self.render_lines(program)))

    def render_lines(self, program: Program) -> list[str]:
        """Render a program to its list of lines.

        Raises:
            RenderError: If the program holds an unknown node or is nested
                beyond the recursion limit.
        """
        spec = self.indent_spec
        with _nesting_guard("program"):
            lines = _program(program, spec)
            acc = get_render_accumulator()
            if acc is not None:
                acc.record_render(lines, count_nodes(program))
        return lines

    def render_expression(self, expr: Expression) -> str:
        """Render an expression on a single line."""
        with _nesting_guard("expression"):
            return _expression(expr)

    def render_command(self, command: Command) -> list[str]:
        """Render one command to its lines."""
        spec = self.indent_spec
        with _nesting_guard("command"):
            return _command(command, spec)

    def render_commands(self, commands: Sequence[Command]) -> list[str]:
        """Render a non-empty command sequence, joined by " ;"."""
        spec = self.indent_spec
        with _nesting_guard("command sequence"):
            return _commands(commands, spec)


@contextmanager
def _nesting_guard(what: str) -> Iterator[None]:
    """Turn interpreter recursion overflow into a RenderError.

    The except clause runs after the stack has unwound, so it is safe to
    log and raise here.
    """
    try:
        yield
    except RecursionError as exc:
        logger.debug("Recursion limit reached while rendering %s", what)
        msg = f"{what} is nested too deeply to render"
        raise RenderError(msg) from exc


def _expression(expr: Expression) -> str:
    match expr:
        case Nil():
            return "nil"
        case Constant(name=name) | VariableRef(name=name):
            return name
        case Cons(head=head, tail=tail):
            return f"(cons {_expression(head)} {_expression(tail)})"
        case Head(arg=arg):
            return f"(hd {_expression(arg)})"
        case Tail(arg=arg):
            return f"(tl {_expression(arg)})"
        case Equals(left=left, right=right):
            return f"{_expression(left)} =? {_expression(right)}"
        case _:
            msg = f"Cannot render {type(expr).__name__} as an expression"
            raise RenderError(msg)


def _indented(context: IndentContext, commands: Sequence[Command], spec: IndentSpec) -> list[str]:
    indent = make_indent(resolve_indent(context, spec))
    return prefix_all(indent, _commands(commands, spec))


def _command(command: Command, spec: IndentSpec) -> list[str]:
    match command:
        case Nop():
            return ["nop"]
        case Assign(target=Variable(name=name), value=value):
            return [f"{name} := {_expression(value)}"]
        case While(condition=condition, body=body):
            return [
                f"while {_expression(condition)} do",
                *_indented(IndentContext.WHILE, body, spec),
                "od",
            ]
        case For(count=count, body=body):
            return [
                f"for {_expression(count)} do",
                *_indented(IndentContext.FOR, body, spec),
                "od",
            ]
        case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
            return [
                f"if {_expression(condition)} then",
                *_indented(IndentContext.IF, then_branch, spec),
                "else",
                *_indented(IndentContext.IF, else_branch, spec),
                "fi",
            ]
        case _:
            msg = f"Cannot render {type(command).__name__} as a command"
            raise RenderError(msg)


def _commands(commands: Sequence[Command], spec: IndentSpec) -> list[str]:
    if not commands:
        raise EmptyListError("render_commands")
    lines: list[str] = []
    # The separator closes the last line of every block but the final one
    for command in commands[:-1]:
        lines.extend(suffix_last(COMMAND_SEPARATOR, _command(command, spec)))
    lines.extend(_command(commands[-1], spec))
    return lines


def _program(program: Program, spec: IndentSpec) -> list[str]:
    if not isinstance(program, Program):
        msg = f"Cannot render {type(program).__name__} as a program"
        raise RenderError(msg)
    indent = make_indent(resolve_indent(IndentContext.PROGRAM, spec))
    return [
        f"read {join_variables(program.inputs)}",
        PROGRAM_SEPARATOR,
        *prefix_all(indent, _commands(program.body, spec)),
        PROGRAM_SEPARATOR,
        f"write {join_variables(program.outputs)}",
    ]


def join_variables(variables: Sequence[Variable]) -> str:
    """Variable names in order, separated by ", ".

    Raises:
        EmptyListError: If variables is empty.
    """
    if not variables:
        raise EmptyListError("join_variables")
    return ", ".join(variable.name for variable in variables)


def render_expression(expr: Expression) -> str:
    """Render an expression to a single line of WHILE source."""
    return SourceRenderer().render_expression(expr)


def render_command(command: Command, indent_spec: IndentSpec | None = None) -> list[str]:
    """Render one command to its lines."""
    return SourceRenderer(indent_spec).render_command(command)


def render_commands(
    commands: Sequence[Command], indent_spec: IndentSpec | None = None
) -> list[str]:
    """Render a non-empty command sequence to its lines.

    Raises:
        EmptyListError: If commands is empty.
    """
    return SourceRenderer(indent_spec).render_commands(commands)


def render_program(program: Program, indent_spec: IndentSpec | None = None) -> list[str]:
    """Render a program to its lines: header, indented body, footer."""
    return SourceRenderer(indent_spec).render_lines(program)


def pretty_print(program: Program, indent_spec: IndentSpec | None = None) -> str:
    """Render a program to text, newline between lines, none after the last.

    Args:
        program: Program AST to render.
        indent_spec: Ordered (context, width) pairs; None uses the active
            PrintConfig.

    Returns:
        WHILE source text.
    """
    return SourceRenderer(indent_spec).render(program)
