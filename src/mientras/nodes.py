"""Typed AST nodes for the WHILE language.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Structural equality: a parsed tree compares equal to a hand-built one
- Pattern matching: match statements work naturally

Node Hierarchy:
Variable
Expression
├── Nil
├── Constant
├── VariableRef
├── Cons
├── Head
├── Tail
└── Equals
Command
├── Nop
├── Assign
├── While
├── For
└── If
Program

Non-empty bodies:
While/For/If bodies and Program input, body and output lists hold at least
one element. They accept any sequence, are stored as tuples, and an empty
one raises EmptyListError when the node is built.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mientras.errors import EmptyListError


def _non_empty[T](items: Iterable[T], what: str) -> tuple[T, ...]:
    """Freeze items into a tuple, rejecting an empty one."""
    frozen = tuple(items)
    if not frozen:
        raise EmptyListError(what)
    return frozen


@dataclass(frozen=True, slots=True)
class Variable:
    """A declared program variable.

    Used as an assignment target and in the read/write parameter lists.

    """

    name: str


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Nil:
    """The empty list.

    WHILE: nil

    """


@dataclass(frozen=True, slots=True)
class Constant:
    """Atomic literal symbol.

    WHILE: lower-case identifier, e.g. a

    """

    name: str


@dataclass(frozen=True, slots=True)
class VariableRef:
    """Reference to a variable's value.

    WHILE: upper-case identifier, e.g. X

    """

    name: str


@dataclass(frozen=True, slots=True)
class Cons:
    """Pair constructor.

    WHILE: (cons A B)

    """

    head: Expression
    tail: Expression


@dataclass(frozen=True, slots=True)
class Head:
    """First projection of a pair.

    WHILE: (hd A)

    """

    arg: Expression


@dataclass(frozen=True, slots=True)
class Tail:
    """Second projection of a pair.

    WHILE: (tl A)

    """

    arg: Expression


@dataclass(frozen=True, slots=True)
class Equals:
    """Equality test.

    WHILE: A =? B

    Printed without parentheses, so the parser only produces it at the top
    of a condition or assigned value.

    """

    left: Expression
    right: Expression


type Expression = Nil | Constant | VariableRef | Cons | Head | Tail | Equals


# =============================================================================
# Commands
# =============================================================================


@dataclass(frozen=True, slots=True)
class Nop:
    """No-op command.

    WHILE: nop

    """


@dataclass(frozen=True, slots=True)
class Assign:
    """Assignment.

    WHILE: X := E

    """

    target: Variable
    value: Expression


@dataclass(frozen=True, slots=True)
class While:
    """Unbounded loop.

    WHILE:
        while C do
          body
        od

    """

    condition: Expression
    body: tuple[Command, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", _non_empty(self.body, "While.body"))


@dataclass(frozen=True, slots=True)
class For:
    """Bounded loop, repeated once per element of the count expression.

    WHILE:
        for E do
          body
        od

    """

    count: Expression
    body: tuple[Command, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", _non_empty(self.body, "For.body"))


@dataclass(frozen=True, slots=True)
class If:
    """Conditional with both branches.

    WHILE:
        if C then
          then_branch
        else
          else_branch
        fi

    """

    condition: Expression
    then_branch: tuple[Command, ...]
    else_branch: tuple[Command, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "then_branch", _non_empty(self.then_branch, "If.then_branch"))
        object.__setattr__(self, "else_branch", _non_empty(self.else_branch, "If.else_branch"))


type Command = Nop | Assign | While | For | If


# =============================================================================
# Program
# =============================================================================


@dataclass(frozen=True, slots=True)
class Program:
    """Root program node.

    WHILE:
        read X, Y
        %
          body
        %
        write Z

    """

    inputs: tuple[Variable, ...]
    body: tuple[Command, ...]
    outputs: tuple[Variable, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", _non_empty(self.inputs, "Program.inputs"))
        object.__setattr__(self, "body", _non_empty(self.body, "Program.body"))
        object.__setattr__(self, "outputs", _non_empty(self.outputs, "Program.outputs"))


type Node = Variable | Expression | Command | Program

NIL = Nil()
NOP = Nop()
