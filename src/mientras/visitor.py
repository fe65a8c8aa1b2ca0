"""AST Visitor for the WHILE language.

Provides a base visitor class with match-based dispatch and automatic
child walking.

Example, collecting every assigned variable:

    class AssignedNames(BaseVisitor[None]):
        def __init__(self) -> None:
            self.names: list[str] = []

        def visit_assign(self, node: Assign) -> None:
            self.names.append(node.target.name)

    collector = AssignedNames()
    collector.visit(program)

`iter_nodes` walks a tree without recursion; BaseVisitor recurses once
per level of nesting.

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread.

"""

from collections.abc import Iterator

from mientras.nodes import (
    Assign,
    Cons,
    Constant,
    Equals,
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


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call, in source order.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_program(self, node: Program) -> T:
        return self.visit_default(node)

    def visit_variable(self, node: Variable) -> T:
        return self.visit_default(node)

    # -- Command visitors ------------------------------------------------------

    def visit_nop(self, node: Nop) -> T:
        return self.visit_default(node)

    def visit_assign(self, node: Assign) -> T:
        return self.visit_default(node)

    def visit_while(self, node: While) -> T:
        return self.visit_default(node)

    def visit_for(self, node: For) -> T:
        return self.visit_default(node)

    def visit_if(self, node: If) -> T:
        return self.visit_default(node)

    # -- Expression visitors ---------------------------------------------------

    def visit_nil(self, node: Nil) -> T:
        return self.visit_default(node)

    def visit_constant(self, node: Constant) -> T:
        return self.visit_default(node)

    def visit_variable_ref(self, node: VariableRef) -> T:
        return self.visit_default(node)

    def visit_cons(self, node: Cons) -> T:
        return self.visit_default(node)

    def visit_head(self, node: Head) -> T:
        return self.visit_default(node)

    def visit_tail(self, node: Tail) -> T:
        return self.visit_default(node)

    def visit_equals(self, node: Equals) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Program():
                return self.visit_program(node)
            case Variable():
                return self.visit_variable(node)
            case Nop():
                return self.visit_nop(node)
            case Assign():
                return self.visit_assign(node)
            case While():
                return self.visit_while(node)
            case For():
                return self.visit_for(node)
            case If():
                return self.visit_if(node)
            case Nil():
                return self.visit_nil(node)
            case Constant():
                return self.visit_constant(node)
            case VariableRef():
                return self.visit_variable_ref(node)
            case Cons():
                return self.visit_cons(node)
            case Head():
                return self.visit_head(node)
            case Tail():
                return self.visit_tail(node)
            case Equals():
                return self.visit_equals(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        for child in iter_children(node):
            self.visit(child)


def iter_children(node: Node) -> tuple[Node, ...]:
    """Direct children of node, in source order. Leaves have none."""
    match node:
        case Program(inputs=inputs, body=body, outputs=outputs):
            return (*inputs, *body, *outputs)
        case Assign(target=target, value=value):
            return (target, value)
        case While(condition=condition, body=body):
            return (condition, *body)
        case For(count=count, body=body):
            return (count, *body)
        case If(condition=condition, then_branch=then_branch, else_branch=else_branch):
            return (condition, *then_branch, *else_branch)
        case Cons(head=head, tail=tail):
            return (head, tail)
        case Head(arg=arg) | Tail(arg=arg):
            return (arg,)
        case Equals(left=left, right=right):
            return (left, right)
        case _:
            return ()


def iter_nodes(node: Node) -> Iterator[Node]:
    """Every node of the tree in pre-order, root first.

    Walks with an explicit stack, so trees of any depth are safe.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(iter_children(current)))


def count_nodes(node: Node) -> int:
    """Number of nodes in the tree rooted at node."""
    return sum(1 for _ in iter_nodes(node))
