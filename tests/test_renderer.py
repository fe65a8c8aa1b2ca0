"""Tests for the WHILE source renderer."""

from mientras import (
    NIL,
    NOP,
    Assign,
    Cons,
    Constant,
    Equals,
    For,
    Head,
    If,
    Nil,
    Program,
    SourceRenderer,
    Tail,
    Variable,
    VariableRef,
    While,
    pretty_print,
    render_command,
    render_commands,
    render_expression,
    render_program,
)
from mientras.renderers.source import join_variables

X = VariableRef("X")
Y = VariableRef("Y")

# Reverses the list in X into Y
REVERSE = Program(
    [Variable("X")],
    [
        Assign(Variable("Y"), Nil()),
        While(
            X,
            [
                Assign(Variable("Y"), Cons(Head(X), Y)),
                Assign(Variable("X"), Tail(X)),
            ],
        ),
    ],
    [Variable("Y")],
)

# Same, with a nested loop in the middle of the outer body
NESTED = Program(
    [Variable("X")],
    [
        Assign(Variable("Y"), Nil()),
        While(
            X,
            [
                Assign(Variable("Y"), Cons(Head(X), Y)),
                While(
                    X,
                    [
                        Assign(Variable("Y"), Cons(Head(X), Y)),
                        Assign(Variable("X"), Tail(X)),
                    ],
                ),
                Assign(Variable("X"), Tail(X)),
            ],
        ),
    ],
    [Variable("Y")],
)


# =============================================================================
# Expressions
# =============================================================================


class TestRenderExpression:
    """One line per expression, fully parenthesized per operator."""

    def test_nil(self) -> None:
        assert render_expression(Nil()) == "nil"

    def test_constant_and_variable_verbatim(self) -> None:
        assert render_expression(Constant("abc")) == "abc"
        assert render_expression(VariableRef("Acc")) == "Acc"

    def test_cons(self) -> None:
        assert render_expression(Cons(Head(X), Y)) == "(cons (hd X) Y)"

    def test_head_and_tail(self) -> None:
        assert render_expression(Head(Tail(X))) == "(hd (tl X))"

    def test_equals_without_parentheses(self) -> None:
        assert render_expression(Equals(Tail(X), NIL)) == "(tl X) =? nil"

    def test_nested_cons(self) -> None:
        expr = Cons(Constant("a"), Cons(Constant("b"), NIL))
        assert render_expression(expr) == "(cons a (cons b nil))"


# =============================================================================
# Commands
# =============================================================================


class TestRenderCommand:
    """Single commands."""

    def test_nop(self) -> None:
        assert render_command(NOP) == ["nop"]

    def test_assign(self) -> None:
        assert render_command(Assign(Variable("Y"), Nil())) == ["Y := nil"]

    def test_while_with_width_five(self) -> None:
        loop = While(X, [Assign(Variable("X"), Tail(X))])
        assert render_command(loop, [("WHILE", 5)]) == [
            "while X do",
            "     X := (tl X)",
            "od",
        ]

    def test_while_default_width(self) -> None:
        assert render_command(While(X, [NOP]), []) == ["while X do", " nop", "od"]

    def test_for_uses_for_context(self) -> None:
        loop = For(X, [NOP])
        assert render_command(loop, [("WHILE", 6), ("FOR", 3)]) == ["for X do", "   nop", "od"]

    def test_if(self) -> None:
        cond = If(Equals(X, NIL), [Assign(Variable("Y"), Constant("a"))], [NOP])
        assert render_command(cond, [("IF", 2)]) == [
            "if X =? nil then",
            "  Y := a",
            "else",
            "  nop",
            "fi",
        ]

    def test_zero_width(self) -> None:
        assert render_command(While(X, [NOP]), [("WHILE", 0)]) == ["while X do", "nop", "od"]

    def test_nested_indents_accumulate(self) -> None:
        inner = For(Y, [NOP])
        outer = While(X, [inner])
        assert render_command(outer, [("WHILE", 2), ("FOR", 3)]) == [
            "while X do",
            "  for Y do",
            "     nop",
            "  od",
            "od",
        ]


class TestRenderCommands:
    """Sequences joined by " ;" on the last line of each non-final block."""

    def test_single_command(self) -> None:
        assert render_commands([NOP], []) == ["nop"]

    def test_two_assignments(self) -> None:
        commands = [Assign(Variable("A"), Nil()), Assign(Variable("B"), Nil())]
        assert render_commands(commands, []) == ["A := nil ;", "B := nil"]

    def test_separator_after_multiline_block(self) -> None:
        commands = [While(X, [NOP, NOP]), NOP]
        assert render_commands(commands, [("WHILE", 2)]) == [
            "while X do",
            "  nop ;",
            "  nop",
            "od ;",
            "nop",
        ]

    def test_last_command_has_no_separator(self) -> None:
        lines = render_commands([NOP, NOP, NOP], [])
        assert lines == ["nop ;", "nop ;", "nop"]

    def test_if_inside_sequence(self) -> None:
        commands = [If(X, [NOP], [NOP]), NOP]
        assert render_commands(commands, []) == [
            "if X then",
            " nop",
            "else",
            " nop",
            "fi ;",
            "nop",
        ]


# =============================================================================
# Programs
# =============================================================================


class TestRenderProgram:
    """Header, indented body, footer."""

    def test_reverse_program_lines(self) -> None:
        assert render_program(REVERSE, [("PROGR", 2), ("WHILE", 5)]) == [
            "read X",
            "%",
            "  Y := nil ;",
            "  while X do",
            "       Y := (cons (hd X) Y) ;",
            "       X := (tl X)",
            "  od",
            "%",
            "write Y",
        ]

    def test_nested_program_text(self) -> None:
        expected = "\n".join(
            [
                "read X",
                "%",
                "  Y := nil ;",
                "  while X do",
                "       Y := (cons (hd X) Y) ;",
                "       while X do",
                "            Y := (cons (hd X) Y) ;",
                "            X := (tl X)",
                "       od ;",
                "       X := (tl X)",
                "  od",
                "%",
                "write Y",
            ]
        )
        assert pretty_print(NESTED, [("PROGR", 2), ("WHILE", 5)]) == expected

    def test_default_program_indent(self) -> None:
        prog = Program([Variable("X")], [NOP], [Variable("X")])
        assert render_program(prog, []) == ["read X", "%", " nop", "%", "write X"]

    def test_several_parameters(self) -> None:
        prog = Program([Variable("A"), Variable("B")], [NOP], [Variable("C"), Variable("D")])
        lines = render_program(prog, [("PROGR", 0)])
        assert lines[0] == "read A, B"
        assert lines[-1] == "write C, D"

    def test_text_has_no_trailing_newline(self) -> None:
        text = pretty_print(REVERSE, [])
        assert not text.endswith("\n")
        assert text.count("\n") == len(render_program(REVERSE, [])) - 1

    def test_deterministic(self) -> None:
        spec = [("PROGR", 3), ("WHILE", 2)]
        assert pretty_print(NESTED, spec) == pretty_print(NESTED, spec)

    def test_join_variables(self) -> None:
        assert join_variables([Variable("X")]) == "X"
        assert join_variables([Variable("X"), Variable("Y"), Variable("Z")]) == "X, Y, Z"


class TestSourceRenderer:
    """The renderer class and its config lookup."""

    def test_methods_match_functions(self) -> None:
        spec = (("PROGR", 2), ("WHILE", 4))
        renderer = SourceRenderer(spec)
        assert renderer.render(REVERSE) == pretty_print(REVERSE, spec)
        assert renderer.render_lines(REVERSE) == render_program(REVERSE, spec)
        assert renderer.render_expression(Head(X)) == "(hd X)"
        assert renderer.render_commands(REVERSE.body) == render_commands(REVERSE.body, spec)

    def test_explicit_spec_exposed(self) -> None:
        assert SourceRenderer([("IF", 2)]).indent_spec == (("IF", 2),)

    def test_none_spec_reads_default_config(self) -> None:
        assert SourceRenderer().indent_spec == ()
        assert render_command(While(X, [NOP])) == ["while X do", " nop", "od"]

    def test_renderer_reusable(self) -> None:
        renderer = SourceRenderer([("WHILE", 3)])
        first = renderer.render(NESTED)
        second = renderer.render(NESTED)
        assert first == second
