"""Tests for mientras.profiling: render profiling API."""

import sys

from mientras import (
    NOP,
    Assign,
    Program,
    Tail,
    Variable,
    VariableRef,
    While,
    pretty_print,
    render_command,
)
from mientras.profiling import (
    RenderAccumulator,
    get_render_accumulator,
    profiled_render,
)

PROGRAM = Program([Variable("X")], [While(VariableRef("X"), [NOP])], [Variable("X")])


class TestGetRenderAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_render_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_render():
            pass
        assert get_render_accumulator() is None


class TestProfiledRender:
    def test_yields_accumulator(self) -> None:
        with profiled_render() as acc:
            assert isinstance(acc, RenderAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_render() as acc:
            assert get_render_accumulator() is acc

    def test_records_render_call(self) -> None:
        with profiled_render() as acc:
            text = pretty_print(PROGRAM)
        assert acc.render_calls == 1
        assert acc.line_count == 7
        assert acc.char_count == len(text)
        # Program, two Variables, While, VariableRef, Nop
        assert acc.node_count == 6

    def test_records_multiple_calls(self) -> None:
        with profiled_render() as acc:
            pretty_print(PROGRAM)
            pretty_print(PROGRAM, [("PROGR", 4)])
        assert acc.render_calls == 2
        assert acc.line_count == 14

    def test_fragments_are_not_recorded(self) -> None:
        with profiled_render() as acc:
            render_command(NOP)
        assert acc.render_calls == 0

    def test_profiling_does_not_limit_depth(self) -> None:
        depth = int(sys.getrecursionlimit() * 0.7)
        value = VariableRef("X")
        for _ in range(depth):
            value = Tail(value)
        program = Program([Variable("X")], [Assign(Variable("Y"), value)], [Variable("Y")])
        expected = pretty_print(program)

        with profiled_render() as acc:
            assert pretty_print(program) == expected
        assert acc.render_calls == 1
        # Program, two Variables, Assign, its target, the Tails, VariableRef
        assert acc.node_count == depth + 6

    def test_nested_contexts_are_independent(self) -> None:
        with profiled_render() as outer:
            with profiled_render() as inner:
                pretty_print(PROGRAM)
            assert get_render_accumulator() is outer
        assert inner.render_calls == 1
        assert outer.render_calls == 0


class TestSummary:
    def test_keys(self) -> None:
        with profiled_render() as acc:
            pretty_print(PROGRAM)
        summary = acc.summary()
        assert set(summary) == {
            "total_ms",
            "render_calls",
            "line_count",
            "char_count",
            "node_count",
        }
        assert summary["total_ms"] >= 0

    def test_empty_accumulator(self) -> None:
        acc = RenderAccumulator()
        assert acc.summary()["render_calls"] == 0
        assert acc.line_count == 0
