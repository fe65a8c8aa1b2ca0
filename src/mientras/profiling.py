"""Mientras RenderAccumulator: opt-in profiling for pretty-printing.

This module provides accumulated metrics during rendering:
- Number of render calls
- Lines and characters produced
- Node count of the rendered programs

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from mientras import pretty_print
    from mientras.profiling import profiled_render

    with profiled_render() as metrics:
        text = pretty_print(program)

    print(metrics.summary())
    # {"total_ms": 0.4, "render_calls": 1, "line_count": 7, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of programs rendered.
        line_count: Total output lines produced.
        char_count: Total characters in the joined output.
        node_count: Total AST nodes rendered.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    line_count: int = 0
    char_count: int = 0
    node_count: int = 0

    def record_render(self, lines: list[str], node_count: int) -> None:
        """Record one rendered program.

        Args:
            lines: Output lines of the program.
            node_count: Number of AST nodes in the program.

        """
        self.render_calls += 1
        self.line_count += len(lines)
        # Joined text has one newline between each pair of lines
        self.char_count += sum(len(line) for line in lines) + len(lines) - 1
        self.node_count += node_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "line_count": self.line_count,
            "char_count": self.char_count,
            "node_count": self.node_count,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Example:
        with profiled_render() as metrics:
            pretty_print(program)
        print(metrics.summary())

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
