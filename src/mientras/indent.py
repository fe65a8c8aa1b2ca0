"""Indentation specs: how far each construct indents its body.

An IndentSpec is an ordered sequence of (context, width) pairs. Lookup scans
it front to back and the first matching context wins, so an entry placed
earlier shadows a later one with the same name. Contexts that appear
nowhere in the spec indent by DEFAULT_INDENT.

Example:
    >>> spec = [("WHILE", 4), ("PROGR", 2), ("WHILE", 8)]
    >>> resolve_indent("WHILE", spec)
    4
    >>> resolve_indent("IF", spec)
    1
    >>> make_indent(3)
    '   '

"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from mientras.errors import ConfigError

type IndentSpec = Sequence[tuple[str, int]]

DEFAULT_INDENT = 1


class IndentContext(StrEnum):
    """Constructs whose bodies are indented.

    Members compare equal to their plain-string names, so specs written
    with "WHILE" or IndentContext.WHILE are interchangeable.

    """

    WHILE = "WHILE"
    FOR = "FOR"
    IF = "IF"
    PROGRAM = "PROGR"


def resolve_indent(context: str, spec: IndentSpec) -> int:
    """Width for context: the first matching entry, else DEFAULT_INDENT."""
    for name, width in spec:
        if name == context:
            return width
    return DEFAULT_INDENT


def make_indent(width: int) -> str:
    """A string of exactly width spaces.

    Raises:
        ConfigError: If width is negative.
    """
    if width < 0:
        msg = f"Indent width must be non-negative, got {width}"
        raise ConfigError(msg)
    return " " * width


def normalize_spec(spec: IndentSpec | dict[str, int]) -> tuple[tuple[str, int], ...]:
    """Freeze a spec into a tuple of pairs, validating every width.

    A mapping is accepted too; its insertion order becomes the lookup order.

    Raises:
        ConfigError: If an entry is not a (str, non-negative int) pair.
    """
    items = spec.items() if isinstance(spec, dict) else spec
    pairs: list[tuple[str, int]] = []
    for entry in items:
        try:
            name, width = entry
        except (TypeError, ValueError) as exc:
            msg = f"Indent spec entries must be (context, width) pairs, got {entry!r}"
            raise ConfigError(msg) from exc
        if not isinstance(name, str):
            msg = f"Indent context must be a string, got {name!r}"
            raise ConfigError(msg)
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            msg = f"Indent width for {name!r} must be a non-negative int, got {width!r}"
            raise ConfigError(msg)
        pairs.append((str(name), width))
    return tuple(pairs)


__all__ = [
    "DEFAULT_INDENT",
    "IndentContext",
    "IndentSpec",
    "make_indent",
    "normalize_spec",
    "resolve_indent",
]
