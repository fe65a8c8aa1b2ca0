"""Line-list utilities used to assemble printed source.

Every printer produces an ordered list of output lines. These helpers glue
a prefix or suffix onto some of those lines. All of them require a
non-empty sequence, preserve order and length, and return a new list.

Example:
    >>> suffix_last(" ;", ["while X do", " nop", "od"])
    ['while X do', ' nop', 'od ;']

Thread Safety:
All functions are pure. Inputs are never mutated.

"""

from __future__ import annotations

from collections.abc import Sequence

from mientras.errors import EmptyListError


def prefix_all(prefix: str, lines: Sequence[str]) -> list[str]:
    """Prepend prefix to every line.

    Raises:
        EmptyListError: If lines is empty.
    """
    if not lines:
        raise EmptyListError("prefix_all")
    return [prefix + line for line in lines]


def suffix_all(suffix: str, lines: Sequence[str]) -> list[str]:
    """Append suffix to every line.

    Raises:
        EmptyListError: If lines is empty.
    """
    if not lines:
        raise EmptyListError("suffix_all")
    return [line + suffix for line in lines]


def suffix_last(suffix: str, lines: Sequence[str]) -> list[str]:
    """Append suffix to the last line only.

    Raises:
        EmptyListError: If lines is empty.
    """
    if not lines:
        raise EmptyListError("suffix_last")
    result = list(lines)
    result[-1] += suffix
    return result


def suffix_all_but_last(suffix: str, lines: Sequence[str]) -> list[str]:
    """Append suffix to every line except the last.

    Joining the result with "" is the same as joining lines with suffix.

    Raises:
        EmptyListError: If lines is empty.
    """
    if not lines:
        raise EmptyListError("suffix_all_but_last")
    result = [line + suffix for line in lines[:-1]]
    result.append(lines[-1])
    return result


__all__ = [
    "prefix_all",
    "suffix_all",
    "suffix_all_but_last",
    "suffix_last",
]
