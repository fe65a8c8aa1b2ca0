"""Tests for the line-list utilities."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mientras.errors import EmptyListError
from mientras.lines import prefix_all, suffix_all, suffix_all_but_last, suffix_last

non_empty_lines = st.lists(st.text(max_size=20), min_size=1, max_size=20)
affixes = st.text(max_size=5)


class TestExamples:
    """Concrete inputs and outputs."""

    def test_prefix_all(self) -> None:
        assert prefix_all("  ", ["a", "b"]) == ["  a", "  b"]

    def test_suffix_all(self) -> None:
        assert suffix_all(";", ["a", "b"]) == ["a;", "b;"]

    def test_suffix_last(self) -> None:
        assert suffix_last(" ;", ["while X do", " nop", "od"]) == ["while X do", " nop", "od ;"]

    def test_suffix_all_but_last(self) -> None:
        assert suffix_all_but_last("\n", ["read X", "%", "write X"]) == ["read X\n", "%\n", "write X"]

    def test_single_line(self) -> None:
        assert suffix_last("!", ["a"]) == ["a!"]
        assert suffix_all_but_last("!", ["a"]) == ["a"]

    def test_input_not_mutated(self) -> None:
        lines = ["a", "b"]
        suffix_last("!", lines)
        suffix_all_but_last("!", lines)
        assert lines == ["a", "b"]

    def test_accepts_tuples(self) -> None:
        assert prefix_all(">", ("a", "b")) == [">a", ">b"]
        assert suffix_last("!", ("a", "b")) == ["a", "b!"]


class TestEmptyInput:
    """Every utility rejects an empty sequence."""

    @pytest.mark.parametrize(
        "fn", [prefix_all, suffix_all, suffix_last, suffix_all_but_last]
    )
    def test_raises_empty_list_error(self, fn) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(EmptyListError) as excinfo:
            fn("x", [])
        assert excinfo.value.what == fn.__name__


class TestProperties:
    """Laws that hold for every non-empty line list."""

    @given(prefix=affixes, lines=non_empty_lines)
    @settings(max_examples=100)
    def test_prefix_all_keeps_length_and_prefixes(self, prefix: str, lines: list[str]) -> None:
        result = prefix_all(prefix, lines)
        assert len(result) == len(lines)
        assert all(line.startswith(prefix) for line in result)
        assert [line[len(prefix) :] for line in result] == lines

    @given(suffix=affixes, lines=non_empty_lines)
    @settings(max_examples=100)
    def test_suffix_last_touches_only_last(self, suffix: str, lines: list[str]) -> None:
        result = suffix_last(suffix, lines)
        assert result[-1] == lines[-1] + suffix
        assert result[:-1] == lines[:-1]

    @given(suffix=affixes, lines=non_empty_lines)
    @settings(max_examples=100)
    def test_all_but_last_plus_last_is_all(self, suffix: str, lines: list[str]) -> None:
        result = suffix_all_but_last(suffix, lines)
        result[-1] += suffix
        assert result == suffix_all(suffix, lines)

    @given(suffix=affixes, lines=non_empty_lines)
    @settings(max_examples=100)
    def test_all_but_last_joins_like_str_join(self, suffix: str, lines: list[str]) -> None:
        assert "".join(suffix_all_but_last(suffix, lines)) == suffix.join(lines)
