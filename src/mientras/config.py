"""ContextVar-based print configuration for Mientras.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per PrettyPrinter call, read by every renderer function
that was not handed an explicit indent spec.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed.

Usage:
    from mientras.config import PrintConfig, print_config_context

    with print_config_context(PrintConfig(indent_spec=(("WHILE", 4),))):
        text = pretty_print(program)  # while bodies indented by 4

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from mientras.indent import IndentSpec, normalize_spec
from mientras.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PrintConfig:
    """Immutable print configuration.

    Attributes:
        indent_spec: Ordered (context, width) pairs; the first entry for a
            context wins. Contexts not listed indent by one space.

    """

    indent_spec: tuple[tuple[str, int], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "indent_spec", normalize_spec(self.indent_spec))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "PrintConfig":
        """Create PrintConfig from a dictionary.

        Only keys that are PrintConfig fields are used; unknown keys are
        ignored. ``indent_spec`` may be a list of pairs or a mapping such
        as a parsed ``[indent]`` TOML table.

        Example:
            >>> config = PrintConfig.from_dict({"indent_spec": {"WHILE": 4, "PROGR": 2}})
            >>> config.indent_spec
            (('WHILE', 4), ('PROGR', 2))

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        unknown = sorted(k for k in config_dict if k not in valid_fields)
        if unknown:
            logger.debug("Ignoring unknown print config keys: %s", ", ".join(unknown))
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def with_indent(self, context: str, width: int) -> "PrintConfig":
        """Return a copy whose spec puts (context, width) first, shadowing older entries."""
        return PrintConfig(indent_spec=((context, width), *self.indent_spec))


def resolve_spec(indent_spec: IndentSpec | None) -> IndentSpec:
    """Explicit spec if given, otherwise the active config's spec."""
    if indent_spec is None:
        return _print_config.get().indent_spec
    return indent_spec


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: PrintConfig = PrintConfig()

_print_config: ContextVar[PrintConfig] = ContextVar(
    "print_config",
    default=_DEFAULT_CONFIG,
)


def get_print_config() -> PrintConfig:
    """Get current print configuration (thread-local)."""
    return _print_config.get()


def set_print_config(config: PrintConfig) -> None:
    """Set print configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _print_config.set(config)


def reset_print_config() -> None:
    """Reset to the default configuration (every context indents by one)."""
    _print_config.set(_DEFAULT_CONFIG)


@contextmanager
def print_config_context(config: PrintConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with print_config_context(PrintConfig(indent_spec=(("IF", 3),))):
        ...     get_print_config().indent_spec
        (('IF', 3),)

    """
    previous = _print_config.get()
    _print_config.set(config)
    try:
        yield
    finally:
        _print_config.set(previous)


__all__ = [
    "PrintConfig",
    "get_print_config",
    "print_config_context",
    "reset_print_config",
    "resolve_spec",
    "set_print_config",
]
