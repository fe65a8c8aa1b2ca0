"""AST serialization: JSON round-trip for WHILE AST nodes.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed programs to disk
- Exchanging ASTs with tools that do not speak WHILE syntax
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from mientras import parse_program
    from mientras.serialization import to_json, from_json

    prog = parse_program("read X % Y := (hd X) % write Y")
    restored = from_json(to_json(prog))
    assert prog == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

Errors:
    Malformed input raises SerializationError (a ValueError), as do trees
    and documents nested beyond the recursion limit. Empty bodies raise
    EmptyListError when the node is rebuilt.

"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import fields
from typing import Any

from mientras.errors import SerializationError
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
from mientras.utils.logger import get_logger

logger = get_logger(__name__)

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
        Variable,
        Nil,
        Constant,
        VariableRef,
        Cons,
        Head,
        Tail,
        Equals,
        Nop,
        Assign,
        While,
        For,
        If,
        Program,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes; tuples become lists.

    Raises:
        SerializationError: If node is not a WHILE AST node, or is nested
            beyond the recursion limit.

    """
    with _nesting_guard("serialize"):
        return _to_dict(node)


def _to_dict(node: Node) -> dict[str, Any]:
    type_name = type(node).__name__
    if _NODE_TYPES.get(type_name) is not type(node):
        msg = f"Cannot serialize {type_name}: not a WHILE AST node"
        raise SerializationError(msg)

    result: dict[str, Any] = {"_type": type_name}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, str):
        return value
    return _to_dict(value)


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Uses the ``_type`` discriminator to determine the node class.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, a field is
            missing, or the data is nested beyond the recursion limit.
        EmptyListError: If a body or variable list is empty.

    """
    with _nesting_guard("deserialize"):
        return _from_dict(data)


def _from_dict(data: dict[str, Any]) -> Node:
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            msg = f"Missing field {f.name!r} for {type_name}"
            raise SerializationError(msg)
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return _from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(program: Program, *, indent: int | None = None) -> str:
    """Serialize a Program AST to a JSON string.

    Args:
        program: Program to serialize.
        indent: JSON indentation level (None for compact).

    Raises:
        SerializationError: If the tree cannot be serialized.

    """
    with _nesting_guard("serialize"):
        return json.dumps(_to_dict(program), sort_keys=True, indent=indent)


def from_json(data: str) -> Program:
    """Deserialize a Program AST from a JSON string.

    Raises:
        SerializationError: If the JSON doesn't represent a Program, or is
            nested beyond the recursion limit.

    """
    with _nesting_guard("deserialize"):
        raw = json.loads(data)
        if not isinstance(raw, dict):
            msg = f"Expected a JSON object, got {type(raw).__name__}"
            raise SerializationError(msg)
        node = _from_dict(raw)
    if not isinstance(node, Program):
        msg = f"Expected Program, got {type(node).__name__}"
        raise SerializationError(msg)
    return node


@contextmanager
def _nesting_guard(action: str) -> Iterator[None]:
    """Turn interpreter recursion overflow into a SerializationError."""
    try:
        yield
    except RecursionError as exc:
        logger.debug("Recursion limit reached during %s", action)
        msg = f"Tree is nested too deeply to {action}"
        raise SerializationError(msg) from exc
