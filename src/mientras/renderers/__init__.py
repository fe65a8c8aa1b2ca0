"""Renderers for WHILE ASTs.

Provides:
- source: SourceRenderer, printing ASTs back to WHILE concrete syntax
- protocol: ASTRenderer, the interface renderers conform to
"""

from mientras.renderers.protocol import ASTRenderer
from mientras.renderers.source import (
    SourceRenderer,
    join_variables,
    pretty_print,
    render_command,
    render_commands,
    render_expression,
    render_program,
)

__all__ = [
    "ASTRenderer",
    "SourceRenderer",
    "join_variables",
    "pretty_print",
    "render_command",
    "render_commands",
    "render_expression",
    "render_program",
]
