"""ASTRenderer protocol: stable interface for program renderers.

Any renderer that implements ``render(program) -> str`` conforms to this
protocol. The built-in ``SourceRenderer`` is the reference implementation.

Example:
    from mientras.renderers.protocol import ASTRenderer

    def save(renderer: ASTRenderer, program: Program, path: Path) -> None:
        path.write_text(renderer.render(program))

"""

from typing import Protocol

from mientras.nodes import Program


class ASTRenderer(Protocol):
    """Protocol for program renderers."""

    def render(self, program: Program) -> str:
        """Render a Program AST to a string."""
        ...
