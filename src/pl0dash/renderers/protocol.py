"""Stable interface for tree renderers.

Any renderer that implements ``render(tree) -> str`` and
``write(tree, sink)`` conforms to this protocol. The built-in
``XmlRenderer`` is the reference implementation.

Example:
    from pl0dash.renderers.protocol import TreeRenderer

    def dump(renderer: TreeRenderer, tree: SyntaxTree, path: Path) -> None:
        with path.open("w", encoding="utf-8") as sink:
            renderer.write(tree, sink)

"""

from typing import Protocol, TextIO

from pl0dash.nodes import SyntaxTree


class TreeRenderer(Protocol):
    """Protocol for syntax tree renderers."""

    def render(self, tree: SyntaxTree) -> str:
        """Render a tree to a string."""
        ...

    def write(self, tree: SyntaxTree, sink: TextIO) -> None:
        """Write a rendered tree to a text sink.

        Raises:
            RenderError: The sink failed.

        """
        ...
