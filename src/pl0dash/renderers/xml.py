"""XML-style tree emitter.

Walks the tree depth-first in pre-order. A non-terminal becomes an opening
tag named after its grammar symbol, its children in stored order, and the
matching closing tag. A terminal becomes a single line::

    <keyword> begin </keyword>
    <symbol> &lt;= </symbol>
    <identifier> x </identifier>
    <number> 42 </number>

Each tag sits on its own line, indented by depth.
"""

from __future__ import annotations

import html
import io
from collections.abc import Iterable, Iterator
from typing import TextIO

from pl0dash.errors import RenderError
from pl0dash.nodes import SyntaxNode, SyntaxTree
from pl0dash.tokens import Token


def xml_escape(s: str) -> str:
    """Escape ``<``, ``>`` and ``&``."""
    return html.escape(s, quote=False)


def _terminal_line(token: Token) -> str:
    tag = token.type.tag
    return f"<{tag}> {xml_escape(token.literal)} </{tag}>"


class XmlRenderer:
    """Render a SyntaxTree as nested tagged text.

    Usage:
            >>> print(XmlRenderer().render(parse(b"writeln.")), end="")
            <program>
              <block>
                <statement>
                  <keyword> writeln </keyword>
                </statement>
              </block>
              <symbol> . </symbol>
            </program>

    """

    __slots__ = ("_indent",)

    def __init__(self, indent: int = 2) -> None:
        """Initialize renderer.

        Args:
            indent: Spaces per nesting level (0 for flat output)
        """
        if indent < 0:
            raise ValueError(f"indent must be non-negative, got {indent}")
        self._indent = indent

    def render(self, tree: SyntaxTree) -> str:
        """Render a tree to a string."""
        buffer = io.StringIO()
        self.write(tree, buffer)
        return buffer.getvalue()

    def write(self, tree: SyntaxTree, sink: TextIO) -> None:
        """Write the rendered tree to ``sink`` line by line.

        Raises:
            RenderError: The sink raised OSError
        """
        self._write_lines(self._tree_lines(tree.root), sink)

    def render_tokens(self, tokens: Iterable[Token]) -> str:
        """Render a flat token stream wrapped in ``<tokens>``."""
        buffer = io.StringIO()
        self.write_tokens(tokens, buffer)
        return buffer.getvalue()

    def write_tokens(self, tokens: Iterable[Token], sink: TextIO) -> None:
        pad = " " * self._indent

        def lines() -> Iterator[str]:
            yield "<tokens>"
            for token in tokens:
                yield pad + _terminal_line(token)
            yield "</tokens>"

        self._write_lines(lines(), sink)

    def _tree_lines(self, root: SyntaxNode) -> Iterator[str]:
        # Explicit stack: (node, depth, closing)
        stack: list[tuple[SyntaxNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, closing = stack.pop()
            pad = " " * (self._indent * depth)
            if node.token is not None:
                yield pad + _terminal_line(node.token)
                continue
            tag = node.kind.tag
            if closing:
                yield f"{pad}</{tag}>"
                continue
            yield f"{pad}<{tag}>"
            stack.append((node, depth, True))
            stack.extend((child, depth + 1, False) for child in reversed(node.children))

    def _write_lines(self, lines: Iterable[str], sink: TextIO) -> None:
        try:
            for line in lines:
                sink.write(line)
                sink.write("\n")
        except OSError as exc:
            raise RenderError(f"cannot write output: {exc}") from exc
