"""Concrete syntax tree nodes for pl0dash.

Every node is a frozen dataclass with slots. The tree is a strict ownership
hierarchy: each non-terminal owns an ordered tuple of children, each
terminal wraps exactly one token, and nothing is shared or points back up.

Node kinds mirror the grammar productions:

SyntaxKind
├── PROGRAM      Block '.'
├── BLOCK        declarations followed by one statement
├── CONST_DECL
├── VAR_DECL
├── FUNC_DECL
├── STATEMENT    may be empty
├── CONDITION
├── EXPRESSION
├── TERM
├── FACTOR
└── TERMINAL     one consumed token

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from pl0dash.tokens import Token


class SyntaxKind(Enum):
    """Grammar symbol a node was built for. Values are the XML tag names."""

    PROGRAM = "program"
    BLOCK = "block"
    CONST_DECL = "constDecl"
    VAR_DECL = "varDecl"
    FUNC_DECL = "funcDecl"
    STATEMENT = "statement"
    CONDITION = "condition"
    EXPRESSION = "expression"
    TERM = "term"
    FACTOR = "factor"
    TERMINAL = "terminal"

    @property
    def tag(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """One node of the concrete syntax tree.

    Attributes:
        kind: Grammar symbol, or TERMINAL
        children: Ordered child nodes (empty for terminals)
        token: The wrapped token (terminals only)

    Raises:
        ValueError: On construction, if a terminal has no token or has
            children, or a non-terminal carries a token.

    """

    kind: SyntaxKind
    children: tuple[SyntaxNode, ...] = ()
    token: Token | None = None

    def __post_init__(self) -> None:
        if self.kind is SyntaxKind.TERMINAL:
            if self.token is None:
                raise ValueError("terminal node must wrap a token")
            if self.children:
                raise ValueError("terminal node cannot have children")
        elif self.token is not None:
            raise ValueError(f"{self.kind.name} node cannot wrap a token")

    @classmethod
    def terminal(cls, token: Token) -> SyntaxNode:
        return cls(SyntaxKind.TERMINAL, token=token)

    @property
    def is_terminal(self) -> bool:
        return self.kind is SyntaxKind.TERMINAL

    def child_kinds(self) -> tuple[SyntaxKind, ...]:
        return tuple(child.kind for child in self.children)

    def nonterminals(self, kind: SyntaxKind | None = None) -> tuple[SyntaxNode, ...]:
        """Direct non-terminal children, optionally filtered by kind."""
        return tuple(
            child
            for child in self.children
            if not child.is_terminal and (kind is None or child.kind is kind)
        )

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def iter_tokens(self) -> Iterator[Token]:
        """Yield the wrapped tokens of all terminals, left to right."""
        for node in self.walk():
            if node.token is not None:
                yield node.token

    def depth(self) -> int:
        """Number of levels in this subtree (a terminal has depth 1)."""
        deepest = 0
        stack: list[tuple[SyntaxNode, int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest

    def __repr__(self) -> str:
        if self.token is not None:
            return f"SyntaxNode(TERMINAL, {self.token!r})"
        return f"SyntaxNode({self.kind.name}, {len(self.children)} children)"


@dataclass(frozen=True, slots=True)
class SyntaxTree:
    """A parsed source unit. The root is always a PROGRAM node."""

    root: SyntaxNode

    def __post_init__(self) -> None:
        if self.root.kind is not SyntaxKind.PROGRAM:
            raise ValueError(f"tree root must be PROGRAM, got {self.root.kind.name}")

    def tokens(self) -> list[Token]:
        """All terminal tokens in source order."""
        return list(self.root.iter_tokens())

    def walk(self) -> Iterator[SyntaxNode]:
        return self.root.walk()

    def depth(self) -> int:
        return self.root.depth()
