"""
pl0dash: a PL/0-dash front end for Python

A byte-level lexer and recursive descent parser for PL/0-dash, a small
Pascal-like teaching language, plus an emitter that prints the concrete
syntax tree as nested tagged text.

Quick Start:
    >>> from pl0dash import parse, emit
    >>> tree = parse(b"var x; x := 1 + 2.")
    >>> print(emit(tree), end="")
    <program>
      <block>
        <varDecl>
    ...

    >>> # Or in one step
    >>> from pl0dash import compile_source
    >>> xml = compile_source(b"writeln.")

Token stream only:
    >>> from pl0dash import tokenize
    >>> [t.literal for t in tokenize(b"a := a + 1")]
    ['a', ':=', 'a', '+', '1']

Installation:
    pip install pl0dash              # zero runtime deps
    pip install pl0dash[test]        # + pytest and hypothesis
"""

from pathlib import Path
from typing import BinaryIO, Literal

from pl0dash.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pl0dash.errors import (
    CannotReadByteError,
    CommentNotTerminatedError,
    LexError,
    NestingTooDeepError,
    ParseError,
    Pl0DashError,
    RenderError,
    UndefinedTokenError,
    UnexpectedEndError,
)
from pl0dash.lexer import Lexer
from pl0dash.location import SourceLocation
from pl0dash.nodes import SyntaxKind, SyntaxNode, SyntaxTree
from pl0dash.parser import Parser
from pl0dash.renderers.protocol import TreeRenderer
from pl0dash.renderers.xml import XmlRenderer
from pl0dash.serialization import from_dict, from_json, to_dict, to_json
from pl0dash.tokens import Keyword, Symbol, Token, TokenType

__version__ = "0.1.0"

Source = bytes | bytearray | memoryview | str | BinaryIO
OutputFormat = Literal["xml", "json", "tokens"]


def tokenize(source: Source, *, source_file: str | None = None) -> list[Token]:
    """Lex the whole source into a list of tokens.

    Raises:
        LexError: On the first byte that starts no token, or an
            unterminated comment
    """
    return list(Lexer(source, source_file=source_file).tokenize())


def parse(
    source: Source,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> SyntaxTree:
    """Parse PL/0-dash source into a concrete syntax tree.

    Args:
        source: Program text or a binary stream
        source_file: Optional path used in error messages
        config: Overrides the active ParseConfig for this call only

    Returns:
        SyntaxTree whose root is the PROGRAM node

    Example:
        >>> tree = parse(b"write 1.")
        >>> tree.root.kind
        <SyntaxKind.PROGRAM: 'program'>
    """
    parser = Parser(Lexer(source, source_file=source_file))
    if config is None:
        return parser.parse()
    with parse_config_context(config):
        return parser.parse()


def emit(tree: SyntaxTree, *, indent: int = 2) -> str:
    """Render a tree as nested tagged text."""
    return XmlRenderer(indent=indent).render(tree)


def compile_source(source: Source, *, source_file: str | None = None) -> str:
    """Parse then emit in one step."""
    return emit(parse(source, source_file=source_file))


def compile_file(path: str | Path, *, fmt: OutputFormat = "xml") -> str:
    """Read one source file and return its rendering in ``fmt``.

    Args:
        path: Source file
        fmt: ``"xml"`` (syntax tree), ``"json"`` (serialized tree) or
            ``"tokens"`` (flat token stream)

    Raises:
        OSError: The file cannot be opened
        Pl0DashError: Lexing or parsing failed
    """
    if fmt not in ("xml", "json", "tokens"):
        raise ValueError(f"unknown output format: {fmt!r}")
    path = Path(path)
    with path.open("rb") as stream:
        if fmt == "tokens":
            return XmlRenderer().render_tokens(Lexer(stream, source_file=str(path)).tokenize())
        tree = parse(stream, source_file=str(path))
    if fmt == "json":
        return to_json(tree, indent=2)
    return emit(tree)


__all__ = [
    # Main API
    "tokenize",
    "parse",
    "emit",
    "compile_source",
    "compile_file",
    # Core classes
    "Lexer",
    "Parser",
    "XmlRenderer",
    "TreeRenderer",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Tokens
    "Token",
    "TokenType",
    "Keyword",
    "Symbol",
    # Tree
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxTree",
    "SourceLocation",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "Pl0DashError",
    "LexError",
    "UndefinedTokenError",
    "CommentNotTerminatedError",
    "CannotReadByteError",
    "ParseError",
    "UnexpectedEndError",
    "NestingTooDeepError",
    "RenderError",
]
