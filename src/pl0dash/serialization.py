"""JSON round-trip for pl0dash syntax trees.

Converts nodes to/from JSON-compatible dicts. Useful for:
- Feeding the tree to tools in other languages
- Comparing tree shapes independent of token positions (``locations=False``)
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from pl0dash import parse
    from pl0dash.serialization import to_json, from_json

    tree = parse(b"write 1.")
    assert from_json(to_json(tree)) == tree

"""

import json
from typing import Any

from pl0dash.nodes import SyntaxKind, SyntaxNode, SyntaxTree
from pl0dash.tokens import Keyword, Symbol, Token, TokenType


def to_dict(node: SyntaxNode, *, locations: bool = True) -> dict[str, Any]:
    """Convert a node (and its subtree) to a JSON-compatible dict.

    Args:
        node: Any syntax node.
        locations: Include token positions.

    Returns:
        Dict with a ``_type`` discriminator.

    """
    if node.token is not None:
        return {
            "_type": "SyntaxNode",
            "kind": node.kind.value,
            "token": token_to_dict(node.token, locations=locations),
        }
    return {
        "_type": "SyntaxNode",
        "kind": node.kind.value,
        "children": [to_dict(child, locations=locations) for child in node.children],
    }


def token_to_dict(token: Token, *, locations: bool = True) -> dict[str, Any]:
    value = token.value
    result: dict[str, Any] = {
        "_type": "Token",
        "type": token.type.name,
        "value": value.value if isinstance(value, (Keyword, Symbol)) else value,
    }
    if locations:
        loc = token.location
        result["location"] = {
            "_type": "SourceLocation",
            "lineno": loc.lineno,
            "col_offset": loc.col_offset,
            "offset": loc.offset,
            "end_offset": loc.end_offset,
            "source_file": loc.source_file,
        }
    return result


def from_dict(data: dict[str, Any]) -> SyntaxNode:
    """Reconstruct a node from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` or ``kind`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name != "SyntaxNode":
        msg = f"Expected serialized SyntaxNode, got {type_name!r}"
        raise ValueError(msg)

    try:
        kind = SyntaxKind(data["kind"])
    except (KeyError, ValueError) as exc:
        msg = f"Unknown node kind: {data.get('kind')!r}"
        raise ValueError(msg) from exc

    if kind is SyntaxKind.TERMINAL:
        return SyntaxNode.terminal(token_from_dict(data["token"]))
    return SyntaxNode(kind, tuple(from_dict(child) for child in data.get("children", [])))


def token_from_dict(data: dict[str, Any]) -> Token:
    if data.get("_type") != "Token":
        msg = f"Expected serialized Token, got {data.get('_type')!r}"
        raise ValueError(msg)

    token_type = TokenType[data["type"]]
    raw = data["value"]
    value: Keyword | Symbol | str | int
    if token_type is TokenType.KEYWORD:
        value = Keyword(raw)
    elif token_type is TokenType.SYMBOL:
        value = Symbol(raw)
    elif token_type is TokenType.NUMBER:
        value = int(raw)
    else:
        value = str(raw)

    loc = data.get("location")
    if loc is None:
        return Token(token_type, value)
    return Token(
        token_type,
        value,
        _lineno=loc["lineno"],
        _col=loc["col_offset"],
        _start_offset=loc.get("offset", 0),
        _end_offset=loc.get("end_offset", 0),
        _source_file=loc.get("source_file"),
    )


def to_json(tree: SyntaxTree, *, indent: int | None = None, locations: bool = True) -> str:
    """Serialize a SyntaxTree to a JSON string.

    Args:
        tree: Tree to serialize.
        indent: JSON indentation level (None for compact).
        locations: Include token positions.

    """
    return json.dumps(to_dict(tree.root, locations=locations), sort_keys=True, indent=indent)


def from_json(data: str) -> SyntaxTree:
    """Deserialize a SyntaxTree from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a PROGRAM tree.

    """
    node = from_dict(json.loads(data))
    if node.kind is not SyntaxKind.PROGRAM:
        msg = f"Expected program, got {node.kind.value}"
        raise ValueError(msg)
    return SyntaxTree(node)
