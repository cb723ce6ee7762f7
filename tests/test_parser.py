"""Tests for the recursive descent parser.

Each test checks the tree shape a production builds: node kinds in order,
with terminals identified by their literal.
"""

import pytest

from pl0dash import ParseConfig, parse
from pl0dash.errors import ParseError
from pl0dash.lexer import Lexer
from pl0dash.nodes import SyntaxKind, SyntaxNode
from pl0dash.parser import Parser

K = SyntaxKind


def shape(node: SyntaxNode) -> list[str]:
    """Children as tag names, with terminals shown by their literal."""
    return [
        child.token.literal if child.token is not None else child.kind.tag
        for child in node.children
    ]


def statement_of(source: bytes) -> SyntaxNode:
    """The main statement of a program with no declarations."""
    block = parse(source).root.children[0]
    return block.children[-1]


def factor_of(source: bytes) -> SyntaxNode:
    """First factor found in the tree."""
    return next(n for n in parse(source).walk() if n.kind is K.FACTOR)


class TestProgram:
    def test_minimal_program(self) -> None:
        tree = parse(b".")
        root = tree.root
        assert root.kind is K.PROGRAM
        assert shape(root) == ["block", "."]
        block = root.children[0]
        assert shape(block) == ["statement"]
        assert block.children[0].children == ()

    def test_writeln(self) -> None:
        stmt = statement_of(b"writeln.")
        assert shape(stmt) == ["writeln"]

    def test_tree_depth(self) -> None:
        assert parse(b"writeln.").depth() == 4

    def test_parser_is_single_use(self) -> None:
        parser = Parser(Lexer(b"writeln."))
        parser.parse()
        with pytest.raises(RuntimeError, match="single-use"):
            parser.parse()

    def test_trailing_tokens_allowed_by_config(self) -> None:
        tree = parse(b"write 1. write 2.", config=ParseConfig(allow_trailing_tokens=True))
        assert tree.tokens()[-1].literal == "."
        assert len(tree.tokens()) == 3

    def test_trailing_input_is_not_lexed_when_allowed(self) -> None:
        config = ParseConfig(allow_trailing_tokens=True)
        tree = parse(b"write 1. @ /* open", config=config)
        assert [t.literal for t in tree.tokens()] == ["write", "1", "."]

    def test_trailing_tokens_rejected_by_default(self) -> None:
        with pytest.raises(ParseError, match="expected end of input"):
            parse(b"write 1. write 2.")


class TestDeclarations:
    def test_const_decl(self) -> None:
        block = parse(b"const a = 1, b = 20; writeln.").root.children[0]
        assert shape(block) == ["constDecl", "statement"]
        assert shape(block.children[0]) == ["const", "a", "=", "1", ",", "b", "=", "20", ";"]

    def test_var_decl(self) -> None:
        block = parse(b"var x, y, z; .").root.children[0]
        assert shape(block.children[0]) == ["var", "x", ",", "y", ",", "z", ";"]

    def test_declarations_in_any_order_and_repeated(self) -> None:
        block = parse(b"var a; const b = 2; var c; .").root.children[0]
        assert block.child_kinds() == (K.VAR_DECL, K.CONST_DECL, K.VAR_DECL, K.STATEMENT)

    def test_func_decl_without_params(self) -> None:
        block = parse(b"function f() writeln; .").root.children[0]
        func = block.children[0]
        assert shape(func) == ["function", "f", "(", ")", "block", ";"]

    def test_func_decl_with_params(self) -> None:
        block = parse(b"function add(a, b) return a + b; .").root.children[0]
        func = block.children[0]
        assert shape(func) == ["function", "add", "(", "a", ",", "b", ")", "block", ";"]

    def test_nested_function_scenario(self) -> None:
        tree = parse(b"function f() var x; begin x := 1 end; write x.")
        root = tree.root
        assert shape(root) == ["block", "."]
        block = root.children[0]
        assert block.child_kinds() == (K.FUNC_DECL, K.STATEMENT)

        func = block.children[0]
        assert shape(func) == ["function", "f", "(", ")", "block", ";"]
        inner = func.nonterminals(K.BLOCK)[0]
        assert inner.child_kinds() == (K.VAR_DECL, K.STATEMENT)
        assert shape(inner.children[1]) == ["begin", "statement", "end"]

        main = block.children[1]
        assert shape(main) == ["write", "expression"]

    def test_semicolon_after_params_ends_function(self) -> None:
        # The ';' closes a function with an empty body, so the later
        # declarations belong to the outer block.
        with pytest.raises(ParseError) as exc_info:
            parse(b"function f(); var x; begin x := 1 end; write x.")
        err = exc_info.value
        assert err.message == "expected '.', found symbol ';'"
        assert (err.lineno, err.col_offset) == (1, 38)

    def test_function_with_empty_body(self) -> None:
        func = parse(b"function f(); .").root.children[0].children[0]
        body = func.nonterminals(K.BLOCK)[0]
        assert shape(body) == ["statement"]
        assert body.children[0].children == ()


class TestStatements:
    def test_assignment(self) -> None:
        assert shape(statement_of(b"x := 1.")) == ["x", ":=", "expression"]

    def test_begin_end_sequence(self) -> None:
        stmt = statement_of(b"begin x := 1; y := 2; writeln end.")
        assert shape(stmt) == [
            "begin", "statement", ";", "statement", ";", "statement", "end",
        ]  # fmt: skip

    def test_empty_statements_in_sequence(self) -> None:
        stmt = statement_of(b"begin ; end.")
        assert shape(stmt) == ["begin", "statement", ";", "statement", "end"]
        assert all(s.children == () for s in stmt.nonterminals(K.STATEMENT))

    def test_if(self) -> None:
        stmt = statement_of(b"if x = 1 then writeln.")
        assert shape(stmt) == ["if", "condition", "then", "statement"]

    def test_while(self) -> None:
        stmt = statement_of(b"while x > 0 do x := x - 1.")
        assert shape(stmt) == ["while", "condition", "do", "statement"]

    def test_return(self) -> None:
        assert shape(statement_of(b"return 0.")) == ["return", "expression"]

    def test_write(self) -> None:
        assert shape(statement_of(b"write x * 2.")) == ["write", "expression"]


class TestConditions:
    @pytest.mark.parametrize("op", ["=", "<>", "<", "<=", ">", ">="])
    def test_relational(self, op: str) -> None:
        cond = statement_of(f"if a {op} b then writeln.".encode()).children[1]
        assert shape(cond) == ["expression", op, "expression"]

    def test_odd(self) -> None:
        cond = statement_of(b"if odd n then writeln.").children[1]
        assert shape(cond) == ["odd", "expression"]


class TestExpressions:
    def test_single_term(self) -> None:
        expr = statement_of(b"write 1.").children[1]
        assert shape(expr) == ["term"]
        assert shape(expr.children[0]) == ["factor"]
        assert shape(expr.children[0].children[0]) == ["1"]

    def test_unary_minus(self) -> None:
        expr = statement_of(b"write -x.").children[1]
        assert shape(expr) == ["-", "term"]

    def test_unary_plus_then_binary(self) -> None:
        expr = statement_of(b"write +a - b + c.").children[1]
        assert shape(expr) == ["+", "term", "-", "term", "+", "term"]

    def test_term_operators(self) -> None:
        term = statement_of(b"write a * b / c.").children[1].children[0]
        assert shape(term) == ["factor", "*", "factor", "/", "factor"]

    def test_parenthesized(self) -> None:
        assert shape(factor_of(b"write (1 + 2).")) == ["(", "expression", ")"]

    def test_bare_identifier(self) -> None:
        assert shape(factor_of(b"write foo.")) == ["foo"]

    def test_empty_call_has_distinct_shape(self) -> None:
        assert shape(factor_of(b"write foo().")) == ["foo", "(", ")"]

    def test_call_with_arguments(self) -> None:
        factor = factor_of(b"write f(1, x + 1, g()).")
        assert shape(factor) == ["f", "(", "expression", ",", "expression", ",", "expression", ")"]

    def test_number_factor(self) -> None:
        assert shape(factor_of(b"write 42.")) == ["42"]


class TestTokenRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            b".",
            b"var x; x := -(x + 1) * 3.",
            b"const n = 10; var i; begin i := 0; while i < n do i := i + 1 end.",
            b"function f(a, b) return a / b; write f(6, 2).",
        ],
    )
    def test_terminals_equal_token_stream(self, source: bytes) -> None:
        assert parse(source).tokens() == list(Lexer(source).tokenize())


class TestComposition:
    def test_parser_satisfies_host_protocol(self) -> None:
        from pl0dash.parsing import ParserHost

        assert isinstance(Parser(Lexer(b".")), ParserHost)

    def test_construction_reads_nothing(self) -> None:
        lexer = Lexer(b"x !")
        Parser(lexer)
        assert lexer.position == (1, 1)
