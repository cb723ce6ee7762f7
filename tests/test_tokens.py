"""Tests for token values and helpers."""

import pytest

from pl0dash.tokens import (
    RELATIONAL_OPERATORS,
    Keyword,
    Symbol,
    Token,
    TokenType,
    describe_token,
)


class TestTokenType:
    def test_tags(self) -> None:
        assert [t.tag for t in TokenType] == ["keyword", "symbol", "identifier", "number"]


class TestLookup:
    def test_keyword_lookup(self) -> None:
        assert Keyword.lookup("while") is Keyword.WHILE
        assert Keyword.lookup("While") is None
        assert Keyword.lookup("x") is None

    def test_symbol_lookup(self) -> None:
        assert Symbol.lookup(":=") is Symbol.ASSIGN
        assert Symbol.lookup("<>") is Symbol.NOT_EQUAL
        assert Symbol.lookup(":") is None

    def test_thirteen_keywords(self) -> None:
        assert len(Keyword) == 13

    def test_relational_operators(self) -> None:
        assert {s.value for s in RELATIONAL_OPERATORS} == {"=", "<>", "<", "<=", ">", ">="}


class TestToken:
    def test_constructors(self) -> None:
        assert Token.keyword(Keyword.END).type is TokenType.KEYWORD
        assert Token.symbol(Symbol.PERIOD).type is TokenType.SYMBOL
        assert Token.identifier("x").type is TokenType.IDENTIFIER
        assert Token.number(3).type is TokenType.NUMBER

    @pytest.mark.parametrize(
        ("token", "literal"),
        [
            (Token.keyword(Keyword.WRITELN), "writeln"),
            (Token.symbol(Symbol.LESS_EQUAL), "<="),
            (Token.identifier("Total"), "Total"),
            (Token.number(120), "120"),
        ],
    )
    def test_literal(self, token: Token, literal: str) -> None:
        assert token.literal == literal

    def test_is_keyword(self) -> None:
        token = Token.keyword(Keyword.IF)
        assert token.is_keyword(Keyword.IF)
        assert not token.is_keyword(Keyword.THEN)
        assert not Token.identifier("if").is_keyword(Keyword.IF)

    def test_is_symbol(self) -> None:
        token = Token.symbol(Symbol.PLUS)
        assert token.is_symbol(Symbol.MINUS, Symbol.PLUS)
        assert not token.is_symbol(Symbol.MULT)

    def test_same_kind_ignores_position(self) -> None:
        a = Token.identifier("x", _lineno=1, _col=1)
        b = Token.identifier("x", _lineno=9, _col=4)
        assert a != b
        assert a.same_kind(b)
        assert not a.same_kind(Token.identifier("y"))

    def test_frozen(self) -> None:
        token = Token.number(1)
        with pytest.raises(AttributeError):
            token.value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Token.symbol(Symbol.ASSIGN, _lineno=2, _col=5)) == "Token(SYMBOL, ':=', 2:5)"

    def test_describe(self) -> None:
        assert Token.number(12).describe() == "number 12"
        assert Token.keyword(Keyword.DO).describe() == "keyword 'do'"
        assert Token.symbol(Symbol.SEMICOLON).describe() == "symbol ';'"
        assert describe_token(None) == "end of input"
