"""Error-path and malformed input tests.

Every error is fatal: the first problem raises and no partial tree is
returned. These tests pin the error type, message and location.
"""

import pytest

from pl0dash import ParseConfig, parse
from pl0dash.errors import (
    CommentNotTerminatedError,
    LexError,
    NestingTooDeepError,
    ParseError,
    Pl0DashError,
    RenderError,
    UndefinedTokenError,
    UnexpectedEndError,
)

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestErrorFormatting:
    """Verify errors produce well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad syntax", lineno=42)
        assert str(err) == "42 bad syntax"

    def test_with_line_and_column(self) -> None:
        err = LexError("bad byte", lineno=10, col_offset=5)
        assert str(err) == "10:5 bad byte"

    def test_with_source_file(self) -> None:
        err = ParseError("error", lineno=1, col_offset=1, source_file="test.pl0")
        assert str(err) == "test.pl0:1:1 error"

    def test_hierarchy(self) -> None:
        assert issubclass(UndefinedTokenError, LexError)
        assert issubclass(CommentNotTerminatedError, LexError)
        assert issubclass(UnexpectedEndError, ParseError)
        assert issubclass(NestingTooDeepError, ParseError)
        for cls in (LexError, ParseError, RenderError):
            assert issubclass(cls, Pl0DashError)


# =========================================================================
# Parse errors
# =========================================================================


class TestUnexpectedToken:
    def test_missing_assign(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b"x 1.")
        err = exc_info.value
        assert err.message == "expected ':=', found number 1"
        assert (err.lineno, err.col_offset) == (1, 3)
        assert err.expected == "':='"
        assert err.found == "number 1"

    def test_bad_factor(self) -> None:
        with pytest.raises(ParseError, match=r"expected identifier, number or '\(', found symbol '\.'"):
            parse(b"x := .")

    def test_missing_relational_operator(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b"if x then writeln.")
        assert exc_info.value.expected == "relational operator"
        assert exc_info.value.found == "keyword 'then'"

    def test_missing_then(self) -> None:
        with pytest.raises(ParseError, match="expected 'then'"):
            parse(b"if x = 1 writeln.")

    def test_const_requires_number(self) -> None:
        with pytest.raises(ParseError, match="expected number, found identifier 'y'"):
            parse(b"const x = y; .")

    def test_var_requires_identifier(self) -> None:
        with pytest.raises(ParseError, match="expected identifier, found keyword 'begin'"):
            parse(b"var begin; .")

    def test_function_missing_parens(self) -> None:
        with pytest.raises(ParseError, match=r"expected '\('"):
            parse(b"function f writeln; .")

    def test_trailing_comma_in_params(self) -> None:
        with pytest.raises(ParseError, match="expected identifier"):
            parse(b"function f(a,) writeln; .")

    def test_tokens_after_period(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b"write 1. write 2.")
        err = exc_info.value
        assert err.expected == "end of input"
        assert (err.lineno, err.col_offset) == (1, 10)

    def test_location_on_later_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse(b"var a;\nbegin\n  a := ;\nend.", source_file="bad.pl0")
        err = exc_info.value
        assert (err.lineno, err.col_offset) == (3, 8)
        assert str(err).startswith("bad.pl0:3:8 ")


class TestUnexpectedEnd:
    def test_empty_source(self) -> None:
        with pytest.raises(UnexpectedEndError) as exc_info:
            parse(b"")
        err = exc_info.value
        assert err.message == "expected '.', found end of input"
        assert (err.lineno, err.col_offset) == (1, 1)

    def test_missing_end(self) -> None:
        with pytest.raises(UnexpectedEndError) as exc_info:
            parse(b"begin x := 1")
        err = exc_info.value
        assert err.expected == "'end'"
        assert (err.lineno, err.col_offset) == (1, 13)

    def test_missing_period(self) -> None:
        with pytest.raises(UnexpectedEndError, match="expected '.'"):
            parse(b"writeln")

    def test_truncated_expression(self) -> None:
        with pytest.raises(UnexpectedEndError):
            parse(b"write 1 +")

    def test_unexpected_end_is_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse(b"var")


class TestLexErrorsPropagate:
    def test_undefined_token_in_program(self) -> None:
        with pytest.raises(UndefinedTokenError) as exc_info:
            parse(b"x := 1 ! 2.")
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (1, 8)

    def test_unterminated_comment_in_program(self) -> None:
        with pytest.raises(CommentNotTerminatedError):
            parse(b"writeln /* no end.")


# =========================================================================
# Nesting depth guard
# =========================================================================


class TestNestingDepth:
    def test_exact_limit_succeeds(self) -> None:
        # program, block, statement, then expression/term/factor three times
        parse(b"write ((1)).", config=ParseConfig(max_depth=12))

    def test_one_below_limit_fails(self) -> None:
        with pytest.raises(NestingTooDeepError, match="maximum depth of 11"):
            parse(b"write ((1)).", config=ParseConfig(max_depth=11))

    def test_default_limit_on_deep_parens(self) -> None:
        source = b"write " + b"(" * 300 + b"1" + b")" * 300 + b"."
        with pytest.raises(NestingTooDeepError) as exc_info:
            parse(source)
        assert exc_info.value.lineno == 1

    def test_deep_begin_blocks(self) -> None:
        source = b"begin " * 200 + b"end " * 200 + b"."
        with pytest.raises(NestingTooDeepError):
            parse(source, config=ParseConfig(max_depth=100))

    def test_moderate_nesting_within_default(self) -> None:
        source = b"write " + b"(" * 50 + b"1" + b")" * 50 + b"."
        tree = parse(source)
        assert tree.depth() > 150

    def test_limit_above_interpreter_stack(self) -> None:
        source = b"write " + b"(" * 2000 + b"1" + b")" * 2000 + b"."
        with pytest.raises(NestingTooDeepError, match="recursion limit") as exc_info:
            parse(source, config=ParseConfig(max_depth=100_000))
        assert exc_info.value.lineno == 1

    def test_parser_usable_after_recursion_limit(self) -> None:
        deep = b"write " + b"(" * 2000 + b"1" + b")" * 2000 + b"."
        with pytest.raises(NestingTooDeepError):
            parse(deep, config=ParseConfig(max_depth=100_000))
        assert parse(b"write (1).").tokens()[-1].literal == "."
