"""Tests for application/compiler.py."""

import logging

import pytest

from moenster.application.compiler import compile_directives
from moenster.domain.directives import AnyRun, AnySingle, ByteClass, Literal
from moenster.domain.exceptions import MalformedPatternError
from tests.factories import lit, make_class, span


class TestCompileFailFirst:
    """FAIL-FIRST validation tests."""

    def test_str_pattern_raises(self) -> None:
        with pytest.raises(TypeError, match="pattern must be bytes"):
            compile_directives("abc")  # type: ignore[arg-type]

    def test_unterminated_bracket_raises(self) -> None:
        with pytest.raises(MalformedPatternError, match="unterminated bracket") as exc_info:
            compile_directives(b"x[abc")
        assert exc_info.value.position == 1
        assert exc_info.value.pattern == b"x[abc"

    def test_lone_open_bracket_raises(self) -> None:
        with pytest.raises(MalformedPatternError):
            compile_directives(b"[")

    def test_negated_unterminated_raises(self) -> None:
        with pytest.raises(MalformedPatternError):
            compile_directives(b"[^")

    def test_escaped_terminator_only_raises(self) -> None:
        """[\\] has no real terminator."""
        with pytest.raises(MalformedPatternError):
            compile_directives(b"[\\]")


class TestCompileBasic:
    """Literal and wildcard tokens."""

    def test_empty_pattern(self) -> None:
        assert compile_directives(b"") == ()

    def test_literals(self) -> None:
        assert compile_directives(b"ab") == (lit("a"), lit("b"))

    def test_wildcards(self) -> None:
        assert compile_directives(b"a?*") == (lit("a"), AnySingle(), AnyRun())

    def test_consecutive_stars_collapse(self) -> None:
        assert compile_directives(b"a***b") == (lit("a"), AnyRun(), lit("b"))

    def test_separated_stars_kept(self) -> None:
        assert compile_directives(b"*?*") == (AnyRun(), AnySingle(), AnyRun())

    def test_multibyte_literal_is_one_directive_per_byte(self) -> None:
        directives = compile_directives("ø".encode())
        assert directives == (Literal(0xC3), Literal(0xB8))

    def test_high_and_nul_bytes(self) -> None:
        assert compile_directives(b"\x00\xff") == (Literal(0), Literal(255))

    def test_lone_close_bracket_is_literal(self) -> None:
        assert compile_directives(b"]") == (lit("]"),)


class TestCompileEscape:
    """Backslash outside brackets."""

    def test_escaped_wildcards_are_literal(self) -> None:
        assert compile_directives(b"\\*\\?\\[") == (lit("*"), lit("?"), lit("["))

    def test_escaped_ordinary_byte(self) -> None:
        assert compile_directives(b"a\\r") == (lit("a"), lit("r"))

    def test_escaped_backslash(self) -> None:
        assert compile_directives(b"\\\\") == (lit("\\"),)

    def test_dangling_backslash_is_literal(self) -> None:
        assert compile_directives(b"ab\\") == (lit("a"), lit("b"), lit("\\"))


class TestCompileBrackets:
    """Bracket expression micro-grammar."""

    def test_set(self) -> None:
        assert compile_directives(b"[abc]") == (make_class(span("a"), span("b"), span("c")),)

    def test_range(self) -> None:
        assert compile_directives(b"[a-z]") == (make_class(span("a", "z")),)

    def test_negated(self) -> None:
        assert compile_directives(b"[^a-z]") == (make_class(span("a", "z"), negated=True),)

    def test_reversed_range_kept_as_empty(self) -> None:
        (cls,) = compile_directives(b"[c-a]")
        assert isinstance(cls, ByteClass)
        assert cls.members == (span("c", "a"),)
        assert cls.members[0].is_empty

    def test_empty_class(self) -> None:
        assert compile_directives(b"[]") == (make_class(),)

    def test_empty_negated_class(self) -> None:
        assert compile_directives(b"[^]") == (make_class(negated=True),)

    def test_close_after_empty_class_is_literal(self) -> None:
        assert compile_directives(b"[]]") == (make_class(), lit("]"))

    def test_escaped_close_bracket(self) -> None:
        assert compile_directives(b"[\\]]") == (make_class(span("]")),)

    def test_escaped_close_bracket_as_range_end(self) -> None:
        assert compile_directives(b"[A-\\]]") == (make_class(span("A", "]")),)

    def test_backslash_before_other_byte_is_member(self) -> None:
        assert compile_directives(b"[\\a]") == (make_class(span("\\"), span("a")),)

    def test_leading_dash_literal(self) -> None:
        assert compile_directives(b"[-a]") == (make_class(span("-"), span("a")),)

    def test_trailing_dash_literal(self) -> None:
        assert compile_directives(b"[a-]") == (make_class(span("a"), span("-")),)

    def test_caret_not_first_is_literal(self) -> None:
        assert compile_directives(b"[a^]") == (make_class(span("a"), span("^")),)

    def test_wildcards_inside_brackets_are_literal(self) -> None:
        assert compile_directives(b"[*?[]") == (make_class(span("*"), span("?"), span("[")),)

    def test_mixed_members_order_preserved(self) -> None:
        assert compile_directives(b"[x0-9a]") == (make_class(span("x"), span("0", "9"), span("a")),)

    def test_class_between_literals(self) -> None:
        assert compile_directives(b"a[bc]d") == (
            lit("a"),
            make_class(span("b"), span("c")),
            lit("d"),
        )


class TestCompileLogging:
    """Debug logging of compiled patterns."""

    def test_logs_directive_count(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="moenster.application.compiler"):
            compile_directives(b"a*b")
        assert "3 directive(s)" in caplog.text
