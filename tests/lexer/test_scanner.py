"""Tests for token recognition by the Scanner.

Covers comments, punctuation, numeric literals, decoded words and the
fallback to identifiers.
"""

import dataclasses

import pytest

from ctonlex.errors import ErrorKind, LocatedError
from ctonlex.ir import B1, F64, I8, I32, I64, Ebb, Value
from ctonlex.lexer import Scanner
from ctonlex.location import Location
from ctonlex.tokens import LocatedToken, TokenKind


def scan(source: str) -> list[LocatedToken | LocatedError]:
    return list(Scanner(source))


def kinds_and_text(source: str) -> list[tuple[TokenKind, str]]:
    return [(item.kind, item.text) for item in scan(source)]


class TestEmptyInput:
    """Test sources that contain no tokens."""

    def test_empty_source(self) -> None:
        assert Scanner("").next_token() is None

    def test_whitespace_only(self) -> None:
        assert Scanner(" ").next_token() is None
        assert Scanner("\n ").next_token() is None
        assert Scanner("\t\r\n  \n").next_token() is None

    def test_end_of_input_is_sticky(self) -> None:
        """Calling again after end-of-input keeps returning None."""
        scanner = Scanner("x")
        assert scanner.next_token() is not None
        assert scanner.next_token() is None
        assert scanner.next_token() is None


class TestComments:
    """Test comment scanning."""

    def test_comment_to_end_of_source(self) -> None:
        items = scan("; hello")
        assert len(items) == 1
        assert items[0].kind == TokenKind.COMMENT
        assert items[0].text == "; hello"
        assert items[0].location == Location(1)

    def test_comment_excludes_newline(self) -> None:
        items = scan("\n  ;hello\n;foo")
        assert [(i.text, i.line_number) for i in items] == [(";hello", 2), (";foo", 3)]

    def test_comment_swallows_punctuation(self) -> None:
        assert kinds_and_text("; v0 = (1, 2)\n") == [(TokenKind.COMMENT, "; v0 = (1, 2)")]

    def test_comment_after_invalid_char(self) -> None:
        """A stray character is reported once, then scanning resumes."""
        items = scan("#; hello")
        assert items[0] == LocatedError(ErrorKind.INVALID_CHAR, Location(1))
        assert items[1].kind == TokenKind.COMMENT
        assert items[1].text == "; hello"
        assert items[1].location == Location(1)
        assert len(items) == 2


class TestPunctuation:
    """Test single-character and arrow tokens."""

    def test_all_punctuation(self) -> None:
        items = scan("(); hello\n = :{, }.")
        assert [(i.kind, i.line_number) for i in items] == [
            (TokenKind.LPAR, 1),
            (TokenKind.RPAR, 1),
            (TokenKind.COMMENT, 1),
            (TokenKind.EQUAL, 2),
            (TokenKind.COLON, 2),
            (TokenKind.LBRACE, 2),
            (TokenKind.COMMA, 2),
            (TokenKind.RBRACE, 2),
            (TokenKind.DOT, 2),
        ]

    def test_arrow(self) -> None:
        assert kinds_and_text("(i32) -> i64") == [
            (TokenKind.LPAR, "("),
            (TokenKind.TYPE, "i32"),
            (TokenKind.RPAR, ")"),
            (TokenKind.ARROW, "->"),
            (TokenKind.TYPE, "i64"),
        ]

    def test_arrow_without_spaces(self) -> None:
        assert [k for k, _ in kinds_and_text("->->")] == [TokenKind.ARROW, TokenKind.ARROW]


class TestNumbers:
    """Test numeric literal classification."""

    def test_integers_and_floats(self) -> None:
        assert kinds_and_text(" 0 2_000 -1,0xf -0x0 0.0 0x0.4p-34") == [
            (TokenKind.INTEGER, "0"),
            (TokenKind.INTEGER, "2_000"),
            (TokenKind.INTEGER, "-1"),
            (TokenKind.COMMA, ","),
            (TokenKind.INTEGER, "0xf"),
            (TokenKind.INTEGER, "-0x0"),
            (TokenKind.FLOAT, "0.0"),
            (TokenKind.FLOAT, "0x0.4p-34"),
        ]

    def test_hex_floats(self) -> None:
        assert kinds_and_text("0x1.f -0x2.4") == [
            (TokenKind.FLOAT, "0x1.f"),
            (TokenKind.FLOAT, "-0x2.4"),
        ]

    def test_special_floats(self) -> None:
        assert kinds_and_text("-NaN -Inf") == [
            (TokenKind.FLOAT, "-NaN"),
            (TokenKind.FLOAT, "-Inf"),
        ]

    def test_nan_payloads(self) -> None:
        assert kinds_and_text("-NaN:0x8000 -sNaN:0x1") == [
            (TokenKind.FLOAT, "-NaN:0x8000"),
            (TokenKind.FLOAT, "-sNaN:0x1"),
        ]

    def test_bare_nan_is_a_word(self) -> None:
        """Without a sign, NaN and Inf start with a letter and are words."""
        assert kinds_and_text("NaN Inf") == [
            (TokenKind.IDENTIFIER, "NaN"),
            (TokenKind.IDENTIFIER, "Inf"),
        ]

    def test_malformed_number_is_passed_through(self) -> None:
        """Digit validation is left to the parser."""
        assert kinds_and_text("0x1_0000_0000_0000_0000z") == [
            (TokenKind.INTEGER, "0x1_0000_0000_0000_0000z"),
        ]

    def test_lone_minus(self) -> None:
        assert kinds_and_text("- 1") == [
            (TokenKind.INTEGER, "-"),
            (TokenKind.INTEGER, "1"),
        ]

    def test_number_stops_at_punctuation(self) -> None:
        assert kinds_and_text("1)") == [(TokenKind.INTEGER, "1"), (TokenKind.RPAR, ")")]

    def test_number_has_no_payload(self) -> None:
        (item,) = scan("42")
        assert item.value is None


class TestWords:
    """Test entity, type and identifier classification."""

    def test_identifiers(self) -> None:
        source = (
            "v0 v00 vx01 ebb1234567890 ebb5234567890 v1x vx1 vxvx4 "
            "function0 function b1 i32x4 f32x5"
        )
        items = scan(source)
        assert [(i.kind, i.value) for i in items] == [
            (TokenKind.VALUE, Value.direct_with_number(0)),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.EBB, Ebb.with_number(1234567890)),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.VALUE, Value.table_with_number(1)),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.IDENTIFIER, None),
            (TokenKind.TYPE, B1),
            (TokenKind.TYPE, I32.by(4)),
            (TokenKind.IDENTIFIER, None),
        ]
        assert [i.text for i in items] == source.split()

    def test_direct_and_table_values_differ(self) -> None:
        direct, table = scan("v1 vx1")
        assert direct.value != table.value
        assert direct.value.number == table.value.number == 1

    def test_value_out_of_range(self) -> None:
        """Numbers above the direct space limit fall back to identifiers."""
        (item,) = scan(f"v{Value.MAX_DIRECT + 1}")
        assert item.kind == TokenKind.IDENTIFIER
        (item,) = scan(f"v{Value.MAX_DIRECT}")
        assert item.kind == TokenKind.VALUE

    def test_ebb_reserved_number(self) -> None:
        (item,) = scan("ebb4294967295")
        assert item.kind == TokenKind.IDENTIFIER
        (item,) = scan("ebb4294967294")
        assert item.kind == TokenKind.EBB

    def test_indexed_references(self) -> None:
        items = scan("ss3 jt2 fn1 sig0 ss4294967295")
        assert [(i.kind, i.value) for i in items] == [
            (TokenKind.STACK_SLOT, 3),
            (TokenKind.JUMP_TABLE, 2),
            (TokenKind.FUNC_REF, 1),
            (TokenKind.SIG_REF, 0),
            (TokenKind.STACK_SLOT, 4294967295),
        ]

    def test_scalar_types(self) -> None:
        items = scan("i8 i16 i32 i64 f32 f64 b1 b8 b16 b32 b64")
        assert all(i.kind == TokenKind.TYPE for i in items)
        assert [str(i.value) for i in items] == [
            "i8", "i16", "i32", "i64", "f32", "f64", "b1", "b8", "b16", "b32", "b64",
        ]

    def test_vector_types(self) -> None:
        items = scan("i64x2 f64x2 b1x256 i8x1")
        assert [i.value for i in items] == [I64.by(2), F64.by(2), B1.by(256), I8]

    def test_unconstructible_vectors(self) -> None:
        """Bad lane counts degrade to identifiers, not errors."""
        items = scan("i32x0 i32x3 i8x512 i32x65536 i32x99999999999 i32x")
        assert all(i.kind == TokenKind.IDENTIFIER for i in items)

    def test_unknown_lane_type(self) -> None:
        assert kinds_and_text("i7x4 x4 vx") == [
            (TokenKind.IDENTIFIER, "i7x4"),
            (TokenKind.IDENTIFIER, "x4"),
            (TokenKind.IDENTIFIER, "vx"),
        ]

    def test_scalar_name_must_match_whole_word(self) -> None:
        assert kinds_and_text("i32_ i032 bi32") == [
            (TokenKind.IDENTIFIER, "i32_"),
            (TokenKind.IDENTIFIER, "i032"),
            (TokenKind.IDENTIFIER, "bi32"),
        ]

    def test_word_with_underscores(self) -> None:
        assert kinds_and_text("iadd_imm br_table") == [
            (TokenKind.IDENTIFIER, "iadd_imm"),
            (TokenKind.IDENTIFIER, "br_table"),
        ]

    def test_leading_underscore_is_invalid(self) -> None:
        """Words must start with a letter; `_` alone starts nothing."""
        items = scan("_x")
        assert isinstance(items[0], LocatedError)
        assert items[1].kind == TokenKind.IDENTIFIER
        assert items[1].text == "x"

    def test_opcode_with_type_suffix(self) -> None:
        assert kinds_and_text("iconst.i32") == [
            (TokenKind.IDENTIFIER, "iconst"),
            (TokenKind.DOT, "."),
            (TokenKind.TYPE, "i32"),
        ]


class TestInvalidCharacters:
    """Test recovery from characters that start no token."""

    def test_each_invalid_char_is_one_error(self) -> None:
        items = scan("#@ v0")
        assert isinstance(items[0], LocatedError)
        assert isinstance(items[1], LocatedError)
        assert items[0].char == "#"
        assert items[1].char == "@"
        assert items[2].kind == TokenKind.VALUE

    def test_error_location(self) -> None:
        items = scan("v0\n\n  $")
        assert items[1] == LocatedError(ErrorKind.INVALID_CHAR, Location(3))
        assert items[1].offset == 6

    def test_non_ascii_symbol(self) -> None:
        items = scan("→ v1")
        assert isinstance(items[0], LocatedError)
        assert items[0].char == "→"
        assert items[1].kind == TokenKind.VALUE

    @pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_control_separators_are_invalid(self, sep: str) -> None:
        """Information separators are not whitespace, even though str.isspace() says so."""
        items = scan(f"v0{sep}v1")
        assert items[0].kind == TokenKind.VALUE
        assert items[1] == LocatedError(ErrorKind.INVALID_CHAR, Location(1))
        assert items[1].char == sep
        assert items[1].offset == 2
        assert items[2].kind == TokenKind.VALUE
        assert len(items) == 3

    def test_unicode_spaces_are_skipped(self) -> None:
        assert kinds_and_text("v0\u00a0v1\u2003\x0b\x0cv2") == [
            (TokenKind.VALUE, "v0"),
            (TokenKind.VALUE, "v1"),
            (TokenKind.VALUE, "v2"),
        ]

    def test_non_ascii_letters_form_identifiers(self) -> None:
        assert kinds_and_text("café") == [(TokenKind.IDENTIFIER, "café")]


class TestRestOfLine:
    """Test raw line capture between token requests."""

    def test_rest_of_line(self) -> None:
        scanner = Scanner("function %add(i32) native\nebb0:")
        assert scanner.next_token().text == "function"
        assert scanner.rest_of_line() == " %add(i32) native"
        item = scanner.next_token()
        assert item.kind == TokenKind.EBB
        assert item.line_number == 2

    def test_rest_of_line_at_end(self) -> None:
        scanner = Scanner("isa riscv")
        scanner.next_token()
        assert scanner.rest_of_line() == " riscv"
        assert scanner.rest_of_line() == ""
        assert scanner.next_token() is None

    def test_rest_of_line_on_newline(self) -> None:
        """At a newline the rest of the line is empty and nothing moves."""
        scanner = Scanner("a\nb")
        scanner.next_token()
        assert scanner.rest_of_line() == ""
        item = scanner.next_token()
        assert item.text == "b"
        assert item.line_number == 2


class TestTokens:
    """Test token objects produced by the scanner."""

    def test_text_is_sliced_from_source(self) -> None:
        source = "  v12  "
        (item,) = scan(source)
        assert item.token.start == 2
        assert item.token.end == 5
        assert item.token.source is source

    def test_repr(self) -> None:
        value, ident = scan("v3 iadd")
        assert repr(value.token) == "Token(VALUE, v3)"
        assert repr(ident.token) == "Token(IDENTIFIER, 'iadd')"

    def test_tokens_are_immutable(self) -> None:
        (item,) = scan("v0")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.token.kind = TokenKind.EBB  # type: ignore[misc]
