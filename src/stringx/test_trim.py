import array

import pytest
import stringzilla

from stringx.chars import IsAnyOf
from stringx.cursors import NullTerminated
from stringx.ranges import Range
from stringx.sequences import iter_units, make_cursor
from stringx.trim import (
    trim_copy,
    trim_end_copy,
    trim_end_in_place,
    trim_in_place,
    trim_start_copy,
    trim_start_in_place,
)


def units(text):
    return list(iter_units(make_cursor(text)))


class TestTrimCopy:
    def test_boundaries(self):
        assert trim_start_copy("   ") == ""
        assert trim_end_copy("") == ""
        assert trim_copy("") == ""
        assert trim_copy("   ") == ""

    def test_default_predicate(self):
        assert trim_copy("  Hello World  ") == "Hello World"
        assert trim_start_copy(" a ") == "a "
        assert trim_end_copy(" a ") == " a"
        assert trim_copy(b"\t Hello \n") == b"Hello"

    def test_custom_predicate(self):
        assert trim_copy("--Hello--", IsAnyOf("-")) == "Hello"
        assert trim_copy("123abc456", str.isdigit) == "abc"

    @pytest.mark.parametrize("text", ["", "  ", " a b ", "ab", "\n\tx"])
    def test_idempotent(self, text):
        once = trim_copy(text)
        assert trim_copy(once) == once

    @pytest.mark.parametrize(
        "text, predicate",
        [
            (b"--a-b--", IsAnyOf("-")),
            (bytearray(b"-+-"), IsAnyOf(b"-+")),
            (list("12ab34"), str.isdigit),
            (array.array("H", map(ord, "xxyx")), IsAnyOf("x")),
            (NullTerminated(b"--ab-\0"), IsAnyOf("-")),
            (Range("__a__", 1, 4), IsAnyOf("_")),
            (stringzilla.Str("--ab--"), IsAnyOf("-")),
            (stringzilla.Str("  ab  "), None),
        ],
    )
    def test_idempotent_for_any_predicate_and_shape(self, text, predicate):
        once = trim_copy(text, predicate)
        twice = trim_copy(once, predicate)
        assert units(twice) == units(once)
        assert units(trim_start_copy(once, predicate)) == units(once)
        assert units(trim_end_copy(once, predicate)) == units(once)

    def test_range_is_narrowed(self):
        source = "  ab  "
        view = trim_copy(Range(source))
        assert isinstance(view, Range)
        assert view.source is source
        assert view.positions() == (2, 4)
        assert "".join(view) == "ab"

    def test_null_terminated(self):
        result = trim_copy(NullTerminated(b"  ab \0rest\0"))
        assert bytes(result) == b"ab"
        assert result.buffer == b"ab\0"

    def test_stringzilla(self):
        assert str(trim_copy(stringzilla.Str("--ab--"), IsAnyOf("-"))) == "ab"
        assert str(trim_copy(stringzilla.Str("----"), IsAnyOf("-"))) == ""
        assert str(trim_end_copy(stringzilla.Str("--ab--"), IsAnyOf("-"))) == "--ab"
        assert str(trim_copy(stringzilla.Str("  ab  "))) == "ab"


class TestTrimInPlace:
    def test_owned_buffers(self):
        text = bytearray(b"  ab  ")
        assert trim_in_place(text) is text
        assert text == bytearray(b"ab")

        text = list(" ab ")
        trim_start_in_place(text)
        assert text == ["a", "b", " "]

        text = array.array("H", map(ord, " ab "))
        trim_end_in_place(text)
        assert text == array.array("H", map(ord, " ab"))

    def test_fully_trimmed(self):
        text = bytearray(b" \t ")
        trim_in_place(text)
        assert text == bytearray()

    def test_null_terminated_moves_units_and_sentinel(self):
        buffer = bytearray(b"  ab  \0xyz\0")
        text = NullTerminated(buffer)
        assert trim_in_place(text) is text
        assert bytes(text) == b"ab"
        assert buffer[:3] == bytearray(b"ab\0")
        assert buffer[7:] == bytearray(b"xyz\0")

    def test_null_terminated_end_only(self):
        buffer = bytearray(b"ab  \0")
        trim_end_in_place(NullTerminated(buffer))
        assert buffer == bytearray(b"ab\0 \0")

    def test_null_terminated_with_offset(self):
        buffer = bytearray(b"xx  ab\0")
        trim_start_in_place(NullTerminated(buffer, 2))
        assert bytes(NullTerminated(buffer, 2)) == b"ab"
        assert buffer[:2] == bytearray(b"xx")

    def test_range_returns_narrowed_view(self):
        view = trim_in_place(Range("  ab  "))
        assert "".join(view) == "ab"

    def test_immutable_input(self):
        with pytest.raises(TypeError):
            trim_in_place("  ab")
        with pytest.raises(TypeError):
            trim_in_place(NullTerminated(b"  ab\0"))
