from collections import deque

import pytest

from stringx.copying import copy, join
from stringx.cursors import NullTerminated
from stringx.ranges import Range
from stringx.split import (
    SplitMode,
    isplit_token,
    make_isplit_token_iterator,
    make_split_chars_iterator,
    make_split_iterator,
    make_split_token_iterator,
    split,
    split_chars,
    split_token,
)


def sections(split_it):
    return [copy(str, section) for section in split_it]


class TestSplitTokenIterator:
    @pytest.mark.parametrize(
        "text, separator, mode, expected",
        [
            ("Hello World", "l", SplitMode.ALL, ["He", "", "o Wor", "d"]),
            ("Hello World", "l", SplitMode.SKIP_EMPTY, ["He", "o Wor", "d"]),
            ("Hello World", "Hello", SplitMode.ALL, ["", " World"]),
            ("Hello World", "ld", SplitMode.ALL, ["Hello Wor", ""]),
            ("Hello World", "ld", SplitMode.SKIP_EMPTY, ["Hello Wor"]),
            ("Hello World", "xyz", SplitMode.ALL, ["Hello World"]),
            ("xHelloxWorldx", "x", SplitMode.ALL, ["", "Hello", "World", ""]),
            ("xHelloxWorldx", "x", SplitMode.SKIP_EMPTY, ["Hello", "World"]),
            ("ab,", ",", SplitMode.ALL, ["ab", ""]),
            ("", "x", SplitMode.ALL, [""]),
            ("", "x", SplitMode.SKIP_EMPTY, []),
            ("xx", "x", SplitMode.SKIP_EMPTY, []),
        ],
    )
    def test_sections(self, text, separator, mode, expected):
        assert sections(make_split_token_iterator(text, separator, mode)) == expected

    def test_empty_separator(self):
        with pytest.raises(ValueError):
            make_split_token_iterator("Hello World", "")
        with pytest.raises(ValueError):
            make_split_token_iterator("", NullTerminated(b"\0"))

    def test_current_and_at_end(self):
        split_it = make_split_token_iterator("a,b", ",")
        assert not split_it.at_end()
        assert copy(str, split_it.current()) == "a"
        assert split_it.advance()
        assert copy(str, split_it.current()) == "b"
        assert not split_it.advance()
        assert split_it.at_end()
        assert len(split_it.current()) == 0
        # Terminal is sticky
        assert not split_it.advance()
        assert split_it.at_end()

    @pytest.mark.parametrize(
        "count, expected_result, expected_section",
        [(0, True, "He"), (1, True, ""), (2, True, "o Wor"), (3, True, "d"), (4, False, "")],
    )
    def test_advance_count(self, count, expected_result, expected_section):
        split_it = make_split_token_iterator("Hello World", "l")
        assert split_it.advance(count) == expected_result
        assert copy(str, split_it.current()) == expected_section

    def test_advance_to_last(self):
        split_it = make_split_token_iterator("Hello World", "l")
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "d"
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "d"

        split_it = make_split_token_iterator("ab,", ",")
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == ""

    def test_advance_to_last_skip_empty_steps_back(self):
        split_it = make_split_token_iterator("Hello World", "ld", SplitMode.SKIP_EMPTY)
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "Hello Wor"
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "Hello Wor"
        assert not split_it.at_end()

        split_it = make_split_token_iterator("xHelloxWorldx", "x", SplitMode.SKIP_EMPTY)
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "World"

    def test_advance_to_last_without_sections(self):
        assert not make_split_token_iterator("", "x", SplitMode.SKIP_EMPTY).advance_to_last()
        assert not make_split_token_iterator("xxx", "x", SplitMode.SKIP_EMPTY).advance_to_last()

    def test_sections_are_views(self):
        text = "a,bc"
        views = list(make_split_token_iterator(text, ","))
        assert [view.source for view in views] == [text, text]
        assert [view.positions() for view in views] == [(0, 1), (2, 4)]

    def test_ignoring_case(self):
        assert sections(make_isplit_token_iterator("aXbxc", "x")) == ["a", "b", "c"]
        assert sections(make_split_token_iterator("aXbxc", "x")) == ["aXb", "c"]

    def test_null_terminated_and_bytes(self):
        text = NullTerminated(b"a::b::\0c::d\0")
        assert sections(make_split_token_iterator(text, "::")) == ["a", "b", ""]
        assert sections(make_split_token_iterator(b"a::b", NullTerminated("::\0"))) == ["a", "b"]


class TestSplitIterator:
    @pytest.mark.parametrize(
        "text, chars, mode, expected",
        [
            ("a,b;c", ",;", SplitMode.ALL, ["a", "b", "c"]),
            ("a,b,", ",", SplitMode.ALL, ["a", "b", ""]),
            (",a,,b", ",", SplitMode.ALL, ["", "a", "", "b"]),
            (",a,,b", ",", SplitMode.SKIP_EMPTY, ["a", "b"]),
            ("abc", ",", SplitMode.ALL, ["abc"]),
            ("", ",", SplitMode.ALL, [""]),
            ("", ",", SplitMode.SKIP_EMPTY, []),
            (",,", ",", SplitMode.SKIP_EMPTY, []),
        ],
    )
    def test_sections(self, text, chars, mode, expected):
        assert sections(make_split_chars_iterator(text, chars, mode)) == expected

    def test_predicate(self):
        assert sections(make_split_iterator("a1b22c", str.isdigit, SplitMode.SKIP_EMPTY)) == ["a", "b", "c"]

    def test_advance_to_last(self):
        split_it = make_split_chars_iterator("Hello World", "d", SplitMode.SKIP_EMPTY)
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "Hello Worl"

        split_it = make_split_chars_iterator("a b c", " ")
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "c"
        assert split_it.advance_to_last()
        assert copy(str, split_it.current()) == "c"

        assert not make_split_chars_iterator(" ", " ", SplitMode.SKIP_EMPTY).advance_to_last()

    def test_advance_count(self):
        split_it = make_split_chars_iterator("a b c", " ")
        assert split_it.advance(2)
        assert copy(str, split_it.current()) == "c"
        assert not split_it.advance(5)
        assert split_it.at_end()


class TestSplitFunctions:
    def test_split_token(self):
        assert split_token([], "Hello World", "l", SplitMode.SKIP_EMPTY) == ["He", "o Wor", "d"]
        assert isplit_token([], "aXbxc", "x") == ["a", "b", "c"]

    def test_container_is_cleared_unless_asked(self):
        container = ["x"]
        assert split_token(container, "a,b", ",") is container
        assert container == ["a", "b"]

        container = ["x"]
        split_token(container, "a,b", ",", clear_container=False)
        assert container == ["x", "a", "b"]

    def test_any_container_with_append_and_clear(self):
        assert split_chars(deque(), "a b", " ") == deque(["a", "b"])

    def test_section_types(self):
        assert split_token([], b"a,b", ",") == [b"a", b"b"]
        assert split_token([], "a,b", ",", as_type=bytes) == [b"a", b"b"]
        assert split_token([], NullTerminated(b"a,b\0junk\0"), ",") == [b"a", b"b"]
        assert split_token([], Range("xxa,b", 2), ",") == ["a", "b"]
        views = split_token([], "a,b", ",", as_type=Range)
        assert all(isinstance(view, Range) for view in views)
        assert [view.positions() for view in views] == [(0, 1), (2, 3)]

    def test_split_with_predicate(self):
        assert split([], "a1b2c", str.isdigit) == ["a", "b", "c"]
        assert split([], b"a b", lambda unit: unit == ord(" ")) == [b"a", b"b"]

    def test_empty_separator(self):
        with pytest.raises(ValueError):
            split_token([], "abc", "")

    @pytest.mark.parametrize(
        "text, separator",
        [("a,b,c", ","), ("", ","), (",", ","), ("a::b::", "::"), ("no separator", "|")],
    )
    def test_join_round_trip(self, text, separator):
        assert join(str, split_token([], text, separator), separator) == text

    @pytest.mark.parametrize(
        "text, separator",
        [("Hello World", "l"), ("aaaa", "aa"), ("aaa", "aa"), ("", "x"), ("x", "x")],
    )
    def test_section_count(self, text, separator):
        assert len(split_token([], text, separator)) == text.count(separator) + 1
        assert "" not in split_token([], text, separator, SplitMode.SKIP_EMPTY)
