"""Trim units matching a predicate from the start and/or end of a text.

A forward cursor walks from the start while the predicate holds, a reverse
cursor walks from the end. The copy variants materialize what lies between
the two (a Range or a ``stringzilla.Str`` is simply narrowed). The in-place
variants move the remaining units to the front of the buffer and shrink it;
for a NullTerminated buffer the terminating zero is written at the new end.
"""

from functools import singledispatch
from typing import Any, Callable, Optional

import stringzilla

from stringx.chars import IsAnyOf, IsSpace
from stringx.cursors import NullTerminated
from stringx.ranges import Range
from stringx.sequences import (
    make_cursor,
    make_reverse_cursor,
    new_builder,
    range_source,
    require_mutable,
    string_length,
)
from stringx.stringzilla_utils import is_ascii_charset, strip_sz

Predicate = Callable[[Any], bool]


def _trim_bounds(text: Any, is_something: Predicate, trim_start: bool, trim_end: bool) -> tuple[int, int]:
    """Positions in the underlying source of the part that survives trimming."""
    start = make_cursor(text)
    if trim_start:
        while not start.at_end() and is_something(start.value()):
            start.advance()
    if start.at_end():
        return start.position, start.position
    end = make_reverse_cursor(text)
    if trim_end:
        while not end.at_end() and is_something(end.value()):
            end.advance()
    return start.position, end.base()


# ---------------------------------------------------------------------------
# copy
# ---------------------------------------------------------------------------

@singledispatch
def _copy_between(text: Any, begin: int, end: int) -> Any:
    return text[begin:end]


@_copy_between.register(Range)
def _(text: Range, begin: int, end: int) -> Range:
    return Range(range_source(text), begin, end)


@_copy_between.register(NullTerminated)
def _(text: NullTerminated, begin: int, end: int) -> NullTerminated:
    builder = new_builder(text)
    builder.extend(text.buffer[begin:end])
    return builder.build()


def _sz_charset(text: Any, is_something: Predicate) -> Optional[str]:
    """The character set to strip with StringZilla, if this trim qualifies."""
    if not isinstance(text, stringzilla.Str) or not isinstance(is_something, IsAnyOf):
        return None
    chars = is_something.chars
    if isinstance(chars, str) and is_ascii_charset(chars):
        return chars
    return None


def _trim_copy(text: Any, is_something: Predicate, trim_start: bool, trim_end: bool) -> Any:
    chars = _sz_charset(text, is_something)
    if chars is not None:
        return strip_sz(text, chars, trim_start, trim_end)
    begin, end = _trim_bounds(text, is_something, trim_start, trim_end)
    return _copy_between(text, begin, end)


# ---------------------------------------------------------------------------
# in place
# ---------------------------------------------------------------------------

@singledispatch
def _trim_in_place(text: Any, is_something: Predicate, trim_start: bool, trim_end: bool) -> Any:
    require_mutable(text, "trim_in_place")
    begin, end = _trim_bounds(text, is_something, trim_start, trim_end)
    # del on a slice moves the tail with memmove semantics
    del text[end:]
    del text[:begin]
    return text


@_trim_in_place.register(Range)
def _(text: Range, is_something: Predicate, trim_start: bool, trim_end: bool) -> Range:
    # A view cannot shrink its source; the narrowed view is the result
    return _trim_copy(text, is_something, trim_start, trim_end)


@_trim_in_place.register(NullTerminated)
def _(text: NullTerminated, is_something: Predicate, trim_start: bool, trim_end: bool) -> NullTerminated:
    require_mutable(text, "trim_in_place")
    buffer = text.buffer
    old_end = text.offset + string_length(text)
    begin, end = _trim_bounds(text, is_something, trim_start, trim_end)
    size = end - begin
    if begin != text.offset:
        # Same-length slice assignment copies the right-hand side first, so overlap is safe
        buffer[text.offset:text.offset + size] = buffer[begin:end]
    new_end = text.offset + size
    if new_end != old_end:
        buffer[new_end] = buffer[old_end]
    return text


# ---------------------------------------------------------------------------
# public API
# ---------------------------------------------------------------------------

def trim_copy(text: Any, predicate: Optional[Predicate] = None) -> Any:
    """Return ``text`` without leading and trailing units matching ``predicate``.

    The default predicate is IsSpace().

    Examples:
        >>> trim_copy("  Hello World  ")
        'Hello World'
        >>> trim_copy("--Hello--", IsAnyOf("-"))
        'Hello'
    """
    return _trim_copy(text, predicate or IsSpace(), True, True)


def trim_start_copy(text: Any, predicate: Optional[Predicate] = None) -> Any:
    return _trim_copy(text, predicate or IsSpace(), True, False)


def trim_end_copy(text: Any, predicate: Optional[Predicate] = None) -> Any:
    return _trim_copy(text, predicate or IsSpace(), False, True)


def trim_in_place(text: Any, predicate: Optional[Predicate] = None) -> Any:
    """Trim a mutable ``text`` in place and return it.

    A Range is not modified; the narrowed Range is returned instead. Immutable
    texts raise TypeError.
    """
    return _trim_in_place(text, predicate or IsSpace(), True, True)


def trim_start_in_place(text: Any, predicate: Optional[Predicate] = None) -> Any:
    return _trim_in_place(text, predicate or IsSpace(), True, False)


def trim_end_in_place(text: Any, predicate: Optional[Predicate] = None) -> Any:
    return _trim_in_place(text, predicate or IsSpace(), False, True)
