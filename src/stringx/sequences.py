"""Adapts every supported sequence shape to the terminated cursor contract.

The algorithms never look at the concrete type of the text they get. They ask
this module for a forward or reverse cursor, for the string length, and for a
builder that materializes results in a caller-chosen or input-matching type.
Dispatch is on the type of the argument (functools.singledispatch), so new
shapes are supported by registering an overload.

Code units are either 1-character strings (``str``, ``stringzilla.Str``) or
integers (``bytes``, ``bytearray``, ``array.array``). Copying between types
narrows or widens each unit by value.
"""

import array
from collections.abc import MutableSequence
from functools import singledispatch
from typing import Any, Callable, Iterable, Iterator

import stringzilla

from stringx.cursors import (
    BoundCursor,
    NullTerminated,
    NullTerminatedCursor,
    ReverseCursor,
)
from stringx.ranges import Range
from stringx.stringzilla_utils import find_sentinel_sz


# ---------------------------------------------------------------------------
# code units
# ---------------------------------------------------------------------------

def to_char(unit: Any) -> str:
    """Widen or pass through a code unit as a 1-character string."""
    if isinstance(unit, str):
        return unit
    if isinstance(unit, int):
        return chr(unit)
    return str(unit)


def to_code(unit: Any) -> int:
    """Return the integer value of a code unit."""
    if isinstance(unit, int):
        return unit
    return ord(unit if isinstance(unit, str) else str(unit))


def is_char_unit(unit: Any) -> bool:
    return not isinstance(unit, int)


def _to_byte(unit: Any) -> int:
    return to_code(unit) & 0xFF


def _identity(unit: Any) -> Any:
    return unit


# Unsigned array typecodes are narrowed to their width, signed ones keep the value.
_UNSIGNED_TYPECODES = frozenset("BHILQ")
_CHAR_TYPECODES = frozenset("uw")


def _unit_converter_for_typecode(typecode: str) -> Callable[[Any], Any]:
    if typecode in _CHAR_TYPECODES:
        return to_char
    if typecode in _UNSIGNED_TYPECODES:
        mask = (1 << (array.array(typecode).itemsize * 8)) - 1
        return lambda unit: to_code(unit) & mask
    return to_code


# ---------------------------------------------------------------------------
# builders
# ---------------------------------------------------------------------------

class SequenceBuilder:
    """Collects code units and materializes them as one concrete type."""

    def __init__(self, convert: Callable[[Any], Any], materialize: Callable[[list], Any]):
        self._convert = convert
        self._materialize = materialize
        self._units: list = []

    def append(self, unit: Any) -> None:
        self._units.append(self._convert(unit))

    def extend(self, units: Iterable[Any]) -> None:
        self._units.extend(map(self._convert, units))

    def build(self) -> Any:
        return self._materialize(self._units)


class MutableAppender:
    """Appends converted code units straight into an existing mutable target."""

    def __init__(self, target: Any, convert: Callable[[Any], Any]):
        self._target = target
        self._convert = convert

    def append(self, unit: Any) -> None:
        self._target.append(self._convert(unit))

    def extend(self, units: Iterable[Any]) -> None:
        self._target.extend(map(self._convert, units))

    def build(self) -> Any:
        return self._target


def _join_sz(chars: list) -> stringzilla.Str:
    return stringzilla.Str("".join(chars))


# Target type -> (unit converter, materializer)
_TYPE_BUILDERS: dict[type, tuple[Callable[[Any], Any], Callable[[list], Any]]] = {
    str: (to_char, "".join),
    bytes: (_to_byte, bytes),
    bytearray: (_to_byte, bytearray),
    list: (_identity, list),
    stringzilla.Str: (to_char, _join_sz),
}


def _codec_for_type(target_type: type) -> tuple[Callable[[Any], Any], Callable[[list], Any]]:
    for cls in target_type.__mro__:
        if cls in _TYPE_BUILDERS:
            return _TYPE_BUILDERS[cls]
    raise TypeError(f"Cannot build a sequence of type {target_type.__name__}")


def builder_for_type(target_type: type) -> SequenceBuilder:
    """A builder producing a new object of ``target_type``."""
    return SequenceBuilder(*_codec_for_type(target_type))


def range_source(view: Range) -> Any:
    """The sequence a view points into.

    Views found by find_forward hold cursors and no source of their own.
    """
    if view.source is not None or isinstance(view.begin(), int):
        return view.source
    return view.begin().source


@singledispatch
def _unit_codec(text: Any) -> tuple[Callable[[Any], Any], Callable[[list], Any]]:
    return _codec_for_type(type(text))


@_unit_codec.register(array.array)
def _(text: array.array) -> tuple[Callable[[Any], Any], Callable[[list], Any]]:
    typecode = text.typecode
    return _unit_converter_for_typecode(typecode), lambda units: array.array(typecode, units)


@_unit_codec.register(Range)
def _(text: Range) -> tuple[Callable[[Any], Any], Callable[[list], Any]]:
    return _unit_codec(range_source(text))


@_unit_codec.register(NullTerminated)
def _(text: NullTerminated) -> tuple[Callable[[Any], Any], Callable[[list], Any]]:
    convert, materialize = _unit_codec(text.buffer)
    sentinel = text.buffer[text.offset + string_length(text)]

    def materialize_terminated(units: list) -> NullTerminated:
        units.append(sentinel)
        return NullTerminated(materialize(units))

    return convert, materialize_terminated


def new_builder(text: Any) -> SequenceBuilder:
    """A builder for a new owned sequence shaped like ``text``.

    A Range materializes as the type of its source. A NullTerminated string
    materializes as a new NullTerminated over a fresh buffer of the same type.
    """
    return SequenceBuilder(*_unit_codec(text))


def plain_builder(text: Any) -> SequenceBuilder:
    """Like new_builder, but a NullTerminated string yields its buffer type."""
    if isinstance(text, NullTerminated):
        return new_builder(text.buffer)
    return new_builder(text)


def is_mutable(sequence: Any) -> bool:
    return isinstance(sequence, (MutableSequence, array.array))


def appender(target: Any, clear_target: bool = True) -> Any:
    """A builder that writes into ``target``.

    ``target`` may be a type (a new object is built), a mutable sequence
    (extended in place) or an immutable value (a new value is built from its
    current content unless ``clear_target``).
    """
    if isinstance(target, type):
        return builder_for_type(target)
    if isinstance(target, (Range, NullTerminated)):
        raise TypeError(f"Cannot copy into a {type(target).__name__}")
    if is_mutable(target):
        if clear_target:
            del target[:]
        if isinstance(target, array.array):
            convert = _unit_converter_for_typecode(target.typecode)
        elif isinstance(target, (bytes, bytearray)):
            convert = _to_byte
        else:
            convert = _identity
        return MutableAppender(target, convert)
    builder = new_builder(target)
    if not clear_target:
        builder.extend(target)
    return builder


# ---------------------------------------------------------------------------
# cursors and length
# ---------------------------------------------------------------------------

@singledispatch
def make_cursor(text: Any) -> Any:
    """A forward terminated cursor positioned at the start of ``text``."""
    return BoundCursor(text, 0, len(text))


@make_cursor.register(Range)
def _(text: Range) -> BoundCursor:
    begin, end = text.positions()
    source = range_source(text)
    return BoundCursor(source, begin, end)


@make_cursor.register(NullTerminated)
def _(text: NullTerminated) -> NullTerminatedCursor:
    return NullTerminatedCursor(text.buffer, text.offset)


@make_cursor.register(BoundCursor)
@make_cursor.register(NullTerminatedCursor)
def _(text: Any) -> Any:
    return text.copy()


@singledispatch
def make_reverse_cursor(text: Any) -> ReverseCursor:
    """A cursor positioned at the last unit of ``text`` walking backwards."""
    return ReverseCursor(text, len(text) - 1, -1)


@make_reverse_cursor.register(Range)
def _(text: Range) -> ReverseCursor:
    begin, end = text.positions()
    source = range_source(text)
    return ReverseCursor(source, end - 1, begin - 1)


@make_reverse_cursor.register(NullTerminated)
def _(text: NullTerminated) -> ReverseCursor:
    end = text.offset + string_length(text)
    return ReverseCursor(text.buffer, end - 1, text.offset - 1)


@singledispatch
def string_length(text: Any) -> int:
    """Number of code units in ``text``, without a terminating zero.

    Sized sequences answer directly. A NullTerminated string is scanned up to
    its sentinel.
    """
    return len(text)


@string_length.register(NullTerminated)
def _(text: NullTerminated) -> int:
    if isinstance(text.buffer, (bytes, bytearray)):
        return find_sentinel_sz(text.buffer, text.offset) - text.offset
    return NullTerminatedCursor(text.buffer, text.offset).end_position() - text.offset


def iter_units(cursor: Any) -> Iterator[Any]:
    """Yield the remaining units of a cursor without moving it."""
    cursor = cursor.copy()
    while not cursor.at_end():
        yield cursor.value()
        cursor.advance()


def underlying_source(text: Any) -> Any:
    """The object that holds the units of ``text``."""
    return make_cursor(text).source


def require_mutable(text: Any, operation: str) -> None:
    if not is_mutable(underlying_source(text)):
        raise TypeError(
            f"{operation} cannot modify a {type(text).__name__} in place; use the copy variant"
        )
