"""Terminated cursors: one iteration contract for two kinds of string end.

A null-terminated string only knows where it starts; its end is the first
zero unit. An explicit-range sequence knows both ends. Both are walked through
the same four operations (``advance``, ``at_end``, ``value``, ``distance``) so
that every algorithm in stringx is written once for either shape. A forward
scan over a null-terminated string can stop at the first mismatch without
computing the length first.

Cursors hold a reference to their source. Advancing a cursor that is already
at its end position is undefined and not checked.
"""

from typing import Any, Iterator, Sequence

_SENTINELS = (0, "\0")


def is_sentinel(unit: Any) -> bool:
    """True for the zero unit that ends a null-terminated string."""
    return unit in _SENTINELS


class NullTerminated:
    """A position in a buffer whose logical end is marked by a zero unit.

    This is the Python shape of a C string pointer. ``buffer`` may be any
    indexable sequence (``bytes``, ``bytearray``, ``array.array``, ``list`` or
    ``str``); it must contain a sentinel (``0`` or ``"\\0"``) after the last
    logical unit. In-place operations require a mutable buffer.

    Examples:
        >>> text = NullTerminated(bytearray(b"Hello\\0World\\0"))
        >>> bytes(text)
        b'Hello'
        >>> bytes(NullTerminated(text.buffer, 6))
        b'World'
    """

    __slots__ = ("buffer", "offset")

    def __init__(self, buffer: Sequence[Any], offset: int = 0):
        self.buffer = buffer
        self.offset = offset

    def __iter__(self) -> Iterator[Any]:
        buffer = self.buffer
        position = self.offset
        while not is_sentinel(buffer[position]):
            yield buffer[position]
            position += 1

    def __repr__(self) -> str:
        return f"NullTerminated({self.buffer!r}, offset={self.offset})"


class NullTerminatedCursor:
    """Reads a string front to back without knowing beforehand where it ends."""

    __slots__ = ("source", "position")

    def __init__(self, source: Sequence[Any], position: int = 0):
        self.source = source
        self.position = position

    def advance(self) -> None:
        self.position += 1

    def at_end(self) -> bool:
        return self.source[self.position] in _SENTINELS

    def value(self) -> Any:
        return self.source[self.position]

    def assign(self, unit: Any) -> None:
        self.source[self.position] = unit

    def distance(self, other: "NullTerminatedCursor") -> int:
        return self.position - other.position

    __sub__ = distance

    def copy(self) -> "NullTerminatedCursor":
        return NullTerminatedCursor(self.source, self.position)

    def end_position(self) -> int:
        """Scan forward to the sentinel and return its position."""
        position = self.position
        source = self.source
        while source[position] not in _SENTINELS:
            position += 1
        return position

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NullTerminatedCursor) and self.position == other.position

    def __repr__(self) -> str:
        return f"NullTerminatedCursor(position={self.position})"


class BoundCursor:
    """Reads a sequence front to back up to an explicit end position."""

    __slots__ = ("source", "position", "end")

    def __init__(self, source: Sequence[Any], position: int, end: int):
        self.source = source
        self.position = position
        self.end = end

    def advance(self) -> None:
        self.position += 1

    def at_end(self) -> bool:
        return self.position == self.end

    def value(self) -> Any:
        return self.source[self.position]

    def assign(self, unit: Any) -> None:
        self.source[self.position] = unit

    def distance(self, other: "BoundCursor") -> int:
        return self.position - other.position

    __sub__ = distance

    def copy(self) -> "BoundCursor":
        return BoundCursor(self.source, self.position, self.end)

    def end_position(self) -> int:
        return self.end

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BoundCursor) and self.position == other.position

    def __repr__(self) -> str:
        return f"BoundCursor(position={self.position}, end={self.end})"


class ReverseCursor(BoundCursor):
    """Reads a sequence back to front.

    ``position`` starts at the last unit and ``end`` is one position before
    the first unit, so an empty sequence starts out at its end. Creating one
    for a null-terminated string needs the length first, which is a full scan.
    """

    __slots__ = ()

    def advance(self) -> None:
        self.position -= 1

    def distance(self, other: "BoundCursor") -> int:
        return other.position - self.position

    __sub__ = distance

    def copy(self) -> "ReverseCursor":
        return ReverseCursor(self.source, self.position, self.end)

    def base(self) -> int:
        """The forward position one behind the current unit."""
        return self.position + 1

    def __repr__(self) -> str:
        return f"ReverseCursor(position={self.position}, end={self.end})"
