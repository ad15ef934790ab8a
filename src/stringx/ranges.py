"""Non-owning views on existing character sequences.

A Range denotes a substring without copying it. Positions are either integer
indices into ``source`` or terminated cursors (see stringx.cursors), which is
what the scan primitives hand back.
"""

from typing import Any, Iterator


class Range:
    """A trivial ``[begin, end)`` view on an existing sequence.

    The view only stores a reference to ``source``. The source must not be
    changed or resized while the view is used.

    Examples:
        >>> text = "Hello World"
        >>> view = Range(text, 0, 5)
        >>> "".join(view)
        'Hello'
        >>> len(Range())
        0
    """

    __slots__ = ("source", "_begin", "_end")

    def __init__(self, source: Any = None, begin: Any = 0, end: Any = None):
        if end is None:
            end = len(source) if source is not None else begin
        self.source = source
        self._begin = begin
        self._end = end

    def begin(self) -> Any:
        return self._begin

    def end(self) -> Any:
        """One position behind the last unit of the view."""
        return self._end

    def __len__(self) -> int:
        return self._end - self._begin

    def __iter__(self) -> Iterator[Any]:
        if isinstance(self._begin, int):
            source = self.source
            for index in range(self._begin, self._end):
                yield source[index]
        else:
            cursor = self._begin.copy()
            while cursor != self._end:
                yield cursor.value()
                cursor.advance()

    def __getitem__(self, index: int) -> Any:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("Range index out of range")
        return self.source[self._begin + index]

    def __repr__(self) -> str:
        return f"Range(begin={self._begin!r}, end={self._end!r})"

    def positions(self) -> tuple[int, int]:
        """Integer positions of the view, also for cursor ranges."""
        begin = self._begin if isinstance(self._begin, int) else self._begin.position
        end = self._end if isinstance(self._end, int) else self._end.position
        return begin, end
