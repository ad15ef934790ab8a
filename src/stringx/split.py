"""Lazy split iterators and the functions that collect their sections.

A split iterator walks a text section by section. A section is the part
between the text start, the separators and the text end, reported as a Range
over the text's source. Nothing is copied; the text and the separator must
stay unchanged while the iterator is used.

The iterator is positioned on the first section right after construction.
It becomes terminal one step *after* the last separator search failed, so a
separator at the very end of the text still produces a trailing empty
section in SplitMode.ALL. Advancing a terminal iterator keeps it terminal
with an empty section.

Examples:
    >>> [copy(str, section) for section in make_split_token_iterator("ab,", ",")]
    ['ab', '']
    >>> split_token([], "Hello World", "l", SplitMode.SKIP_EMPTY)
    ['He', 'o Wor', 'd']
"""

import enum
from typing import Any, Callable, Iterator, Optional

from stringx.chars import EqualsComparer, EqualsComparerIgnoringCase, IsAnyOf
from stringx.copying import copy
from stringx.ranges import Range
from stringx.scan import Comparer, find_forward
from stringx.sequences import make_cursor, plain_builder


class SplitMode(enum.Enum):
    ALL = 0  # Report every section, including empty ones between adjacent separators
    SKIP_EMPTY = 1  # Skip empty sections


class _SplitIteratorBase:
    """State handling shared by both split iterators."""

    _state_fields: tuple = ()

    def current(self) -> Range:
        """The current section."""
        return self._current

    def at_end(self) -> bool:
        return self._is_end

    def advance(self, count: int = 1) -> bool:
        """Advance ``count`` sections; same as calling advance() ``count`` times.

        Returns False if the end was reached on the way.
        """
        for _ in range(count):
            if self._is_end:
                break
            self._advance()
        return not self._is_end

    def advance_to_last(self) -> bool:
        """Advance to the last section.

        Returns False if there is no last section, which only happens when
        every section is empty and empty sections are skipped. Calling this
        again once on the last section does nothing.
        """
        if self._is_end:
            return False
        if self._mode is SplitMode.ALL:
            while not self._is_end and not self._on_last_section():
                self._advance()
        else:
            # Empty sections at the end are only known once the end is reached,
            # so go one step too far and step back.
            previous = self._save()
            while not self._is_end:
                previous = self._save()
                self._advance()
            self._restore(previous)
        return not self._is_end

    def __iter__(self) -> Iterator[Range]:
        """Yield the current and all following sections, advancing the iterator."""
        while not self._is_end:
            yield self._current
            self._advance()

    def _save(self) -> tuple:
        return tuple(getattr(self, name) for name in self._state_fields)

    def _restore(self, state: tuple) -> None:
        for name, value in zip(self._state_fields, state):
            setattr(self, name, value)

    def _advance(self) -> None:
        raise NotImplementedError

    def _on_last_section(self) -> bool:
        raise NotImplementedError


class SplitTokenIterator(_SplitIteratorBase):
    """Splits a text at every occurrence of a separator string.

    Only references to ``text`` and ``separator`` are kept.

    Raises:
        ValueError: ``separator`` is empty; it would match everywhere.
    """

    _state_fields = ("_text", "_separator", "_current", "_is_end")

    def __init__(self, text: Any, separator: Any, mode: SplitMode = SplitMode.ALL, comparer: Optional[Comparer] = None):
        self._separator_cursor = make_cursor(separator)
        if self._separator_cursor.at_end():
            raise ValueError("The separator input parameter for the SplitTokenIterator must not be empty.")
        self._compare = comparer or EqualsComparer()
        self._text = make_cursor(text)
        self._source = self._text.source
        # The last found separator; starts as an empty match at the text start
        self._separator = Range(begin=self._text, end=self._text)
        self._mode = mode
        self._is_end = False
        # Advancing over an empty text would report the end right away
        if not self._text.at_end() or mode is SplitMode.SKIP_EMPTY:
            self._advance()
        else:
            self._current = Range(self._source, self._text.position, self._text.position)

    def _advance(self) -> None:
        while not self._is_end:
            # The previous search found no separator, the text is exhausted
            self._is_end = self._separator.begin().at_end()
            self._text = self._separator.end()
            self._separator = find_forward(self._text, self._separator_cursor, self._compare)
            section_end = self._separator.begin()
            self._current = Range(self._source, self._text.position, section_end.position)
            if self._mode is not SplitMode.SKIP_EMPTY or section_end != self._text:
                break

    def _on_last_section(self) -> bool:
        return self._separator.begin().at_end()


class SplitIterator(_SplitIteratorBase):
    """Splits a text at every unit for which ``is_separator`` is true.

    Only a reference to ``text`` is kept.
    """

    _state_fields = ("_text", "_separator", "_current", "_is_start", "_is_end")

    def __init__(self, text: Any, is_separator: Callable[[Any], bool], mode: SplitMode = SplitMode.ALL):
        self._is_separator = is_separator
        self._text = make_cursor(text)
        self._source = self._text.source
        # Position of the last found separator unit
        self._separator = self._text
        self._mode = mode
        self._is_start = True
        self._is_end = False
        if not self._text.at_end() or mode is SplitMode.SKIP_EMPTY:
            self._advance()
        else:
            self._current = Range(self._source, self._text.position, self._text.position)

    def _advance(self) -> None:
        while not self._is_end:
            self._is_end = self._separator.at_end()
            separator = self._separator.copy()
            if not self._is_end and not self._is_start:
                separator.advance()  # first unit of the next section
            else:
                self._is_start = False
            self._text = separator.copy()
            while not separator.at_end() and not self._is_separator(separator.value()):
                separator.advance()
            self._separator = separator
            self._current = Range(self._source, self._text.position, separator.position)
            if self._mode is not SplitMode.SKIP_EMPTY or separator != self._text:
                break

    def _on_last_section(self) -> bool:
        return self._separator.at_end()


# ---------------------------------------------------------------------------
# factories
# ---------------------------------------------------------------------------

def make_split_token_iterator(text: Any, separator: Any, mode: SplitMode = SplitMode.ALL, comparer: Optional[Comparer] = None) -> SplitTokenIterator:
    return SplitTokenIterator(text, separator, mode, comparer)


def make_isplit_token_iterator(text: Any, separator: Any, mode: SplitMode = SplitMode.ALL) -> SplitTokenIterator:
    """Like make_split_token_iterator, matching the separator ignoring case."""
    return SplitTokenIterator(text, separator, mode, EqualsComparerIgnoringCase())


def make_split_iterator(text: Any, is_separator: Callable[[Any], bool], mode: SplitMode = SplitMode.ALL) -> SplitIterator:
    return SplitIterator(text, is_separator, mode)


def make_split_chars_iterator(text: Any, separator_chars: Any, mode: SplitMode = SplitMode.ALL) -> SplitIterator:
    """Split at any of the units in ``separator_chars``."""
    return SplitIterator(text, IsAnyOf(separator_chars), mode)


# ---------------------------------------------------------------------------
# collecting sections
# ---------------------------------------------------------------------------

def _collect(container: Any, split_it: _SplitIteratorBase, text: Any, clear_container: bool, as_type: Any) -> Any:
    if clear_container:
        container.clear()
    for section in split_it:
        if as_type is Range:
            container.append(section)
        elif as_type is None:
            builder = plain_builder(text)
            builder.extend(section)
            container.append(builder.build())
        else:
            container.append(copy(as_type, section))
    return container


def split_token(
    container: Any,
    text: Any,
    separator: Any,
    mode: SplitMode = SplitMode.ALL,
    comparer: Optional[Comparer] = None,
    clear_container: bool = True,
    as_type: Any = None,
) -> Any:
    """Append every section of ``text`` split at ``separator`` to ``container``.

    Sections are copied to the owned type matching ``text`` (a Range copies to
    the type of its source, a NullTerminated string to its buffer type), to
    ``as_type`` if given, or stored as views with ``as_type=Range``.

    Raises:
        ValueError: ``separator`` is empty.
    """
    split_it = SplitTokenIterator(text, separator, mode, comparer)
    return _collect(container, split_it, text, clear_container, as_type)


def isplit_token(
    container: Any,
    text: Any,
    separator: Any,
    mode: SplitMode = SplitMode.ALL,
    clear_container: bool = True,
    as_type: Any = None,
) -> Any:
    return split_token(container, text, separator, mode, EqualsComparerIgnoringCase(), clear_container, as_type)


def split(
    container: Any,
    text: Any,
    is_separator: Callable[[Any], bool],
    mode: SplitMode = SplitMode.ALL,
    clear_container: bool = True,
    as_type: Any = None,
) -> Any:
    """Append every section of ``text`` split at units matching ``is_separator``."""
    split_it = SplitIterator(text, is_separator, mode)
    return _collect(container, split_it, text, clear_container, as_type)


def split_chars(
    container: Any,
    text: Any,
    separator_chars: Any,
    mode: SplitMode = SplitMode.ALL,
    clear_container: bool = True,
    as_type: Any = None,
) -> Any:
    """Append every section of ``text`` split at any unit of ``separator_chars``."""
    return split(container, text, IsAnyOf(separator_chars), mode, clear_container, as_type)
