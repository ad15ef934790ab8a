"""Replace every occurrence of a pattern.

Matches are found greedily from left to right and do not overlap: after a
match the search resumes behind the matched span. Replacing ``"aa"`` with
``"123"`` in ``"aaaa aaaa"`` therefore gives ``"123123 123123"``.
"""

from typing import Any, Optional

from stringx.chars import EqualsComparer, EqualsComparerIgnoringCase
from stringx.scan import Comparer, find_forward
from stringx.sequences import appender, is_mutable, iter_units, make_cursor, new_builder


def _checked_pattern_cursor(pattern: Any, operation: str) -> Any:
    pattern_cursor = make_cursor(pattern)
    # An empty pattern would match at every position
    if pattern_cursor.at_end():
        raise ValueError(f"The {operation} input parameter pattern must not be empty.")
    return pattern_cursor


def _replace_all_forward(builder: Any, text_cursor: Any, pattern_cursor: Any, replacement_cursor: Any, compare: Comparer) -> None:
    """Append ``text`` to ``builder`` with every match replaced."""
    text_cursor = text_cursor.copy()
    while not text_cursor.at_end():
        text_loop = text_cursor.copy()
        pattern_loop = pattern_cursor.copy()
        while not text_loop.at_end() and not pattern_loop.at_end():
            if not compare(text_loop.value(), pattern_loop.value()):
                break
            text_loop.advance()
            pattern_loop.advance()
        if pattern_loop.at_end():
            builder.extend(iter_units(replacement_cursor))
            text_cursor = text_loop
        else:
            builder.append(text_cursor.value())
            text_cursor.advance()


def replace_all_copy(text: Any, pattern: Any, replacement: Any, comparer: Optional[Comparer] = None) -> Any:
    """Return a copy of ``text`` with all occurrences of ``pattern`` replaced.

    Raises:
        ValueError: ``pattern`` is empty.

    Examples:
        >>> replace_all_copy("Hello World", "World", "Universe")
        'Hello Universe'
    """
    pattern_cursor = _checked_pattern_cursor(pattern, "replace_all_copy")
    builder = new_builder(text)
    _replace_all_forward(
        builder,
        make_cursor(text),
        pattern_cursor,
        make_cursor(replacement),
        comparer or EqualsComparer(),
    )
    return builder.build()


def ireplace_all_copy(text: Any, pattern: Any, replacement: Any) -> Any:
    return replace_all_copy(text, pattern, replacement, EqualsComparerIgnoringCase())


def replace_all_in_place(text: Any, pattern: Any, replacement: Any, comparer: Optional[Comparer] = None) -> Any:
    """Replace all occurrences of ``pattern`` in a growable ``text`` and return it.

    ``text`` must be a resizable buffer such as ``bytearray``, ``list`` or
    ``array.array``. The buffer is cut at the first match, the replacement is
    appended, and the rest is copied back with the remaining matches replaced.

    Raises:
        ValueError: ``pattern`` is empty.
        TypeError: ``text`` cannot be resized.
    """
    pattern_cursor = _checked_pattern_cursor(pattern, "replace_all_in_place")
    if not is_mutable(text):
        raise TypeError(
            f"replace_all_in_place cannot modify a {type(text).__name__} in place; use the copy variant"
        )
    compare = comparer or EqualsComparer()
    replacement_cursor = make_cursor(replacement)
    found = find_forward(make_cursor(text), pattern_cursor, compare)
    if found.begin().at_end():
        return text

    match_begin, match_end = found.positions()
    tail = text[match_end:]
    del text[match_begin:]
    builder = appender(text, clear_target=False)
    builder.extend(iter_units(replacement_cursor))
    _replace_all_forward(builder, make_cursor(tail), pattern_cursor, replacement_cursor, compare)
    return text


def ireplace_all_in_place(text: Any, pattern: Any, replacement: Any) -> Any:
    return replace_all_in_place(text, pattern, replacement, EqualsComparerIgnoringCase())
