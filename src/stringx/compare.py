"""Equality, prefix, suffix and containment checks over any sequence shape.

Examples:
    >>> starts_with("Hello World", "Hello")
    True
    >>> iends_with(b"Hello World", "WORLD")
    True
"""

from typing import Any, Optional

from stringx.chars import EqualsComparer, EqualsComparerIgnoringCase
from stringx.scan import Comparer, find_forward, full_match, prefix_matches
from stringx.sequences import make_cursor, make_reverse_cursor


def equals(text_lhs: Any, text_rhs: Any, comparer: Optional[Comparer] = None) -> bool:
    """True if both texts hold the same units according to ``comparer``."""
    return full_match(make_cursor(text_lhs), make_cursor(text_rhs), comparer or EqualsComparer())


def iequals(text_lhs: Any, text_rhs: Any) -> bool:
    return equals(text_lhs, text_rhs, EqualsComparerIgnoringCase())


def starts_with(text: Any, prefix: Any, comparer: Optional[Comparer] = None) -> bool:
    """True if ``text`` begins with ``prefix``. An empty prefix always matches."""
    return prefix_matches(make_cursor(text), make_cursor(prefix), comparer or EqualsComparer())


def istarts_with(text: Any, prefix: Any) -> bool:
    return starts_with(text, prefix, EqualsComparerIgnoringCase())


def ends_with(text: Any, ending: Any, comparer: Optional[Comparer] = None) -> bool:
    """True if ``text`` ends with ``ending``.

    Both texts are walked backwards, which for null-terminated strings costs a
    length scan first.
    """
    return prefix_matches(
        make_reverse_cursor(text), make_reverse_cursor(ending), comparer or EqualsComparer()
    )


def iends_with(text: Any, ending: Any) -> bool:
    return ends_with(text, ending, EqualsComparerIgnoringCase())


def contains(text: Any, contained: Any, comparer: Optional[Comparer] = None) -> bool:
    """True if ``contained`` occurs in ``text``. An empty string is always contained."""
    contained_cursor = make_cursor(contained)
    if contained_cursor.at_end():
        return True
    found = find_forward(make_cursor(text), contained_cursor, comparer or EqualsComparer())
    return not found.begin().at_end()


def icontains(text: Any, contained: Any) -> bool:
    return contains(text, contained, EqualsComparerIgnoringCase())
