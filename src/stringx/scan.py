"""Scan primitives built on the terminated cursor contract.

prefix_matches, full_match and find_forward are shared by starts_with,
ends_with, equals, contains, replace and the split iterators. The cursors
passed in are never moved; each primitive works on copies.

find_forward is a plain O(len(text) * len(pattern)) search without skip
tables. Inputs are typically short, and the greedy left-to-right match order
that replace and split depend on is exactly what this loop produces.
"""

from typing import Any, Callable

from stringx.ranges import Range

Comparer = Callable[[Any, Any], bool]


def prefix_matches(text_cursor: Any, prefix_cursor: Any, compare: Comparer) -> bool:
    """True if the text starts with the prefix. An empty prefix always matches."""
    text_cursor = text_cursor.copy()
    prefix_cursor = prefix_cursor.copy()
    while not text_cursor.at_end() and not prefix_cursor.at_end():
        if not compare(text_cursor.value(), prefix_cursor.value()):
            break
        text_cursor.advance()
        prefix_cursor.advance()
    # If we managed to read the full prefix, the prefix matches
    return prefix_cursor.at_end()


def full_match(cursor_a: Any, cursor_b: Any, compare: Comparer) -> bool:
    """True if both sequences hold the same units and end together."""
    cursor_a = cursor_a.copy()
    cursor_b = cursor_b.copy()
    while not cursor_a.at_end() and not cursor_b.at_end():
        if not compare(cursor_a.value(), cursor_b.value()):
            break
        cursor_a.advance()
        cursor_b.advance()
    return cursor_a.at_end() and cursor_b.at_end()


def find_forward(text_cursor: Any, pattern_cursor: Any, compare: Comparer) -> Range:
    """Find the first occurrence of the pattern in the text.

    Returns a Range of cursors around the match. If there is no match, both
    ends of the Range are the text's end position, so ``found.begin().at_end()``
    tells success from failure. An empty pattern matches at the first position.
    """
    trial = text_cursor.copy()
    text_loop = trial.copy()
    pattern_loop = pattern_cursor.copy()
    while not trial.at_end():
        while not text_loop.at_end() and not pattern_loop.at_end():
            if not compare(text_loop.value(), pattern_loop.value()):
                break
            text_loop.advance()
            pattern_loop.advance()
        # Either the full pattern was read, or the text ran out while comparing
        if pattern_loop.at_end() or text_loop.at_end():
            break
        trial.advance()
        text_loop = trial.copy()
        pattern_loop = pattern_cursor.copy()

    if pattern_loop.at_end():
        return Range(begin=trial, end=text_loop)
    return Range(begin=text_loop, end=text_loop)
