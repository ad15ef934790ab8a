"""StringZilla utility functions for SIMD-optimized string operations.

This module provides the StringZilla helpers used by the shape adapters and
the trim algorithms: locating the terminating zero of a byte buffer and
character-set trimming of a ``stringzilla.Str`` view.
"""

import stringzilla


def find_sentinel_sz(buffer, start: int = 0) -> int:
    """Position of the first zero byte at or after ``start``.

    Performance note: this is the strlen() of stringx. The search runs on
    StringZilla instead of a Python loop over the buffer. A buffer without a
    terminator is out of contract; its length is returned.
    """
    position = stringzilla.Str(buffer).find("\0", start)
    if position == -1:
        return len(buffer)
    return position


def is_ascii_charset(chars: str) -> bool:
    """True if every character of ``chars`` is a single byte in a Str."""
    return all(ord(char) < 0x80 for char in chars)


def strip_sz(sz_str: 'stringzilla.Str', chars: str, trim_start: bool = True, trim_end: bool = True) -> 'stringzilla.Str':
    """Character-set strip for StringZilla.Str, returning a view.

    ``chars`` must be ASCII so that byte positions and characters agree.
    """
    start = 0
    end = len(sz_str)
    if trim_start:
        start = sz_str.find_first_not_of(chars)
        if start == -1:
            return sz_str[0:0]  # Return empty Str if every character is in the set
    if trim_end:
        last = sz_str.find_last_not_of(chars)
        if last == -1:
            return sz_str[0:0]
        end = last + 1
    return sz_str[start:end]
