"""Character comparers, predicates and converters.

These are the pluggable pieces the algorithms are parameterized with. Any
callable of the same arity works in their place, e.g. ``lambda a, b: a == b``
as a comparer or ``lambda unit: unit == "-"`` as a predicate.

Code units arrive either as 1-character strings or as integers, and the two
arguments of a comparer may differ in kind or width. The kind of the *first*
argument decides how the second one is promoted. For the case-insensitive
comparer this makes the result depend on argument order when non-ASCII units
meet integer units: ``cmp("ä", 0xC4)`` is true but ``cmp(0xC4, "ä")`` is
false, because integer units fold ASCII letters only.
"""

from typing import Any, Callable, Optional

from stringx.sequences import is_char_unit, iter_units, make_cursor, to_char, to_code

# Whitespace of the "C" locale, used for integer code units.
_ASCII_SPACE = frozenset(b" \t\n\v\f\r")


def _ascii_lower(code: int) -> int:
    if 0x41 <= code <= 0x5A:
        return code + 0x20
    return code


def _ascii_upper(code: int) -> int:
    if 0x61 <= code <= 0x7A:
        return code - 0x20
    return code


class EqualsComparer:
    """Compares two code units for equality."""

    def __call__(self, value_lhs: Any, value_rhs: Any) -> bool:
        if is_char_unit(value_lhs):
            return value_lhs == to_char(value_rhs)
        return value_lhs == to_code(value_rhs)


class EqualsComparerIgnoringCase:
    """Compares two code units for equality ignoring the character casing.

    Character units fold with ``fold`` (``str.lower`` by default), integer
    units fold ASCII letters only. The first argument picks the rule.
    """

    def __init__(self, fold: Optional[Callable[[str], str]] = None):
        self.fold = fold or str.lower

    def __call__(self, value_lhs: Any, value_rhs: Any) -> bool:
        if is_char_unit(value_lhs):
            return self.fold(to_char(value_lhs)) == self.fold(to_char(value_rhs))
        return _ascii_lower(to_code(value_lhs)) == _ascii_lower(to_code(value_rhs))


class IsSpace:
    """Predicate for white-space code units."""

    def __call__(self, value: Any) -> bool:
        if is_char_unit(value):
            return to_char(value).isspace()
        return value in _ASCII_SPACE


class IsAnyOf:
    """Predicate matching any unit of a set of characters.

    ``chars`` may be any supported sequence shape. Only a reference is kept,
    ``chars`` must not change while the predicate is used.
    """

    def __init__(self, chars: Any = ""):
        self.chars = chars
        self._cursor = make_cursor(chars)
        self._compare = EqualsComparer()

    def __call__(self, value: Any) -> bool:
        compare = self._compare
        for unit in iter_units(self._cursor):
            if compare(unit, value):
                return True
        return False


class _CaseConverter:
    def __init__(self, allow_expansion: bool = True):
        self.allow_expansion = allow_expansion

    def _convert_char(self, char: str) -> str:
        raise NotImplementedError

    def _convert_code(self, code: int) -> int:
        raise NotImplementedError

    def __call__(self, value: Any) -> Any:
        if not is_char_unit(value):
            return self._convert_code(value)
        char = to_char(value)
        converted = self._convert_char(char)
        if len(converted) != 1 and not self.allow_expansion:
            return char
        return converted


class ToLowerCaseConverter(_CaseConverter):
    """Converts a unit to lower case.

    Returns a multi-unit string when the mapping expands and
    ``allow_expansion`` is set; otherwise such units are left unchanged.
    """

    def _convert_char(self, char: str) -> str:
        return char.lower()

    def _convert_code(self, code: int) -> int:
        return _ascii_lower(code)


class ToUpperCaseConverter(_CaseConverter):
    """Converts a unit to upper case, e.g. ``"ß"`` becomes ``"SS"``."""

    def _convert_char(self, char: str) -> str:
        return char.upper()

    def _convert_code(self, code: int) -> int:
        return _ascii_upper(code)
