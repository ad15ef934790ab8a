"""Character-wise conversion, including lower and upper case.

The copy variants accept converters that return several units for one input
unit (``"ß".upper()`` is ``"SS"``). The in-place variants can only replace a
unit with one unit, which is a narrower contract.
"""

from typing import Any, Callable

from stringx.chars import ToLowerCaseConverter, ToUpperCaseConverter
from stringx.sequences import iter_units, make_cursor, new_builder, require_mutable

Converter = Callable[[Any], Any]


def _is_single_unit(converted: Any) -> bool:
    return isinstance(converted, int) or (isinstance(converted, str) and len(converted) == 1)


def character_convert_copy(text: Any, converter: Converter) -> Any:
    """Return a copy of ``text`` with ``converter`` applied to every unit.

    The converter may return one unit or a sequence of units. The result has
    the type of ``text``; a Range materializes as the type of its source.
    """
    builder = new_builder(text)
    cursor = make_cursor(text)
    while not cursor.at_end():
        converted = converter(cursor.value())
        if _is_single_unit(converted):
            builder.append(converted)
        else:
            builder.extend(converted)
        cursor.advance()
    return builder.build()


def character_convert_in_place(text: Any, converter: Converter) -> Any:
    """Apply ``converter`` to every unit of a mutable ``text`` and return it.

    Raises:
        TypeError: ``text`` cannot be modified.
        ValueError: the converter returned more or less than one unit.
    """
    require_mutable(text, "character_convert_in_place")
    converted_units = [converter(unit) for unit in iter_units(make_cursor(text))]
    for converted in converted_units:
        if not _is_single_unit(converted):
            raise ValueError(
                f"In-place conversion needs single-unit results, the converter returned {converted!r}"
            )
    cursor = make_cursor(text)
    for converted in converted_units:
        cursor.assign(converted)
        cursor.advance()
    return text


def to_lower_copy(text: Any) -> Any:
    return character_convert_copy(text, ToLowerCaseConverter())


def to_lower_in_place(text: Any) -> Any:
    return character_convert_in_place(text, ToLowerCaseConverter(allow_expansion=False))


def to_upper_copy(text: Any) -> Any:
    return character_convert_copy(text, ToUpperCaseConverter())


def to_upper_in_place(text: Any) -> Any:
    return character_convert_in_place(text, ToUpperCaseConverter(allow_expansion=False))
