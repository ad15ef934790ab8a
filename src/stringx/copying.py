"""Copy and join across sequence shapes and code-unit widths."""

from typing import Any, Iterable

from stringx.sequences import appender, iter_units, make_cursor


def copy(target: Any, source: Any, clear_target: bool = True) -> Any:
    """Copy the units of ``source`` into ``target``, converting each unit.

    ``target`` is either a type, e.g. ``copy(str, b"Hello")``, or an object.
    A mutable target (``bytearray``, ``list``, ``array.array``) is extended in
    place and returned. An immutable target (``str``, ``bytes``) cannot change,
    so the combined value is returned instead. Each unit is narrowed or widened
    to the unit type of the target.

    Examples:
        >>> copy(str, b"Hello")
        'Hello'
        >>> copy(bytearray(b"Hello "), "World", clear_target=False)
        bytearray(b'Hello World')
    """
    builder = appender(target, clear_target)
    builder.extend(iter_units(make_cursor(source)))
    return builder.build()


def join(target: Any, container: Iterable[Any], separator: Any, clear_target: bool = True) -> Any:
    """Concatenate the items of ``container`` with ``separator`` in between.

    ``target`` follows the same rules as for copy().

    Examples:
        >>> join(str, ["Hello", "World"], " ")
        'Hello World'
    """
    builder = appender(target, clear_target)
    separator_cursor = make_cursor(separator)
    for index, item in enumerate(container):
        if index:
            builder.extend(iter_units(separator_cursor))
        builder.extend(iter_units(make_cursor(item)))
    return builder.build()
