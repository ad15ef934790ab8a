"""String algorithms over str, bytes, buffers, views and null-terminated strings."""

__version__ = "1.0.0"

from stringx.chars import (
    EqualsComparer,
    EqualsComparerIgnoringCase,
    IsAnyOf,
    IsSpace,
    ToLowerCaseConverter,
    ToUpperCaseConverter,
)
from stringx.compare import (
    contains,
    ends_with,
    equals,
    icontains,
    iends_with,
    iequals,
    istarts_with,
    starts_with,
)
from stringx.convert import (
    character_convert_copy,
    character_convert_in_place,
    to_lower_copy,
    to_lower_in_place,
    to_upper_copy,
    to_upper_in_place,
)
from stringx.copying import copy, join
from stringx.cursors import NullTerminated
from stringx.ranges import Range
from stringx.replace import (
    ireplace_all_copy,
    ireplace_all_in_place,
    replace_all_copy,
    replace_all_in_place,
)
from stringx.sequences import string_length
from stringx.split import (
    SplitIterator,
    SplitMode,
    SplitTokenIterator,
    isplit_token,
    make_isplit_token_iterator,
    make_split_chars_iterator,
    make_split_iterator,
    make_split_token_iterator,
    split,
    split_chars,
    split_token,
)
from stringx.trim import (
    trim_copy,
    trim_end_copy,
    trim_end_in_place,
    trim_in_place,
    trim_start_copy,
    trim_start_in_place,
)
