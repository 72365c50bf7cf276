from __future__ import annotations

from typing import Union

from libotp._utils.str import clean_user_input

__all__ = ["format_code", "canonical_code", "default_grouping"]


def default_grouping(length: int) -> int:
    return 3 if length % 3 == 0 else 4


def group_string(value: str, size: int, sep: str = " ") -> str:
    """
    split string into groups of <size> chars, separated by <sep>.
    """
    return sep.join(value[o : o + size] for o in range(0, len(value), size))


def format_code(code: int, digits: int, grouping: int | None = None) -> str:
    """
    Render a code for display.

    The code is zero padded to ``digits``. Codes with more digits are not
    truncated. Digits are grouped by three if the padded length is divisible
    by three and by four otherwise, separated by a single space.

    :param grouping:
        custom group size; ``0`` disables grouping.

    Usage example::

        >>> format_code(12345, 6)
        '012 345'
        >>> format_code(94287082, 8)
        '9428 7082'
    """
    value = str(code).zfill(digits)
    if grouping is None:
        grouping = default_grouping(len(value))
    if grouping < 0:
        raise ValueError(f"grouping must be >= 0, got {grouping}")
    if grouping == 0:
        return value
    return group_string(value, grouping)


def canonical_code(code: Union[str, int], digits: int) -> str:
    """
    Normalize a code for comparison: whitespace stripped and upper-cased,
    integers zero padded.
    """
    if isinstance(code, int):
        return str(code).zfill(digits)
    return clean_user_input(code)
