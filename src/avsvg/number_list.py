"""Parsing and writing of SVG number lists (``<list-of-numbers>``)."""

from __future__ import annotations

from typing import Iterable, List, Optional

from avsvg.cursor import AvCursor
from avsvg.numbers import format_number
from avsvg.options import DEFAULT_WRITE_OPTIONS, WriteOptions


def parse_number_list(text: str) -> List[float]:
    """Parse a list of numbers separated by whitespace and/or a comma.

    Example: ``"3.14, 12,5 , 20-4"`` -> ``[3.14, 12.0, 5.0, 20.0, -4.0]``

    Raises:
        AvSvgError: if a number is malformed.
    """
    cursor = AvCursor(text)
    cursor.skip_spaces()

    values: List[float] = []
    while not cursor.at_end():
        values.append(cursor.parse_list_number())
    return values


def write_number_list(values: Iterable[float], options: Optional[WriteOptions] = None) -> str:
    """Write _values_ joined by the configured list separator."""
    opt = options if options is not None else DEFAULT_WRITE_OPTIONS
    return opt.separator.join(format_number(value, opt) for value in values)
