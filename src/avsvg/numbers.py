"""Number formatting and fuzzy float comparison shared by all writers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from avsvg.common import FORMAT_PRECISION, FUZZY_ULPS

if TYPE_CHECKING:
    from avsvg.options import WriteOptions  # pylint: disable=unused-import

_ROUND_SCALE = 10.0**FORMAT_PRECISION
_MAGNITUDE_MASK = 0x7FFF_FFFF_FFFF_FFFF


###############################################################################
# Fuzzy comparison
###############################################################################


def _ordered_bits(value: float) -> int:
    """Map a float to an integer so that adjacent floats map to adjacent integers."""
    bits = int(np.array(value, dtype=np.float64).view(np.int64))
    if bits < 0:
        return -(bits & _MAGNITUDE_MASK)
    return bits


def fuzzy_eq(a: float, b: float, ulps: int = FUZZY_ULPS) -> bool:
    """Return True if _a_ and _b_ are at most _ulps_ representable steps apart.

    Args:
        a (float): first value
        b (float): second value
        ulps (int, optional): allowed distance in units in the last place. Defaults to 4.

    Returns:
        bool: True if the values are approximately equal
    """
    if a == b:
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    return abs(_ordered_bits(a) - _ordered_bits(b)) <= ulps


def fuzzy_ne(a: float, b: float) -> bool:
    """Negation of ``fuzzy_eq``."""
    return not fuzzy_eq(a, b)


def is_fuzzy_zero(value: float) -> bool:
    """Return True if _value_ is fuzzy-equal to zero."""
    return fuzzy_eq(value, 0.0)


###############################################################################
# Formatting
###############################################################################


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def remove_leading_zero(text: str) -> str:
    """Delete the zero of a leading ``0.`` or ``-0.``; other text is returned unchanged."""
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0.") or text.startswith("+0."):
        return text[0] + text[2:]
    return text


def format_number(value: float, options: Optional[WriteOptions] = None) -> str:
    """Return the shortest text that parses back to _value_.

    Integral values are written as plain integers. Other values are rounded
    to 11 decimal digits first, so ``29.999999999999996`` becomes ``30``.
    With ``options.remove_leading_zero`` the zero of ``0.5`` / ``-0.5`` is dropped.

    Args:
        value (float): the number to format
        options (Optional[WriteOptions], optional): write options. Defaults to None.

    Returns:
        str: the formatted number
    """
    if is_fuzzy_zero(math.modf(value)[0]):
        return str(int(value))

    rounded = _round_half_away(value * _ROUND_SCALE) / _ROUND_SCALE
    if rounded == 0.0:
        rounded = 0.0  # drop the sign of -0.0
    text = np.format_float_positional(rounded, trim="-")

    if options is not None and options.remove_leading_zero:
        text = remove_leading_zero(text)
    return text


def write_number(value: float, options: Optional[WriteOptions], out: List[str]) -> None:
    """Append the formatted _value_ to the _out_ buffer."""
    out.append(format_number(value, options))
