"""Data errors raised while parsing SVG attribute values.

All errors derive from ``AvSvgError`` which itself is a ``ValueError``.
Positions are 1-based character indices into the parsed text.
"""

from __future__ import annotations

from typing import Optional, Sequence


class AvSvgError(ValueError):
    """Base class of all SVG data parsing errors."""

    pos: Optional[int] = None


class UnexpectedEndOfStreamError(AvSvgError):
    """The input data ended earlier than expected."""

    def __init__(self) -> None:
        super().__init__("unexpected end of stream")


class UnexpectedDataError(AvSvgError):
    """The input text contains unknown data."""

    def __init__(self, pos: int) -> None:
        super().__init__(f"unexpected data at position {pos}")
        self.pos = pos


class InvalidValueError(AvSvgError):
    """The provided string does not contain any valid data."""

    def __init__(self) -> None:
        super().__init__("invalid value")


class InvalidNumberError(AvSvgError):
    """An invalid number."""

    def __init__(self, pos: int) -> None:
        super().__init__(f"invalid number at position {pos}")
        self.pos = pos


class InvalidCharError(AvSvgError):
    """An unexpected character; ``actual`` was found where one of ``expected`` was required."""

    def __init__(self, actual: str, expected: Sequence[str], pos: int) -> None:
        expected_str = "', '".join(expected)
        super().__init__(f"expected '{expected_str}' not '{actual}' at position {pos}")
        self.actual = actual
        self.expected = list(expected)
        self.pos = pos


class InvalidStringError(AvSvgError):
    """An unexpected string; ``actual`` was found where one of ``expected`` was required."""

    def __init__(self, actual: str, expected: Sequence[str], pos: int) -> None:
        expected_str = "', '".join(expected)
        super().__init__(f"expected '{expected_str}' not '{actual}' at position {pos}")
        self.actual = actual
        self.expected = list(expected)
        self.pos = pos
