"""Position-advancing cursor over SVG attribute text.

Every parser in this package reads its input through an ``AvCursor``.
The cursor only moves forward and reports error positions as 1-based
character indices.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from avsvg.errors import (
    InvalidCharError,
    InvalidNumberError,
    InvalidStringError,
    UnexpectedEndOfStreamError,
)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


###############################################################################
# Character classes
###############################################################################


def is_digit(c: str) -> bool:
    """`[0-9]`"""
    return "0" <= c <= "9"


def is_hex_digit(c: str) -> bool:
    """`[0-9A-Fa-f]`"""
    return "0" <= c <= "9" or "A" <= c <= "F" or "a" <= c <= "f"


def is_space(c: str) -> bool:
    """`[ \\t\\n\\r]`"""
    return c in (" ", "\t", "\n", "\r")


def is_letter(c: str) -> bool:
    """`[A-Za-z]`"""
    return "A" <= c <= "Z" or "a" <= c <= "z"


def is_ident_char(c: str) -> bool:
    """`[0-9A-Za-z_-]`"""
    return is_digit(c) or is_letter(c) or c in ("-", "_")


def is_sign(c: str) -> bool:
    """`[+-]`"""
    return c in ("+", "-")


def is_number_start(c: str) -> bool:
    """Return True if a number can start with the character."""
    return is_digit(c) or c in (".", "-", "+")


###############################################################################
# AvCursor
###############################################################################


class AvCursor:
    """A streaming text parsing interface.

    The cursor borrows the text and keeps a single position. Checked accessors
    raise ``UnexpectedEndOfStreamError`` at the end of the text, the
    ``*_unchecked`` variants require the caller to have tested ``at_end()``.
    Copying the cursor forks an independent reader.
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str, pos: int = 0):
        self._text = text
        self._pos = pos

    def __repr__(self) -> str:
        return f"AvCursor(pos={self._pos}, len={len(self._text)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvCursor):
            return NotImplemented
        return self._text == other._text and self._pos == other._pos

    def copy(self) -> AvCursor:
        """Return an independent cursor at the same position."""
        return AvCursor(self._text, self._pos)

    @property
    def text(self) -> str:
        """The whole underlying text."""
        return self._text

    def pos(self) -> int:
        """Return the current position (0-based index into the text)."""
        return self._pos

    def calc_char_pos(self) -> int:
        """Return the current position as a 1-based character index."""
        return self.calc_char_pos_at(self._pos)

    def calc_char_pos_at(self, pos: int) -> int:
        """Return the given position as a 1-based character index."""
        return min(pos, len(self._text)) + 1

    def jump_to_end(self) -> None:
        """Move to the end of the text. Used to stop parsing on error."""
        self._pos = len(self._text)

    def at_end(self) -> bool:
        """Return True if the whole text was consumed."""
        return self._pos >= len(self._text)

    def curr_char(self) -> str:
        """Return the character at the current position.

        Raises:
            UnexpectedEndOfStreamError: if the cursor is at the end.
        """
        if self.at_end():
            raise UnexpectedEndOfStreamError()
        return self._text[self._pos]

    def curr_char_unchecked(self) -> str:
        """Return the character at the current position without an end check."""
        return self._text[self._pos]

    def get_curr_char(self) -> Optional[str]:
        """Return the character at the current position or None at the end."""
        if self.at_end():
            return None
        return self._text[self._pos]

    def is_curr_char_eq(self, c: str) -> bool:
        """Return True if the current character equals _c_. False at the end."""
        return not self.at_end() and self._text[self._pos] == c

    def next_char(self) -> str:
        """Return the character after the current one.

        Raises:
            UnexpectedEndOfStreamError: if there is no such character.
        """
        if self._pos + 1 >= len(self._text):
            raise UnexpectedEndOfStreamError()
        return self._text[self._pos + 1]

    def advance(self, n: int) -> None:
        """Advance by exactly _n_ characters.

        Moving past the end of the text is a defect of the calling parser,
        not of the input, and fails the assertion.
        """
        assert n >= 0 and self._pos + n <= len(self._text), "advance past the end of the text"
        self._pos += n

    def skip_spaces(self) -> None:
        """Skip whitespace. Accepted: ``' ' \\t \\n \\r``."""
        while not self.at_end() and is_space(self._text[self._pos]):
            self._pos += 1

    def starts_with(self, text: str) -> bool:
        """Return True if the remaining text starts with _text_."""
        return self._text.startswith(text, self._pos)

    def starts_with_space(self) -> bool:
        """Return True if the current character is whitespace."""
        return not self.at_end() and is_space(self._text[self._pos])

    def consume_char(self, c: str) -> None:
        """Consume the current character if it is equal to _c_.

        Raises:
            UnexpectedEndOfStreamError: at the end of the text.
            InvalidCharError: if the current character is different.
        """
        actual = self.curr_char()
        if actual != c:
            raise InvalidCharError(actual, [c], self.calc_char_pos())
        self.advance(1)

    def skip_string(self, text: str) -> None:
        """Consume _text_.

        Raises:
            UnexpectedEndOfStreamError: at the end of the text.
            InvalidStringError: if the remaining text does not start with _text_.
        """
        if self.at_end():
            raise UnexpectedEndOfStreamError()
        if not self.starts_with(text):
            actual = self._text[self._pos : self._pos + len(text)]
            raise InvalidStringError(actual, [text], self.calc_char_pos())
        self.advance(len(text))

    def skip_while(self, predicate: Callable[[str], bool]) -> None:
        """Skip characters while _predicate_ holds."""
        while not self.at_end() and predicate(self._text[self._pos]):
            self._pos += 1

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while _predicate_ holds and return them (may be empty)."""
        start = self._pos
        self.skip_while(predicate)
        return self.slice_back(start)

    def consume_ident(self) -> str:
        """Consume an identifier (``[0-9A-Za-z_-]*``)."""
        return self.consume_while(is_ident_char)

    def skip_digits(self) -> None:
        """Skip ``[0-9]*``."""
        self.skip_while(is_digit)

    def slice_back(self, pos: int) -> str:
        """Return the text from _pos_ to the current position."""
        return self._text[pos : self._pos]

    def slice_tail(self) -> str:
        """Return the text from the current position to the end."""
        return self._text[self._pos :]

    def parse_list_separator(self) -> None:
        """Skip a single comma if present."""
        if self.is_curr_char_eq(","):
            self._pos += 1

    def parse_number(self) -> float:
        """Parse a number starting at the current position.

        Grammar: ``[+-]? ([0-9]+ | [0-9]* '.' [0-9]*) ([eE] [+-]? [0-9]+)?``.
        An ``e`` followed by ``m`` or ``x`` starts a unit (``em``/``ex``) and is
        not consumed. Infinite results are rejected.

        Returns:
            float: the parsed value

        Raises:
            InvalidNumberError: if no valid finite number starts here.
        """
        self.skip_spaces()

        if self.at_end():
            raise InvalidNumberError(self.calc_char_pos())

        start = self._pos

        if is_sign(self.curr_char_unchecked()):
            self.advance(1)

        # integer part: must start with a digit or a dot
        c = self.get_curr_char()
        if c is None:
            raise InvalidNumberError(self.calc_char_pos_at(start))
        if is_digit(c):
            self.skip_digits()
        elif c != ".":
            raise InvalidNumberError(self.calc_char_pos_at(start))

        # fraction and exponent
        c = self.get_curr_char()
        if c is not None:
            if c == ".":
                self.advance(1)
                self.skip_digits()
                c = self.get_curr_char() or c

            if c in ("e", "E"):
                try:
                    c2 = self.next_char()
                except UnexpectedEndOfStreamError as exc:
                    raise InvalidNumberError(self.calc_char_pos_at(start)) from exc

                if c2 not in ("m", "x"):
                    self.advance(1)
                    c = self.get_curr_char()
                    if c is not None and is_sign(c):
                        self.advance(1)
                    self.skip_digits()

        try:
            value = float(self.slice_back(start))
        except ValueError as exc:
            raise InvalidNumberError(self.calc_char_pos_at(start)) from exc

        if not math.isfinite(value):
            raise InvalidNumberError(self.calc_char_pos_at(start))
        return value

    def parse_list_number(self) -> float:
        """Parse a number from a list: the number, trailing spaces and one comma.

        Raises:
            UnexpectedEndOfStreamError: if the cursor is already at the end.
            InvalidNumberError: if the number is malformed.
        """
        if self.at_end():
            raise UnexpectedEndOfStreamError()

        value = self.parse_number()
        self.skip_spaces()
        self.parse_list_separator()
        return value

    def parse_integer(self) -> int:
        """Parse a 32-bit signed integer.

        Raises:
            InvalidNumberError: if no integer starts here or it is out of range.
            UnexpectedEndOfStreamError: if the text ends after the sign.
        """
        self.skip_spaces()

        if self.at_end():
            raise InvalidNumberError(self.calc_char_pos())

        start = self._pos

        if is_sign(self.curr_char()):
            self.advance(1)

        if not is_digit(self.curr_char()):
            raise InvalidNumberError(self.calc_char_pos_at(start))

        self.skip_digits()

        value = int(self.slice_back(start))
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise InvalidNumberError(self.calc_char_pos_at(start))
        return value

    def parse_list_integer(self) -> int:
        """Parse an integer from a list: the integer, trailing spaces and one comma."""
        if self.at_end():
            raise UnexpectedEndOfStreamError()

        value = self.parse_integer()
        self.skip_spaces()
        self.parse_list_separator()
        return value
