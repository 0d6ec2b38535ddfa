"""Pull-based tokenizer turning SVG path data into path segments."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from avsvg.common import PathCommand
from avsvg.cursor import AvCursor, is_number_start
from avsvg.errors import AvSvgError, UnexpectedDataError
from avsvg.path_segment import (
    LETTER_TO_COMMAND,
    SEGMENT_INFO,
    AvPathSegment,
    ClosePath,
    CurveTo,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Quadratic,
    SmoothCurveTo,
    SmoothQuadratic,
    VerticalLineTo,
)

logger = logging.getLogger(__name__)


###############################################################################
# PathTokenizer
###############################################################################


class PathTokenizer:
    """Iterator yielding one segment of path data per step.

    Implicit commands are made explicit: coordinates following a MoveTo
    become LineTo segments (``M 10 20 30 40`` -> ``M 10 20 L 30 40``), other
    commands are repeated.

    The first malformed token raises its ``AvSvgError`` from ``__next__``;
    the tokenizer is exhausted afterwards. Segments yielded before the error
    remain valid.

    Example:
        >>> [seg.letter for seg in PathTokenizer("M10-20l30.1.5.1-20z")]
        ['M', 'l', 'l', 'z']
    """

    def __init__(self, text: str):
        self._cursor = AvCursor(text)
        self._prev_cmd: Optional[str] = None

    def __iter__(self) -> Iterator[AvPathSegment]:
        return self

    def __next__(self) -> AvPathSegment:
        cursor = self._cursor
        cursor.skip_spaces()

        if cursor.at_end():
            raise StopIteration

        try:
            return self._next_segment()
        except AvSvgError:
            cursor.jump_to_end()
            raise

    @property
    def cursor(self) -> AvCursor:
        """A copy of the current read position."""
        return self._cursor.copy()

    def _next_segment(self) -> AvPathSegment:
        cursor = self._cursor
        start = cursor.pos()
        first_char = cursor.curr_char_unchecked()
        is_cmd = first_char in LETTER_TO_COMMAND

        # every path starts with a MoveTo
        if self._prev_cmd is None and first_char not in ("M", "m"):
            raise UnexpectedDataError(cursor.calc_char_pos_at(start))

        is_implicit_line_to = False
        if is_cmd:
            letter = first_char
            cursor.advance(1)
        elif is_number_start(first_char) and self._prev_cmd is not None:
            if self._prev_cmd in ("Z", "z"):
                # ClosePath cannot be followed by a number
                raise UnexpectedDataError(cursor.calc_char_pos_at(start))

            if self._prev_cmd in ("M", "m"):
                is_implicit_line_to = True
                letter = "L" if self._prev_cmd == "M" else "l"
                logger.debug("Implicit '%s' after MoveTo at position %d", letter, cursor.calc_char_pos())
            else:
                letter = self._prev_cmd
        else:
            raise UnexpectedDataError(cursor.calc_char_pos_at(start))

        cmd, absolute = LETTER_TO_COMMAND[letter]
        segment = self._parse_segment(cmd, absolute)

        # keep the MoveTo so that following pairs are LineTo as well
        self._prev_cmd = ("M" if absolute else "m") if is_implicit_line_to else letter
        return segment

    def _parse_segment(self, cmd: PathCommand, absolute: bool) -> AvPathSegment:
        cursor = self._cursor
        info = SEGMENT_INFO[cmd]
        values: List[float] = [cursor.parse_list_number() for _ in info.coord_fields]

        if cmd is PathCommand.MOVE_TO:
            return MoveTo(absolute, *values)
        if cmd is PathCommand.LINE_TO:
            return LineTo(absolute, *values)
        if cmd is PathCommand.HORIZONTAL_LINE_TO:
            return HorizontalLineTo(absolute, *values)
        if cmd is PathCommand.VERTICAL_LINE_TO:
            return VerticalLineTo(absolute, *values)
        if cmd is PathCommand.CURVE_TO:
            return CurveTo(absolute, *values)
        if cmd is PathCommand.SMOOTH_CURVE_TO:
            return SmoothCurveTo(absolute, *values)
        if cmd is PathCommand.QUADRATIC:
            return Quadratic(absolute, *values)
        if cmd is PathCommand.SMOOTH_QUADRATIC:
            return SmoothQuadratic(absolute, *values)
        if cmd is PathCommand.ELLIPTICAL_ARC:
            large_arc = self._parse_flag()
            sweep = self._parse_flag()
            x = cursor.parse_list_number()
            y = cursor.parse_list_number()
            return EllipticalArc(absolute, values[0], values[1], values[2], large_arc, sweep, x, y)
        if cmd is PathCommand.CLOSE_PATH:
            return ClosePath(absolute)
        raise AssertionError(f"unhandled path command {cmd}")

    def _parse_flag(self) -> bool:
        """Parse an arc flag: a single ``0`` or ``1``, no separator required after it."""
        cursor = self._cursor
        cursor.skip_spaces()

        c = cursor.curr_char()
        if c not in ("0", "1"):
            raise UnexpectedDataError(cursor.calc_char_pos())

        cursor.advance(1)
        cursor.parse_list_separator()
        cursor.skip_spaces()
        return c == "1"
