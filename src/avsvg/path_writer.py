"""Writing path segments back to SVG path data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from avsvg.common import PathCommand
from avsvg.cursor import is_digit
from avsvg.numbers import format_number
from avsvg.options import DEFAULT_WRITE_OPTIONS, WriteOptions
from avsvg.path_segment import AvPathSegment, EllipticalArc

###############################################################################
# Writer state
###############################################################################


@dataclass
class _PrevCmd:
    cmd: PathCommand
    absolute: bool
    implicit: bool


@dataclass
class _WriterState:
    prev_cmd: Optional[_PrevCmd] = None
    prev_coord_has_dot: bool = False


###############################################################################
# PathWriter
###############################################################################


class PathWriter:
    """Renders path segments as SVG path data.

    Without compact notation every command letter and number is followed by
    a single space and the trailing one is dropped (``M 10 20 L 30 40``).
    With ``use_compact_path_notation`` a space is written only where the
    numbers would otherwise merge on re-parse (``M10 20L30 40``,
    ``M.1.1L1 .1 2-.1``).
    """

    @staticmethod
    def write(segments: Iterable[AvPathSegment], options: Optional[WriteOptions] = None) -> str:
        """Return the path data text for _segments_.

        Args:
            segments (Iterable[AvPathSegment]): the segments to write
            options (Optional[WriteOptions], optional): write options. Defaults to DEFAULT_WRITE_OPTIONS.

        Returns:
            str: SVG path data
        """
        opt = options if options is not None else DEFAULT_WRITE_OPTIONS
        state = _WriterState()
        out: List[str] = []

        for seg in segments:
            is_written = PathWriter._write_cmd(seg, state, opt, out)
            PathWriter._write_segment(seg, is_written, state, opt, out)

        text = "".join(out)
        if not opt.use_compact_path_notation:
            text = text[:-1]
        return text

    @staticmethod
    def _write_cmd(seg: AvPathSegment, state: _WriterState, opt: WriteOptions, out: List[str]) -> bool:
        """Write the command letter unless it can be omitted. Returns True if written."""
        prev = state.prev_cmd
        print_cmd = True

        if opt.remove_duplicated_path_commands and prev is not None:
            # MoveTo would turn following pairs into LineTo; ClosePath has nothing else to write
            if (
                prev.cmd is not PathCommand.MOVE_TO
                and seg.cmd is not PathCommand.CLOSE_PATH
                and seg.cmd is prev.cmd
                and seg.absolute == prev.absolute
            ):
                print_cmd = False

        is_implicit = False
        if opt.use_implicit_lineto_commands and prev is not None:
            if (
                seg.cmd is PathCommand.LINE_TO
                and seg.absolute == prev.absolute
                and (prev.implicit or prev.cmd is PathCommand.MOVE_TO)
            ):
                is_implicit = True
                print_cmd = False

        state.prev_cmd = _PrevCmd(seg.cmd, seg.absolute, is_implicit)

        if not print_cmd:
            return False

        out.append(seg.letter)
        if not (seg.cmd is PathCommand.CLOSE_PATH or opt.use_compact_path_notation):
            out.append(" ")
        return True

    @staticmethod
    def _write_segment(
        seg: AvPathSegment, is_written: bool, state: _WriterState, opt: WriteOptions, out: List[str]
    ) -> None:
        if seg.cmd is PathCommand.CLOSE_PATH:
            if not opt.use_compact_path_notation:
                out.append(" ")
            return

        PathWriter._write_coords(seg.coords()[: len(seg.info.coord_fields)], is_written, state, opt, out)

        if isinstance(seg, EllipticalArc):
            if opt.use_compact_path_notation:
                # flags can not be merged into the rotation number
                out.append(" ")

            out.append("1" if seg.large_arc else "0")
            if not opt.join_arc_to_flags:
                out.append(" ")
            out.append("1" if seg.sweep else "0")
            if not opt.join_arc_to_flags:
                out.append(" ")

            # flags never contain a dot
            state.prev_coord_has_dot = False

            # the target point directly follows the flags like a first coordinate
            PathWriter._write_coords([seg.x, seg.y], True, state, opt, out)

    @staticmethod
    def _write_coords(
        coords: Sequence[float], is_explicit_cmd: bool, state: _WriterState, opt: WriteOptions, out: List[str]
    ) -> None:
        if not opt.use_compact_path_notation:
            for num in coords:
                out.append(format_number(num, opt))
                out.append(" ")
            return

        for i, num in enumerate(coords):
            token = format_number(num, opt)
            c = token[0]

            if i == 0 and is_explicit_cmd:
                write_space = False
            elif c == ".":
                # '.5.5' reads as two numbers, '5 .5' needs the space
                write_space = not state.prev_coord_has_dot
            else:
                write_space = is_digit(c)

            if write_space:
                out.append(" ")
            out.append(token)
            state.prev_coord_has_dot = "." in token
