"""Conversion of path segments between absolute and relative coordinates."""

from __future__ import annotations

from typing import Iterable

from avsvg.common import PathCommand
from avsvg.path_segment import AvPathSegment

###############################################################################
# PathConverter
###############################################################################


class PathConverter:
    """Rewrites a segment sequence in place so all segments share one coordinate space.

    The geometry described by the segments stays the same. Input segments may
    mix absolute and relative ones. Both conversions are idempotent.
    """

    @staticmethod
    def to_absolute(segments: Iterable[AvPathSegment]) -> None:
        """Convert all _segments_ to absolute coordinates in place.

        A relative MoveTo directly after a ClosePath is relative to the
        start of the closed subpath, which is also where ClosePath leaves
        the current point.

        Args:
            segments (Iterable[AvPathSegment]): fully parsed segments
        """
        # current point (absolute)
        prev_x, prev_y = 0.0, 0.0
        # start of the current subpath (absolute)
        prev_mx, prev_my = 0.0, 0.0
        prev_cmd = PathCommand.MOVE_TO

        for seg in segments:
            if seg.cmd is PathCommand.CLOSE_PATH:
                prev_x, prev_y = prev_mx, prev_my
                seg.set_absolute(True)
                prev_cmd = seg.cmd
                continue

            if seg.is_relative():
                if seg.cmd is PathCommand.MOVE_TO and prev_cmd is PathCommand.CLOSE_PATH:
                    seg.shift(prev_mx, prev_my)
                else:
                    seg.shift(prev_x, prev_y)
                seg.set_absolute(True)

            if seg.cmd is PathCommand.HORIZONTAL_LINE_TO:
                prev_x = seg.x
            elif seg.cmd is PathCommand.VERTICAL_LINE_TO:
                prev_y = seg.y
            else:
                prev_x, prev_y = seg.x, seg.y

            if seg.cmd is PathCommand.MOVE_TO:
                prev_mx, prev_my = prev_x, prev_y

            prev_cmd = seg.cmd

    @staticmethod
    def to_relative(segments: Iterable[AvPathSegment]) -> None:
        """Convert all _segments_ to relative coordinates in place.

        The current point is advanced from the coordinates as they are before
        the segment gets rewritten.

        Args:
            segments (Iterable[AvPathSegment]): fully parsed segments
        """
        # current point (absolute)
        prev_x, prev_y = 0.0, 0.0
        # start of the current subpath (absolute)
        prev_mx, prev_my = 0.0, 0.0
        prev_cmd = PathCommand.MOVE_TO

        for seg in segments:
            if seg.cmd is PathCommand.CLOSE_PATH:
                prev_x, prev_y = prev_mx, prev_my
                seg.set_absolute(False)
                prev_cmd = seg.cmd
                continue

            if seg.is_absolute():
                if seg.cmd is PathCommand.MOVE_TO and prev_cmd is PathCommand.CLOSE_PATH:
                    offset_x, offset_y = prev_mx, prev_my
                else:
                    offset_x, offset_y = prev_x, prev_y
            else:
                offset_x, offset_y = 0.0, 0.0

            # advance the current point before the segment data changes
            if seg.is_absolute():
                if seg.cmd is PathCommand.HORIZONTAL_LINE_TO:
                    prev_x = seg.x
                elif seg.cmd is PathCommand.VERTICAL_LINE_TO:
                    prev_y = seg.y
                else:
                    prev_x, prev_y = seg.x, seg.y
            else:
                if seg.cmd is PathCommand.HORIZONTAL_LINE_TO:
                    prev_x += seg.x
                elif seg.cmd is PathCommand.VERTICAL_LINE_TO:
                    prev_y += seg.y
                else:
                    prev_x += seg.x
                    prev_y += seg.y

            if seg.cmd is PathCommand.MOVE_TO:
                prev_mx, prev_my = prev_x, prev_y

            if seg.is_absolute():
                seg.shift(-offset_x, -offset_y)
                seg.set_absolute(False)

            prev_cmd = seg.cmd
