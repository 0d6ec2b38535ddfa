"""SVG path data container, builder and parse entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union, overload

import numpy as np
from numpy.typing import NDArray

from avsvg.errors import AvSvgError
from avsvg.options import WriteOptions
from avsvg.path_converter import PathConverter
from avsvg.path_segment import (
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
    segment_fuzzy_eq,
)
from avsvg.path_tokenizer import PathTokenizer
from avsvg.path_writer import PathWriter

logger = logging.getLogger(__name__)


###############################################################################
# AvPath
###############################################################################


class AvPath:
    """SVG path data represented by an ordered list of segments.

    A path owns its segments. Parsed paths always start with a MoveTo;
    paths assembled with the builder methods are not checked.

    Example:
        >>> path = AvPath().move_to(10, 20).rel_line_to(5, 5).close_path()
        >>> str(path)
        'M 10 20 l 5 5 Z'
    """

    def __init__(self, segments: Optional[Iterable[AvPathSegment]] = None):
        self._segments: List[AvPathSegment] = list(segments) if segments is not None else []

    ###########################################################################
    # Parsing
    ###########################################################################

    @classmethod
    def from_string(cls, text: str) -> AvPath:
        """Parse path data.

        Raises:
            AvSvgError: the first error in _text_.
        """
        return cls(PathTokenizer(text))

    @classmethod
    def parse(cls, text: str) -> PathParseResult:
        """Parse path data, keeping every segment before the first error."""
        return parse_path(text)

    ###########################################################################
    # Sequence protocol
    ###########################################################################

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[AvPathSegment]:
        return iter(self._segments)

    @overload
    def __getitem__(self, index: int) -> AvPathSegment: ...

    @overload
    def __getitem__(self, index: slice) -> List[AvPathSegment]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[AvPathSegment, List[AvPathSegment]]:
        return self._segments[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvPath):
            return NotImplemented
        return self._segments == other._segments

    def __repr__(self) -> str:
        return f"AvPath({self._segments!r})"

    def __str__(self) -> str:
        return PathWriter.write(self._segments)

    @property
    def segments(self) -> List[AvPathSegment]:
        """The segment list of this path (not a copy)."""
        return self._segments

    def append(self, segment: AvPathSegment) -> AvPath:
        """Append a segment and return self."""
        self._segments.append(segment)
        return self

    def extend(self, segments: Iterable[AvPathSegment]) -> AvPath:
        """Append all _segments_ and return self."""
        self._segments.extend(segments)
        return self

    ###########################################################################
    # Builder
    ###########################################################################

    def move_to(self, x: float, y: float) -> AvPath:
        """Append an absolute MoveTo."""
        return self.append(MoveTo(True, x, y))

    def rel_move_to(self, x: float, y: float) -> AvPath:
        """Append a relative MoveTo."""
        return self.append(MoveTo(False, x, y))

    def line_to(self, x: float, y: float) -> AvPath:
        """Append an absolute LineTo."""
        return self.append(LineTo(True, x, y))

    def rel_line_to(self, x: float, y: float) -> AvPath:
        """Append a relative LineTo."""
        return self.append(LineTo(False, x, y))

    def hline_to(self, x: float) -> AvPath:
        """Append an absolute HorizontalLineTo."""
        return self.append(HorizontalLineTo(True, x))

    def rel_hline_to(self, x: float) -> AvPath:
        """Append a relative HorizontalLineTo."""
        return self.append(HorizontalLineTo(False, x))

    def vline_to(self, y: float) -> AvPath:
        """Append an absolute VerticalLineTo."""
        return self.append(VerticalLineTo(True, y))

    def rel_vline_to(self, y: float) -> AvPath:
        """Append a relative VerticalLineTo."""
        return self.append(VerticalLineTo(False, y))

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> AvPath:
        """Append an absolute CurveTo."""
        return self.append(CurveTo(True, x1, y1, x2, y2, x, y))

    def rel_curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> AvPath:
        """Append a relative CurveTo."""
        return self.append(CurveTo(False, x1, y1, x2, y2, x, y))

    def smooth_curve_to(self, x2: float, y2: float, x: float, y: float) -> AvPath:
        """Append an absolute SmoothCurveTo."""
        return self.append(SmoothCurveTo(True, x2, y2, x, y))

    def rel_smooth_curve_to(self, x2: float, y2: float, x: float, y: float) -> AvPath:
        """Append a relative SmoothCurveTo."""
        return self.append(SmoothCurveTo(False, x2, y2, x, y))

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> AvPath:
        """Append an absolute Quadratic."""
        return self.append(Quadratic(True, x1, y1, x, y))

    def rel_quad_to(self, x1: float, y1: float, x: float, y: float) -> AvPath:
        """Append a relative Quadratic."""
        return self.append(Quadratic(False, x1, y1, x, y))

    def smooth_quad_to(self, x: float, y: float) -> AvPath:
        """Append an absolute SmoothQuadratic."""
        return self.append(SmoothQuadratic(True, x, y))

    def rel_smooth_quad_to(self, x: float, y: float) -> AvPath:
        """Append a relative SmoothQuadratic."""
        return self.append(SmoothQuadratic(False, x, y))

    def arc_to(
        self, rx: float, ry: float, x_axis_rotation: float, large_arc: bool, sweep: bool, x: float, y: float
    ) -> AvPath:
        """Append an absolute EllipticalArc."""
        return self.append(EllipticalArc(True, rx, ry, x_axis_rotation, large_arc, sweep, x, y))

    def rel_arc_to(
        self, rx: float, ry: float, x_axis_rotation: float, large_arc: bool, sweep: bool, x: float, y: float
    ) -> AvPath:
        """Append a relative EllipticalArc."""
        return self.append(EllipticalArc(False, rx, ry, x_axis_rotation, large_arc, sweep, x, y))

    def close_path(self) -> AvPath:
        """Append an absolute ClosePath."""
        return self.append(ClosePath(True))

    def rel_close_path(self) -> AvPath:
        """Append a relative ClosePath."""
        return self.append(ClosePath(False))

    ###########################################################################
    # Conversion and output
    ###########################################################################

    def to_absolute(self) -> AvPath:
        """Convert all segments to absolute coordinates in place and return self."""
        PathConverter.to_absolute(self._segments)
        return self

    def to_relative(self) -> AvPath:
        """Convert all segments to relative coordinates in place and return self."""
        PathConverter.to_relative(self._segments)
        return self

    def to_string(self, options: Optional[WriteOptions] = None) -> str:
        """Return the path data written with the given _options_."""
        return PathWriter.write(self._segments, options)

    ###########################################################################
    # Comparison
    ###########################################################################

    @property
    def values(self) -> NDArray[np.float64]:
        """All numbers of all segments in write order as a flat array (arc flags excluded)."""
        return np.array([v for seg in self._segments for v in seg.coords()], dtype=np.float64)

    def fuzzy_eq(self, other: AvPath) -> bool:
        """Return True if both paths have fuzzy-equal segments."""
        if len(self) != len(other):
            return False
        return all(segment_fuzzy_eq(a, b) for a, b in zip(self, other))

    def approx_equal(self, other: AvPath, rtol: float = 1e-9, atol: float = 1e-9) -> bool:
        """Check if this path is approximately equal to another path.

        Commands, absolute flags and arc flags must match exactly; numbers are
        compared with ``np.allclose``.

        Args:
            other: Another AvPath to compare with
            rtol: Relative tolerance for floating point comparison
            atol: Absolute tolerance for floating point comparison

        Returns:
            True if paths are approximately equal, False otherwise
        """
        if len(self) != len(other):
            return False

        for seg, other_seg in zip(self, other):
            if seg.cmd is not other_seg.cmd or seg.absolute != other_seg.absolute:
                return False
            if isinstance(seg, EllipticalArc) and isinstance(other_seg, EllipticalArc):
                if seg.large_arc != other_seg.large_arc or seg.sweep != other_seg.sweep:
                    return False

        return bool(np.allclose(self.values, other.values, rtol=rtol, atol=atol))


###############################################################################
# Parsing
###############################################################################


@dataclass
class PathParseResult:
    """Outcome of ``parse_path``.

    Attributes:
        path: All segments parsed before the first error
        error: The error that stopped parsing, None if all text was valid
    """

    path: AvPath = field(default_factory=AvPath)
    error: Optional[AvSvgError] = None

    @property
    def ok(self) -> bool:
        """True if the whole text was parsed."""
        return self.error is None


def parse_path(text: str) -> PathParseResult:
    """Parse path data, keeping every segment parsed before the first error.

    Malformed data never raises; the remainder after the first bad token is ignored.

    Example: ``M 10 20 L 30 40 #!@$1 L 50 60`` -> ``M 10 20 L 30 40`` and an error at position 17.

    Args:
        text (str): SVG path data

    Returns:
        PathParseResult: the parsed prefix and the terminal error, if any
    """
    result = PathParseResult()
    tokenizer = PathTokenizer(text)
    try:
        for segment in tokenizer:
            result.path.append(segment)
    except AvSvgError as exc:
        logger.warning("Invalid path data: %s. The remaining data is ignored.", exc)
        result.error = exc
    return result
