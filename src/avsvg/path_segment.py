"""Path segment model: one dataclass per SVG path command.

The ten segment kinds form a closed set. Each class carries a ``cmd`` tag
and an ``absolute`` flag; everything kind-specific (command letters, which
fields are x- or y-coordinates, write order) is looked up in
``SEGMENT_INFO`` keyed by that tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Tuple, Union

from avsvg.common import AvPathCmds, PathCommand
from avsvg.numbers import fuzzy_eq

###############################################################################
# SegmentInfo
###############################################################################


@dataclass(frozen=True)
class SegmentInfo:
    """Metadata for a path command.

    Attributes:
        abs_letter: Command letter of the absolute form
        rel_letter: Command letter of the relative form
        x_fields: Fields shifted along the x-axis by coordinate conversion
        y_fields: Fields shifted along the y-axis by coordinate conversion
        coord_fields: Numeric fields in write order (arc: before the flags)
        tail_fields: Numeric fields written after the arc flags
    """

    abs_letter: AvPathCmds
    rel_letter: AvPathCmds
    x_fields: Tuple[str, ...]
    y_fields: Tuple[str, ...]
    coord_fields: Tuple[str, ...]
    tail_fields: Tuple[str, ...] = ()

    @property
    def num_values(self) -> int:
        """Number of values parsed for this command (arc flags included)."""
        if self.tail_fields:
            return len(self.coord_fields) + 2 + len(self.tail_fields)
        return len(self.coord_fields)


# Command registry with metadata
SEGMENT_INFO: Dict[PathCommand, SegmentInfo] = {
    PathCommand.MOVE_TO: SegmentInfo("M", "m", ("x",), ("y",), ("x", "y")),
    PathCommand.LINE_TO: SegmentInfo("L", "l", ("x",), ("y",), ("x", "y")),
    PathCommand.HORIZONTAL_LINE_TO: SegmentInfo("H", "h", ("x",), (), ("x",)),
    PathCommand.VERTICAL_LINE_TO: SegmentInfo("V", "v", (), ("y",), ("y",)),
    PathCommand.CURVE_TO: SegmentInfo(
        "C", "c", ("x1", "x2", "x"), ("y1", "y2", "y"), ("x1", "y1", "x2", "y2", "x", "y")
    ),
    PathCommand.SMOOTH_CURVE_TO: SegmentInfo("S", "s", ("x2", "x"), ("y2", "y"), ("x2", "y2", "x", "y")),
    PathCommand.QUADRATIC: SegmentInfo("Q", "q", ("x1", "x"), ("y1", "y"), ("x1", "y1", "x", "y")),
    PathCommand.SMOOTH_QUADRATIC: SegmentInfo("T", "t", ("x",), ("y",), ("x", "y")),
    PathCommand.ELLIPTICAL_ARC: SegmentInfo(
        "A", "a", ("x",), ("y",), ("rx", "ry", "x_axis_rotation"), tail_fields=("x", "y")
    ),
    PathCommand.CLOSE_PATH: SegmentInfo("Z", "z", (), (), ()),
}

# Command letter -> (command, absolute)
LETTER_TO_COMMAND: Dict[AvPathCmds, Tuple[PathCommand, bool]] = {}
for _cmd, _info in SEGMENT_INFO.items():
    LETTER_TO_COMMAND[_info.abs_letter] = (_cmd, True)
    LETTER_TO_COMMAND[_info.rel_letter] = (_cmd, False)


###############################################################################
# Segments
###############################################################################


class _SegmentAccess:
    """Accessors shared by all segment classes; behavior comes from ``SEGMENT_INFO``."""

    cmd: ClassVar[PathCommand]
    absolute: bool

    @property
    def info(self) -> SegmentInfo:
        """Metadata of this segment's command."""
        return SEGMENT_INFO[self.cmd]

    @property
    def letter(self) -> str:
        """Command letter; uppercase for absolute segments."""
        info = SEGMENT_INFO[self.cmd]
        return info.abs_letter if self.absolute else info.rel_letter

    def is_absolute(self) -> bool:
        """Return True if the segment uses absolute coordinates."""
        return self.absolute

    def is_relative(self) -> bool:
        """Return True if the segment uses relative coordinates."""
        return not self.absolute

    def set_absolute(self, absolute: bool) -> None:
        """Mark the segment absolute or relative without touching coordinates."""
        self.absolute = absolute

    def get_x(self) -> Optional[float]:
        """Return the target x-coordinate, None for VerticalLineTo and ClosePath."""
        return getattr(self, "x", None)

    def get_y(self) -> Optional[float]:
        """Return the target y-coordinate, None for HorizontalLineTo and ClosePath."""
        return getattr(self, "y", None)

    def coords(self) -> List[float]:
        """All numeric values in write order, flags excluded."""
        info = SEGMENT_INFO[self.cmd]
        return [getattr(self, name) for name in info.coord_fields + info.tail_fields]

    def shift(self, dx: float, dy: float) -> None:
        """Add (dx, dy) to every coordinate; radii and rotation are left alone."""
        info = SEGMENT_INFO[self.cmd]
        for name in info.x_fields:
            setattr(self, name, getattr(self, name) + dx)
        for name in info.y_fields:
            setattr(self, name, getattr(self, name) + dy)


@dataclass
class MoveTo(_SegmentAccess):
    """``M x y`` - start a new subpath at (x, y)."""

    cmd: ClassVar[PathCommand] = PathCommand.MOVE_TO
    absolute: bool
    x: float
    y: float


@dataclass
class LineTo(_SegmentAccess):
    """``L x y`` - straight line to (x, y)."""

    cmd: ClassVar[PathCommand] = PathCommand.LINE_TO
    absolute: bool
    x: float
    y: float


@dataclass
class HorizontalLineTo(_SegmentAccess):
    """``H x`` - horizontal line to x."""

    cmd: ClassVar[PathCommand] = PathCommand.HORIZONTAL_LINE_TO
    absolute: bool
    x: float


@dataclass
class VerticalLineTo(_SegmentAccess):
    """``V y`` - vertical line to y."""

    cmd: ClassVar[PathCommand] = PathCommand.VERTICAL_LINE_TO
    absolute: bool
    y: float


@dataclass
class CurveTo(_SegmentAccess):
    """``C x1 y1 x2 y2 x y`` - cubic Bezier curve."""

    cmd: ClassVar[PathCommand] = PathCommand.CURVE_TO
    absolute: bool
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass
class SmoothCurveTo(_SegmentAccess):
    """``S x2 y2 x y`` - cubic Bezier curve; the first control point is implied."""

    cmd: ClassVar[PathCommand] = PathCommand.SMOOTH_CURVE_TO
    absolute: bool
    x2: float
    y2: float
    x: float
    y: float


@dataclass
class Quadratic(_SegmentAccess):
    """``Q x1 y1 x y`` - quadratic Bezier curve."""

    cmd: ClassVar[PathCommand] = PathCommand.QUADRATIC
    absolute: bool
    x1: float
    y1: float
    x: float
    y: float


@dataclass
class SmoothQuadratic(_SegmentAccess):
    """``T x y`` - quadratic Bezier curve; the control point is implied."""

    cmd: ClassVar[PathCommand] = PathCommand.SMOOTH_QUADRATIC
    absolute: bool
    x: float
    y: float


@dataclass
class EllipticalArc(_SegmentAccess):
    """``A rx ry x-axis-rotation large-arc sweep x y`` - elliptical arc."""

    cmd: ClassVar[PathCommand] = PathCommand.ELLIPTICAL_ARC
    absolute: bool
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float


@dataclass
class ClosePath(_SegmentAccess):
    """``Z`` - close the current subpath. Carries no coordinates."""

    cmd: ClassVar[PathCommand] = PathCommand.CLOSE_PATH
    absolute: bool = True


AvPathSegment = Union[
    MoveTo,
    LineTo,
    HorizontalLineTo,
    VerticalLineTo,
    CurveTo,
    SmoothCurveTo,
    Quadratic,
    SmoothQuadratic,
    EllipticalArc,
    ClosePath,
]


###############################################################################
# Functions
###############################################################################


def segment_fuzzy_eq(seg: AvPathSegment, other: AvPathSegment) -> bool:
    """Return True if both segments have the same kind, flags and fuzzy-equal coordinates."""
    if seg.cmd is not other.cmd or seg.absolute != other.absolute:
        return False
    if isinstance(seg, EllipticalArc) and isinstance(other, EllipticalArc):
        if seg.large_arc != other.large_arc or seg.sweep != other.sweep:
            return False
    return all(fuzzy_eq(a, b) for a, b in zip(seg.coords(), other.coords()))
