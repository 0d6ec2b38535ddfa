"""Central module containing constants and definitions for SVG path data."""

from __future__ import annotations

from enum import Enum, auto
from typing import Literal

###############################################################################
# Types
###############################################################################


AvPathCmds = Literal[  # Type-Definition for SvgPath-Commands; uppercase = absolute; lowercase = relative
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    "m",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    "l",
    # Horizontal LineTo (1) - draw a horizontal line to the given x coordinate
    "H",
    "h",
    # Vertical LineTo (1) - draw a vertical line to the given y coordinate
    "V",
    "v",
    # Cubic Bezier To (6) - two control points and an endpoint (x,y)
    "C",
    "c",
    # Smooth cubic Bezier To (4) - one explicit control point and an endpoint (x,y)
    "S",
    "s",
    # Quadratic Bezier To (4) - one control point and an endpoint (x,y)
    "Q",
    "q",
    # Smooth quadratic Bezier To (2) - endpoint (x,y) only
    "T",
    "t",
    # Arc (7) - (rx ry x-axis-rotation large-arc-flag sweep-flag x y)
    "A",
    "a",
    # ClosePath (0) - close subpath by drawing a line back to the start point
    "Z",
    "z",
]


###############################################################################
# Enums and Consts
###############################################################################


class PathCommand(Enum):
    """Enum of the ten path segment kinds."""

    MOVE_TO = auto()
    LINE_TO = auto()
    HORIZONTAL_LINE_TO = auto()
    VERTICAL_LINE_TO = auto()
    CURVE_TO = auto()
    SMOOTH_CURVE_TO = auto()
    QUADRATIC = auto()
    SMOOTH_QUADRATIC = auto()
    ELLIPTICAL_ARC = auto()
    CLOSE_PATH = auto()


class ListSeparator(Enum):
    """Separator used between the items of a list value."""

    SPACE = " "  # 10 20
    COMMA = ","  # 10,20
    COMMA_SPACE = ", "  # 10, 20


# Command letters (absolute and relative)
SVG_CMDS = "MmLlHhVvCcSsQqTtAaZz"

# Number of decimal digits kept when formatting a non-integral float
FORMAT_PRECISION = 11

# Maximum distance in units-in-the-last-place for two floats to compare fuzzy-equal
FUZZY_ULPS = 4
