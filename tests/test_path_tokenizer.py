"""Tests for the pull-based path data tokenizer."""

import pytest

from avsvg.errors import (
    AvSvgError,
    InvalidNumberError,
    UnexpectedDataError,
    UnexpectedEndOfStreamError,
)
from avsvg.path_segment import (
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
from avsvg.path_tokenizer import PathTokenizer

###############################################################################
# Helpers
###############################################################################


def tokenize(text):
    """Return (segments, error) for _text_."""
    segments = []
    tokenizer = PathTokenizer(text)
    try:
        for seg in tokenizer:
            segments.append(seg)
    except AvSvgError as exc:
        return segments, exc
    return segments, None


###############################################################################
# Valid data
###############################################################################


class TestTokenizerValid:
    """Tests for well-formed path data."""

    def test_empty(self):
        """Empty and blank data yield nothing."""
        assert list(PathTokenizer("")) == []
        assert list(PathTokenizer("  \n\t")) == []

    def test_move_to(self):
        """Absolute and relative MoveTo."""
        assert list(PathTokenizer("M 10 20")) == [MoveTo(True, 10.0, 20.0)]
        assert list(PathTokenizer("m 10 20")) == [MoveTo(False, 10.0, 20.0)]

    def test_implicit_line_to(self):
        """Extra pairs after a MoveTo are LineTo segments."""
        assert list(PathTokenizer("M 10 20 30 40 50 60")) == [
            MoveTo(True, 10.0, 20.0),
            LineTo(True, 30.0, 40.0),
            LineTo(True, 50.0, 60.0),
        ]

    def test_implicit_line_to_relative(self):
        """Pairs after a relative MoveTo are relative LineTo segments."""
        assert list(PathTokenizer("m 10 20 30 40")) == [
            MoveTo(False, 10.0, 20.0),
            LineTo(False, 30.0, 40.0),
        ]

    def test_implicit_line_to_per_subpath(self):
        """Each MoveTo starts its own implicit LineTo run."""
        assert list(PathTokenizer("M 10 20 30 40 50 60 M 70 80 90 100 110 120")) == [
            MoveTo(True, 10.0, 20.0),
            LineTo(True, 30.0, 40.0),
            LineTo(True, 50.0, 60.0),
            MoveTo(True, 70.0, 80.0),
            LineTo(True, 90.0, 100.0),
            LineTo(True, 110.0, 120.0),
        ]

    def test_repeated_command(self):
        """Other commands repeat with extra values."""
        assert list(PathTokenizer("M 0 0 H 10 20 v 5 -5")) == [
            MoveTo(True, 0.0, 0.0),
            HorizontalLineTo(True, 10.0),
            HorizontalLineTo(True, 20.0),
            VerticalLineTo(False, 5.0),
            VerticalLineTo(False, -5.0),
        ]

    def test_arc(self):
        """Arc flags are parsed as booleans."""
        assert list(PathTokenizer("M 10 20 A 5 5 30 1 1 20 20")) == [
            MoveTo(True, 10.0, 20.0),
            EllipticalArc(True, 5.0, 5.0, 30.0, True, True, 20.0, 20.0),
        ]
        assert list(PathTokenizer("M 10 20 a 5 5 30 0 0 20 20"))[1] == EllipticalArc(
            False, 5.0, 5.0, 30.0, False, False, 20.0, 20.0
        )

    def test_arc_compact(self):
        """Flags need no separator; numbers split at dots and signs."""
        assert list(PathTokenizer("M10-20A5.5.3-4 010-.1")) == [
            MoveTo(True, 10.0, -20.0),
            EllipticalArc(True, 5.5, 0.3, -4.0, False, True, 0.0, -0.1),
        ]

    def test_arc_repeated(self):
        """Arc values repeat like other commands."""
        segments = list(PathTokenizer("M 0 0 a 1 1 0 0 1 2 2 1 1 0 1 0 3 3"))
        assert segments[1:] == [
            EllipticalArc(False, 1.0, 1.0, 0.0, False, True, 2.0, 2.0),
            EllipticalArc(False, 1.0, 1.0, 0.0, True, False, 3.0, 3.0),
        ]

    @pytest.mark.parametrize(
        "text",
        [
            "M 10 20 L 5 15 C 10 20 30 40 50 60",
            "M 10, 20 L 5, 15 C 10, 20 30, 40 50, 60",
            "M 10,20 L 5,15 C 10,20 30,40 50,60",
            "M10, 20 L5, 15 C10, 20 30 40 50 60",
        ],
    )
    def test_separators(self, text):
        """Spaces and commas are interchangeable separators."""
        assert list(PathTokenizer(text)) == [
            MoveTo(True, 10.0, 20.0),
            LineTo(True, 5.0, 15.0),
            CurveTo(True, 10.0, 20.0, 30.0, 40.0, 50.0, 60.0),
        ]

    def test_no_separators(self):
        """Letters separate commands without spaces."""
        assert list(PathTokenizer("M10 20V30H40V50H60Z")) == [
            MoveTo(True, 10.0, 20.0),
            VerticalLineTo(True, 30.0),
            HorizontalLineTo(True, 40.0),
            VerticalLineTo(True, 50.0),
            HorizontalLineTo(True, 60.0),
            ClosePath(True),
        ]

    def test_all_segments_absolute(self):
        """Every absolute command."""
        text = (
            "M 10 20 L 30 40 H 50 V 60 C 70 80 90 100 110 120 S 130 140 150 160\n"
            "        Q 170 180 190 200 T 210 220 A 50 50 30 1 1 230 240 Z"
        )
        assert list(PathTokenizer(text)) == [
            MoveTo(True, 10.0, 20.0),
            LineTo(True, 30.0, 40.0),
            HorizontalLineTo(True, 50.0),
            VerticalLineTo(True, 60.0),
            CurveTo(True, 70.0, 80.0, 90.0, 100.0, 110.0, 120.0),
            SmoothCurveTo(True, 130.0, 140.0, 150.0, 160.0),
            Quadratic(True, 170.0, 180.0, 190.0, 200.0),
            SmoothQuadratic(True, 210.0, 220.0),
            EllipticalArc(True, 50.0, 50.0, 30.0, True, True, 230.0, 240.0),
            ClosePath(True),
        ]

    def test_all_segments_relative(self):
        """Every relative command."""
        text = (
            "m 10 20 l 30 40 h 50 v 60 c 70 80 90 100 110 120 s 130 140 150 160\n"
            "        q 170 180 190 200 t 210 220 a 50 50 30 1 1 230 240 z"
        )
        assert list(PathTokenizer(text)) == [
            MoveTo(False, 10.0, 20.0),
            LineTo(False, 30.0, 40.0),
            HorizontalLineTo(False, 50.0),
            VerticalLineTo(False, 60.0),
            CurveTo(False, 70.0, 80.0, 90.0, 100.0, 110.0, 120.0),
            SmoothCurveTo(False, 130.0, 140.0, 150.0, 160.0),
            Quadratic(False, 170.0, 180.0, 190.0, 200.0),
            SmoothQuadratic(False, 210.0, 220.0),
            EllipticalArc(False, 50.0, 50.0, 30.0, True, True, 230.0, 240.0),
            ClosePath(False),
        ]

    @pytest.mark.parametrize("close", ["Z", "z"])
    def test_close_path_then_move_to(self, close):
        """A MoveTo may directly follow a ClosePath."""
        assert list(PathTokenizer(f"M10 20 L 30 40 {close}M 100 200 L 300 400")) == [
            MoveTo(True, 10.0, 20.0),
            LineTo(True, 30.0, 40.0),
            ClosePath(close == "Z"),
            MoveTo(True, 100.0, 200.0),
            LineTo(True, 300.0, 400.0),
        ]

    def test_repeated_close_path(self):
        """Consecutive ClosePath commands are kept."""
        assert list(PathTokenizer("M10 20 L 30 40 Z Z Z")) == [
            MoveTo(True, 10.0, 20.0),
            LineTo(True, 30.0, 40.0),
            ClosePath(True),
            ClosePath(True),
            ClosePath(True),
        ]

    def test_close_path_then_other_command(self):
        """Any command may follow a ClosePath."""
        assert list(PathTokenizer("M 0 0 Z H 10")) == [
            MoveTo(True, 0.0, 0.0),
            ClosePath(True),
            HorizontalLineTo(True, 10.0),
        ]

    def test_cursor_reports_position(self):
        """The cursor property is a copy of the read position."""
        tokenizer = PathTokenizer("M 10 20 L 30 40")
        next(tokenizer)
        cursor = tokenizer.cursor
        assert cursor.slice_tail() == "L 30 40"
        cursor.jump_to_end()
        assert next(tokenizer) == LineTo(True, 30.0, 40.0)


###############################################################################
# Malformed data
###############################################################################


class TestTokenizerErrors:
    """Tests for malformed path data."""

    @pytest.mark.parametrize("text", ["q", "L 20 30", "10 20", "#"])
    def test_must_start_with_move_to(self, text):
        """Anything but M/m first is unexpected data at position 1."""
        segments, error = tokenize(text)
        assert segments == []
        assert isinstance(error, UnexpectedDataError)
        assert error.pos == 1

    def test_leading_spaces_count_in_position(self):
        """Positions refer to the original text."""
        _, error = tokenize("  L 20 30")
        assert str(error) == "unexpected data at position 3"

    def test_stop_on_error(self):
        """Segments before the error are yielded."""
        segments, error = tokenize("M 10 20 L 30 40 L 50")
        assert segments == [MoveTo(True, 10.0, 20.0), LineTo(True, 30.0, 40.0)]
        assert isinstance(error, UnexpectedEndOfStreamError)

    def test_invalid_number(self):
        """A lone dot is not a number."""
        segments, error = tokenize("M\t.")
        assert segments == []
        assert isinstance(error, InvalidNumberError)
        assert error.pos == 3

    def test_number_after_close_path(self):
        """ClosePath cannot be followed by a number."""
        segments, error = tokenize("M 0 0 Z 2")
        assert segments == [MoveTo(True, 0.0, 0.0), ClosePath(True)]
        assert str(error) == "unexpected data at position 9"

    def test_garbage(self):
        """Unknown characters stop parsing."""
        segments, error = tokenize("M 10 20 L 30 40 #!@$1 L 50 60")
        assert segments == [MoveTo(True, 10.0, 20.0), LineTo(True, 30.0, 40.0)]
        assert isinstance(error, UnexpectedDataError)
        assert error.pos == 17

    @pytest.mark.parametrize(
        "text, pos",
        [
            ("M 10 20 A 5 5 30 2 1 20 20", 18),
            ("M 10 20 A 5 5 30 1 x 20 20", 20),
        ],
    )
    def test_invalid_arc_flag(self, text, pos):
        """Arc flags must be 0 or 1."""
        segments, error = tokenize(text)
        assert segments == [MoveTo(True, 10.0, 20.0)]
        assert isinstance(error, UnexpectedDataError)
        assert error.pos == pos

    def test_exhausted_after_error(self):
        """After an error the tokenizer yields nothing more."""
        tokenizer = PathTokenizer("M 10 20 L x")
        assert next(tokenizer) == MoveTo(True, 10.0, 20.0)
        with pytest.raises(InvalidNumberError):
            next(tokenizer)
        with pytest.raises(StopIteration):
            next(tokenizer)
