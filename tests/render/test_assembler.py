"""Tests for padding and alignment."""

import pytest

from rtformat.render.assembler import pad
from rtformat.render.assembler import write_padded
from rtformat.render.renderer import RenderedValue
from rtformat.template.enums import Align

NUMBER = RenderedValue("-", "", "3", numeric=True)
HEX = RenderedValue("", "0x", "2a", numeric=True)
TEXT = RenderedValue("", "", "x", numeric=False)


class TestPad:
    """Test padding rules."""

    def test_no_width(self) -> None:
        """Test that no width means no padding."""
        assert pad(NUMBER, None, None, False) == "-3"

    def test_zero_width(self) -> None:
        """Test that width zero adds nothing."""
        assert pad(TEXT, 0, Align.CENTER, False) == "x"

    def test_width_not_exceeding_length(self) -> None:
        """Test that a width at or under the length adds nothing."""
        assert pad(NUMBER, 2, None, True) == "-3"

    def test_numeric_defaults_right(self) -> None:
        """Test the default alignment of numbers."""
        assert pad(NUMBER, 5, None, False) == "   -3"

    def test_text_defaults_left(self) -> None:
        """Test the default alignment of text."""
        assert pad(TEXT, 4, None, False) == "x   "

    @pytest.mark.parametrize(
        ("align", "expected"),
        [(Align.LEFT, "x   "), (Align.RIGHT, "   x"), (Align.CENTER, " x  ")],
    )
    def test_explicit_alignment(self, align: Align, expected: str) -> None:
        """Test every alignment, with the odd space of centering on the right."""
        assert pad(TEXT, 4, align, False) == expected

    def test_center_even(self) -> None:
        """Test centering with even padding."""
        rendered = RenderedValue("", "", "42", numeric=True)
        assert pad(rendered, 6, Align.CENTER, False) == (
            "  42  "
        )

    def test_zero_pad_after_sign(self) -> None:
        """Test that zeros go between the sign and the digits."""
        assert pad(NUMBER, 5, None, True) == "-0003"

    def test_zero_pad_after_prefix(self) -> None:
        """Test that zeros go between the base prefix and the digits."""
        assert pad(HEX, 6, None, True) == "0x002a"

    def test_zero_pad_overrides_alignment(self) -> None:
        """Test that zero padding ignores an explicit alignment."""
        assert pad(NUMBER, 5, Align.LEFT, True) == "-0003"

    def test_zero_pad_ignored_for_text(self) -> None:
        """Test that text is padded with spaces even with the zero flag."""
        assert pad(TEXT, 3, None, True) == "x  "

    def test_zero_pad_ignored_for_non_finite(self) -> None:
        """Test that infinities are padded with spaces even with the zero flag."""
        infinity = RenderedValue("-", "", "inf", numeric=True, finite=False)
        assert pad(infinity, 6, None, True) == "  -inf"
        assert pad(infinity, 6, Align.LEFT, True) == "-inf  "


class TestWritePadded:
    """Test appending to the output buffer."""

    def test_appends(self) -> None:
        """Test that padded text is appended in place."""
        buffer = ["a"]
        write_padded(buffer, TEXT, 3, Align.RIGHT, False)
        assert buffer == ["a", "  x"]
