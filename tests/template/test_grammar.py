"""Tests for the placeholder directive grammar."""

import pytest

from rtformat.core.errors import InvalidFormatSyntaxError
from rtformat.template.enums import Align
from rtformat.template.enums import Conversion
from rtformat.template.enums import Sign
from rtformat.template.grammar import parse_format_spec
from rtformat.template.grammar import parse_placeholder
from rtformat.template.types import FormatSpec
from rtformat.template.types import ImplicitSelector
from rtformat.template.types import IndirectCount
from rtformat.template.types import LiteralCount
from rtformat.template.types import NamedSelector
from rtformat.template.types import PositionalSelector


class TestArgumentSelectors:
    """Test parsing of the argument part of a placeholder."""

    def test_empty_body_is_implicit(self) -> None:
        """Test that an empty body selects the next implicit argument."""
        assert parse_placeholder("") == FormatSpec()
        assert parse_placeholder("").value == ImplicitSelector()

    def test_positional(self) -> None:
        """Test positional index selector."""
        assert parse_placeholder("12").value == PositionalSelector(index=12)

    def test_named(self) -> None:
        """Test named selector."""
        assert parse_placeholder("foo").value == NamedSelector(name="foo")

    def test_named_with_underscore_and_digits(self) -> None:
        """Test identifiers with underscores and trailing digits."""
        assert parse_placeholder("_leading_1").value == NamedSelector(name="_leading_1")

    def test_named_unicode(self) -> None:
        """Test identifiers in non-latin scripts."""
        assert parse_placeholder("уникод").value == NamedSelector(name="уникод")

    def test_leading_digit_identifier_rejected(self) -> None:
        """Test that '0bar' is neither an index nor a name."""
        with pytest.raises(InvalidFormatSyntaxError) as exc_info:
            parse_placeholder("0bar")
        assert exc_info.value.position == 1

    def test_invalid_character_rejected(self) -> None:
        """Test that punctuation inside a name is rejected."""
        with pytest.raises(InvalidFormatSyntaxError):
            parse_placeholder("invalid/character")

    def test_argument_with_empty_spec(self) -> None:
        """Test that a trailing ':' with no directives is allowed."""
        assert parse_placeholder("0:") == FormatSpec(value=PositionalSelector(index=0))


class TestFormatSpecDirectives:
    """Test parsing of the directives after ':'."""

    @pytest.mark.parametrize(
        ("text", "align"),
        [("<", Align.LEFT), ("^", Align.CENTER), (">", Align.RIGHT)],
    )
    def test_align(self, text: str, align: Align) -> None:
        """Test alignment tokens."""
        assert parse_format_spec(text).align is align

    def test_sign(self) -> None:
        """Test forced sign."""
        assert parse_format_spec("+").sign is Sign.PLUS

    def test_alternate(self) -> None:
        """Test alternate flag."""
        assert parse_format_spec("#").alternate is True

    def test_zero_pad_with_width(self) -> None:
        """Test zero flag followed by a width."""
        spec = parse_format_spec("05")
        assert spec.zero_pad is True
        assert spec.width == LiteralCount(value=5)

    def test_zero_pad_alone(self) -> None:
        """Test zero flag without width."""
        spec = parse_format_spec("0")
        assert spec.zero_pad is True
        assert spec.width is None

    def test_zero_dollar_is_indirect_width(self) -> None:
        """Test that '0$' names argument 0 rather than setting the zero flag."""
        spec = parse_format_spec("0$")
        assert spec.zero_pad is False
        assert spec.width == IndirectCount(selector=PositionalSelector(index=0))

    def test_zero_flag_then_indirect_width(self) -> None:
        """Test that '00$' is the zero flag plus width from argument 0."""
        spec = parse_format_spec("00$")
        assert spec.zero_pad is True
        assert spec.width == IndirectCount(selector=PositionalSelector(index=0))

    def test_literal_width(self) -> None:
        """Test literal width."""
        assert parse_format_spec("42").width == LiteralCount(value=42)

    def test_positional_width(self) -> None:
        """Test width taken from a positional argument."""
        assert parse_format_spec("1$").width == IndirectCount(
            selector=PositionalSelector(index=1)
        )

    def test_named_width(self) -> None:
        """Test width taken from a named argument."""
        assert parse_format_spec("w$").width == IndirectCount(
            selector=NamedSelector(name="w")
        )

    def test_literal_precision(self) -> None:
        """Test literal precision."""
        assert parse_format_spec(".3").precision == LiteralCount(value=3)

    def test_star_precision(self) -> None:
        """Test precision from the next implicit argument."""
        assert parse_format_spec(".*").precision == IndirectCount(
            selector=ImplicitSelector()
        )

    def test_indirect_precision(self) -> None:
        """Test precision taken from positional and named arguments."""
        assert parse_format_spec(".2$").precision == IndirectCount(
            selector=PositionalSelector(index=2)
        )
        assert parse_format_spec(".prec$").precision == IndirectCount(
            selector=NamedSelector(name="prec")
        )

    @pytest.mark.parametrize(
        ("text", "conversion"),
        [
            ("", Conversion.DISPLAY),
            ("?", Conversion.DEBUG),
            ("b", Conversion.BINARY),
            ("o", Conversion.OCTAL),
            ("x", Conversion.LOWER_HEX),
            ("X", Conversion.UPPER_HEX),
            ("e", Conversion.LOWER_EXP),
            ("E", Conversion.UPPER_EXP),
        ],
    )
    def test_conversion(self, text: str, conversion: Conversion) -> None:
        """Test every type token."""
        assert parse_format_spec(text).conversion is conversion

    def test_width_then_type(self) -> None:
        """Test that a width directly followed by a type token parses both."""
        spec = parse_format_spec("8x")
        assert spec.width == LiteralCount(value=8)
        assert spec.conversion is Conversion.LOWER_HEX

    def test_type_letter_named_width(self) -> None:
        """Test that 'x$' is a named width, not a hex conversion."""
        spec = parse_format_spec("x$")
        assert spec.width == IndirectCount(selector=NamedSelector(name="x"))
        assert spec.conversion is Conversion.DISPLAY

    def test_full_spec(self) -> None:
        """Test every directive at once."""
        assert parse_format_spec(">+#042.17E") == FormatSpec(
            align=Align.RIGHT,
            sign=Sign.PLUS,
            alternate=True,
            zero_pad=True,
            width=LiteralCount(value=42),
            precision=LiteralCount(value=17),
            conversion=Conversion.UPPER_EXP,
        )

    def test_full_placeholder(self) -> None:
        """Test argument plus directives."""
        spec = parse_placeholder("name:^w$.*?")
        assert spec.value == NamedSelector(name="name")
        assert spec.align is Align.CENTER
        assert spec.width == IndirectCount(selector=NamedSelector(name="w"))
        assert spec.precision == IndirectCount(selector=ImplicitSelector())
        assert spec.conversion is Conversion.DEBUG


class TestInvalidSyntax:
    """Test grammar violations."""

    @pytest.mark.parametrize(
        "text",
        ["Z", "<<", "+-", "-", ".", ".x", ".name", "5.3.2", "x?", "??", "##", "ee"],
    )
    def test_rejected_specs(self, text: str) -> None:
        """Test directive strings that do not match the grammar."""
        with pytest.raises(InvalidFormatSyntaxError):
            parse_format_spec(text)

    def test_out_of_order_directives(self) -> None:
        """Test that directives must appear in grammar order."""
        with pytest.raises(InvalidFormatSyntaxError) as exc_info:
            parse_format_spec("#+")
        assert exc_info.value.position == 1

    def test_error_carries_offset_and_position(self) -> None:
        """Test that errors report template offset and body position."""
        with pytest.raises(InvalidFormatSyntaxError) as exc_info:
            parse_placeholder(":Z", offset=4)
        error = exc_info.value
        assert error.offset == 4
        assert error.position == 1
        assert error.body == ":Z"
        assert "'Z'" in str(error)

    def test_missing_colon(self) -> None:
        """Test a directive without the ':' separator."""
        with pytest.raises(InvalidFormatSyntaxError) as exc_info:
            parse_placeholder("0>5")
        assert exc_info.value.position == 1
