"""Tests for rendering parsed models back to template text."""

import pytest

from rtformat.template.enums import Align
from rtformat.template.enums import Conversion
from rtformat.template.enums import Sign
from rtformat.template.grammar import parse_format_spec
from rtformat.template.tokenizer import tokenize
from rtformat.template.types import FormatSpec
from rtformat.template.types import ImplicitSelector
from rtformat.template.types import IndirectCount
from rtformat.template.types import LiteralCount
from rtformat.template.types import NamedSelector
from rtformat.template.types import PositionalSelector


class TestFormatSpecText:
    """Test str() of FormatSpec."""

    def test_default_is_empty(self) -> None:
        """Test that the default spec has no directive text."""
        assert str(FormatSpec()) == ""

    def test_sign_alternate_octal(self) -> None:
        """Test sign, alternate and conversion together."""
        spec = FormatSpec(sign=Sign.PLUS, alternate=True, conversion=Conversion.OCTAL)
        assert str(spec) == "+#o"

    def test_center_zero_width_precision(self) -> None:
        """Test alignment, zero flag, width and precision together."""
        spec = FormatSpec(
            align=Align.CENTER,
            zero_pad=True,
            width=LiteralCount(value=42),
            precision=LiteralCount(value=17),
            conversion=Conversion.UPPER_EXP,
        )
        assert str(spec) == "^042.17E"

    def test_indirect_counts(self) -> None:
        """Test indirect width and precision."""
        spec = FormatSpec(
            width=IndirectCount(selector=PositionalSelector(index=1)),
            precision=IndirectCount(selector=ImplicitSelector()),
        )
        assert str(spec) == "1$.*"

    def test_placeholder_text(self) -> None:
        """Test the complete placeholder including the argument."""
        assert FormatSpec().placeholder() == "{}"
        assert FormatSpec(value=NamedSelector(name="x")).placeholder() == "{x}"
        spec = FormatSpec(
            value=PositionalSelector(index=0), conversion=Conversion.DEBUG
        )
        assert spec.placeholder() == "{0:?}"

    @pytest.mark.parametrize(
        "text", ["", "?", "<5", "+#010x", ">w$.p$e", "^1$.*?", "00$", ".0"]
    )
    def test_parse_then_str(self, text: str) -> None:
        """Test that canonical directive text survives parsing."""
        assert str(parse_format_spec(text)) == text


class TestTemplateText:
    """Test str() and helpers of Template."""

    def test_canonical_template(self) -> None:
        """Test re-emitting a template with escapes and placeholders."""
        template = tokenize("{{x}} {0:>4} {name:.w$} {}")
        assert str(template) == "{{x}} {0:>4} {name:.w$} {}"

    def test_argument_names(self) -> None:
        """Test names referenced as values and counts."""
        template = tokenize("{a} {:w$} {0:.p$} {b:c$}")
        assert template.argument_names() == {"a", "w", "p", "b", "c"}

    def test_indirect_selectors_order(self) -> None:
        """Test that width comes before precision."""
        spec = parse_format_spec("w$.p$")
        assert spec.indirect_selectors() == [
            NamedSelector(name="w"),
            NamedSelector(name="p"),
        ]
