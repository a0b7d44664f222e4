"""Numeric and text rendering of bound values.

The renderer produces unpadded text split into sign, base prefix and body so
the assembler can place zero padding between them. Rounding for a fixed
precision is half-to-even on the exact value of the number, which for floats
is the exact binary value (``0.125`` at precision 2 gives ``0.12``). Display
of a float never switches to exponent notation.
"""

from decimal import MAX_EMAX
from decimal import MAX_PREC
from decimal import MIN_EMIN
from decimal import ROUND_HALF_EVEN
from decimal import Context
from decimal import Decimal
from decimal import localcontext
import math
from typing import NamedTuple

from rtformat.core.errors import UnsupportedConversionError
from rtformat.render.values import BoundValue
from rtformat.template.enums import Conversion
from rtformat.template.enums import Sign
from rtformat.template.enums import ValueKind
from rtformat.template.types import FormatSpec

_BASES = {
    Conversion.BINARY: ("b", "0b"),
    Conversion.OCTAL: ("o", "0o"),
    Conversion.LOWER_HEX: ("x", "0x"),
    Conversion.UPPER_HEX: ("X", "0x"),
}
_EXPONENT_MARKERS = {Conversion.LOWER_EXP: "e", Conversion.UPPER_EXP: "E"}
_TEXT_CONVERSIONS = (Conversion.DISPLAY, Conversion.DEBUG)
_TEXT_KINDS = (ValueKind.TEXT, ValueKind.BOOLEAN, ValueKind.OBJECT)
_DECIMAL_CONTEXT = Context(
    prec=MAX_PREC, rounding=ROUND_HALF_EVEN, Emax=MAX_EMAX, Emin=MIN_EMIN
)


class RenderedValue(NamedTuple):
    """Unpadded rendering of one value.

    Attributes:
        sign: "-", "+" or empty; never truncated or counted as padding.
        prefix: Base prefix such as "0x", kept with the sign.
        body: Digits or text.
        numeric: Whether right alignment applies by default.
        finite: False for "inf" and "nan", which are never zero padded.

    """

    sign: str
    prefix: str
    body: str
    numeric: bool
    finite: bool = True

    @property
    def text(self) -> str:
        """The complete unpadded text."""
        return f"{self.sign}{self.prefix}{self.body}"


def render_value(
    value: BoundValue,
    spec: FormatSpec,
    precision: int | None,
    *,
    offset: int | None = None,
) -> RenderedValue:
    """Render a value under a spec's conversion, sign and alternate flags.

    Args:
        value: Bound value to render
        spec: Placeholder spec
        precision: Resolved precision, or None
        offset: Template offset reported in errors

    Returns:
        The unpadded rendering

    Raises:
        UnsupportedConversionError: When the value lacks the capability the
            conversion needs, or has no numeric form for a numeric conversion

    """
    conversion = spec.conversion
    if value.supports(conversion.capability):
        if conversion in _TEXT_CONVERSIONS and value.kind in _TEXT_KINDS:
            return _render_text(value, spec, precision)
        match value.as_number():
            case int() as number:
                return _render_integer(number, spec, precision)
            case float() | Decimal() as number if conversion not in _BASES:
                return _render_float(number, spec, precision)
    raise UnsupportedConversionError(conversion, value.kind, offset=offset)


def _render_text(
    value: BoundValue, spec: FormatSpec, precision: int | None
) -> RenderedValue:
    if spec.conversion is Conversion.DEBUG:
        text = value.debug(spec)
    else:
        text = value.display(spec)
    if precision is not None:
        text = text[:precision]
    return RenderedValue("", "", text, numeric=False)


def _sign(negative: bool, spec: FormatSpec) -> str:
    if negative:
        return "-"
    return "+" if spec.sign is Sign.PLUS else ""


def _render_integer(
    number: int, spec: FormatSpec, precision: int | None
) -> RenderedValue:
    sign = _sign(number < 0, spec)
    magnitude = abs(number)
    conversion = spec.conversion
    if conversion in _BASES:
        code, prefix = _BASES[conversion]
        prefix = prefix if spec.alternate else ""
        return RenderedValue(sign, prefix, format(magnitude, code), numeric=True)
    if conversion in _EXPONENT_MARKERS:
        body = scientific(Decimal(magnitude), precision, _EXPONENT_MARKERS[conversion])
        return RenderedValue(sign, "", body, numeric=True)
    # Precision does not apply to integer display.
    return RenderedValue(sign, "", str(magnitude), numeric=True)


def _render_float(
    number: float | Decimal, spec: FormatSpec, precision: int | None
) -> RenderedValue:
    if isinstance(number, Decimal):
        finite = number.is_finite()
        nan = number.is_nan()
        negative = number.is_signed() and not nan
        magnitude = number.copy_abs()
        exact = magnitude
    else:
        finite = math.isfinite(number)
        nan = math.isnan(number)
        negative = math.copysign(1.0, number) < 0 and not nan
        magnitude = abs(number)
        if precision is None:
            exact = Decimal(repr(magnitude))
        else:
            exact = Decimal(magnitude)

    sign = "" if nan else _sign(negative, spec)
    conversion = spec.conversion
    if not finite:
        body = "nan" if nan else "inf"
        return RenderedValue(sign, "", body, numeric=True, finite=False)
    if conversion in _EXPONENT_MARKERS:
        body = scientific(exact, precision, _EXPONENT_MARKERS[conversion])
    elif precision is None:
        body = _format_decimal(exact, "f")
    elif isinstance(magnitude, Decimal):
        body = _format_decimal(magnitude, f".{precision}f")
    else:
        body = format(magnitude, f".{precision}f")
    return RenderedValue(sign, "", body, numeric=True)


def scientific(number: Decimal, precision: int | None, marker: str) -> str:
    """Render a non-negative finite decimal in scientific notation.

    The exponent has no '+' and no leading zeros, e.g. ``4.2e1`` or ``1e-3``.
    Without a precision the mantissa keeps exactly the significant digits of
    ``number``.

    Args:
        number: Non-negative finite value
        precision: Fraction digits of the mantissa, or None
        marker: Exponent marker, "e" or "E"

    Returns:
        The scientific rendering

    """
    if number.is_zero():
        fraction = "." + "0" * precision if precision else ""
        return f"0{fraction}{marker}0"
    if precision is not None:
        rendered = _format_decimal(number, f".{precision}e")
        mantissa, _, exponent = rendered.partition("e")
        return f"{mantissa}{marker}{int(exponent)}"

    _, digits, exponent = number.as_tuple()
    power = int(exponent) + len(digits) - 1
    significant = "".join(str(d) for d in digits).rstrip("0")
    mantissa = significant[0]
    if len(significant) > 1:
        mantissa += "." + significant[1:]
    return f"{mantissa}{marker}{power}"


def _format_decimal(number: Decimal, format_spec: str) -> str:
    """Format a Decimal with half-to-even rounding, whatever the caller's context."""
    with localcontext(_DECIMAL_CONTEXT):
        return format(number, format_spec)
