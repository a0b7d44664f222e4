"""Bound values and the capability contract.

Each runtime argument is bound to a ``BoundValue``: its kind, the closed set of
capabilities it supports, and how it produces display and debug text. The
renderer checks the capability set before rendering anything.
"""

from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
import numbers
import operator
import pprint
from typing import Protocol
from typing import runtime_checkable

from rtformat.template.enums import Capability
from rtformat.template.enums import ValueKind
from rtformat.template.types import FormatSpec

TextFunction = Callable[[FormatSpec], str]
Number = int | float | Decimal

_TEXT_CAPABILITIES = frozenset({Capability.DISPLAY, Capability.DEBUG})

NATURAL_CAPABILITIES: dict[ValueKind, frozenset[Capability]] = {
    ValueKind.INTEGER: frozenset(Capability),
    ValueKind.FLOAT: _TEXT_CAPABILITIES | {Capability.EXPONENTIAL},
    ValueKind.TEXT: _TEXT_CAPABILITIES,
    ValueKind.BOOLEAN: _TEXT_CAPABILITIES,
    ValueKind.OBJECT: _TEXT_CAPABILITIES,
}

_PRETTY_TYPES = (list, tuple, dict, set, frozenset)
_PRETTY_WIDTH = 40


@runtime_checkable
class FormattableValue(Protocol):
    """Protocol for caller-defined values that render themselves.

    The declared capability set is used as is. Display and debug text come
    from the value. For base and exponential conversions, and for use as a
    ``$`` width or precision, the engine asks for a number: ``format_number()``
    when the value defines it, otherwise ``__index__`` and then ``__float__``.
    """

    def format_capabilities(self) -> frozenset[Capability]:
        """Return the capabilities this value supports."""
        ...

    def format_display(self, spec: FormatSpec) -> str:
        """Return the display text of this value."""
        ...

    def format_debug(self, spec: FormatSpec) -> str:
        """Return the debug text of this value."""
        ...


def _display_text(value: object) -> TextFunction:
    return lambda spec: str(value)


def _debug_text(value: object) -> TextFunction:
    def render(spec: FormatSpec) -> str:
        if spec.alternate and isinstance(value, _PRETTY_TYPES):
            return pprint.pformat(value, width=_PRETTY_WIDTH, sort_dicts=False)
        return repr(value)

    return render


@dataclass(frozen=True, slots=True)
class BoundValue:
    """A runtime argument together with its rendering capabilities.

    Attributes:
        value: The raw Python value.
        kind: Value kind deciding numeric treatment.
        capabilities: Conversions this value may be rendered with.
        display: Produces the display text.
        debug: Produces the debug text.

    """

    value: object
    kind: ValueKind
    capabilities: frozenset[Capability]
    display: TextFunction
    debug: TextFunction

    def supports(self, capability: Capability) -> bool:
        """Whether this value may be rendered with the given capability."""
        return capability in self.capabilities

    def as_number(self) -> Number | None:
        """Return the numeric value used by numeric rendering.

        Returns:
            An int for integral values, a float or Decimal for real values,
            or None when the value has no numeric form

        """
        match self.kind:
            case ValueKind.INTEGER:
                return operator.index(self.value)  # type: ignore[arg-type]
            case ValueKind.FLOAT:
                if isinstance(self.value, Decimal):
                    return self.value
                return float(self.value)  # type: ignore[arg-type]
            case ValueKind.OBJECT:
                return _object_number(self.value)
        return None

    def as_count(self) -> int | None:
        """Return the value as a width or precision, or None if unusable."""
        number = self.as_number()
        if isinstance(number, int) and number >= 0:
            return number
        return None


def _object_number(value: object) -> Number | None:
    format_number = getattr(value, "format_number", None)
    if callable(format_number):
        number = format_number()
        if isinstance(number, bool) or not isinstance(number, int | float | Decimal):
            return None
        return number
    if hasattr(value, "__index__"):
        return operator.index(value)  # type: ignore[arg-type]
    if hasattr(value, "__float__"):
        return float(value)  # type: ignore[arg-type]
    return None


def bind(
    value: object, capabilities: Iterable[Capability] | None = None
) -> BoundValue:
    """Bind a Python value, classifying its kind and capabilities.

    Args:
        value: Value to bind; an existing BoundValue is returned as is
            (narrowed when capabilities are given)
        capabilities: Optional subset to restrict the natural capabilities to

    Returns:
        The bound value

    """
    if isinstance(value, BoundValue):
        bound = value
    elif isinstance(value, FormattableValue):
        bound = BoundValue(
            value=value,
            kind=ValueKind.OBJECT,
            capabilities=frozenset(value.format_capabilities()),
            display=value.format_display,
            debug=value.format_debug,
        )
    else:
        kind = classify(value)
        bound = BoundValue(
            value=value,
            kind=kind,
            capabilities=NATURAL_CAPABILITIES[kind],
            display=_display_text(value),
            debug=_debug_text(value),
        )

    if capabilities is None:
        return bound
    return BoundValue(
        value=bound.value,
        kind=bound.kind,
        capabilities=bound.capabilities & frozenset(capabilities),
        display=bound.display,
        debug=bound.debug,
    )


def classify(value: object) -> ValueKind:
    """Return the kind a plain Python value binds as.

    Integral and real numbers are recognized through the ``numbers`` ABCs, so
    ``fractions.Fraction`` and registered third-party scalars are numeric.
    """
    match value:
        case bool():
            return ValueKind.BOOLEAN
        case numbers.Integral():
            return ValueKind.INTEGER
        case Decimal() | numbers.Real():
            return ValueKind.FLOAT
        case str():
            return ValueKind.TEXT
    return ValueKind.OBJECT
