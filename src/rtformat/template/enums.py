"""Type-safe enumerations for format directives and value capabilities."""

from enum import StrEnum


class Align(StrEnum):
    """Explicit alignment of a padded placeholder."""

    LEFT = "<"
    CENTER = "^"
    RIGHT = ">"


class Sign(StrEnum):
    """Sign display directive."""

    PLUS = "+"


class Capability(StrEnum):
    """Rendering capabilities a bound value may declare."""

    DISPLAY = "display"
    DEBUG = "debug"
    BINARY = "binary"
    OCTAL = "octal"
    HEX = "hex"
    EXPONENTIAL = "exponential"


class Conversion(StrEnum):
    """Conversion type of a placeholder; values are the template type tokens."""

    DISPLAY = ""
    DEBUG = "?"
    BINARY = "b"
    OCTAL = "o"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    LOWER_EXP = "e"
    UPPER_EXP = "E"

    @property
    def capability(self) -> Capability:
        """Capability a value needs to be rendered with this conversion."""
        return _CONVERSION_CAPABILITIES[self]

    @property
    def label(self) -> str:
        """Human readable name used in error messages."""
        return self.name.lower()


_CONVERSION_CAPABILITIES = {
    Conversion.DISPLAY: Capability.DISPLAY,
    Conversion.DEBUG: Capability.DEBUG,
    Conversion.BINARY: Capability.BINARY,
    Conversion.OCTAL: Capability.OCTAL,
    Conversion.LOWER_HEX: Capability.HEX,
    Conversion.UPPER_HEX: Capability.HEX,
    Conversion.LOWER_EXP: Capability.EXPONENTIAL,
    Conversion.UPPER_EXP: Capability.EXPONENTIAL,
}


class ValueKind(StrEnum):
    """Kind of a bound value, deciding numeric treatment and defaults."""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOLEAN = "boolean"
    OBJECT = "object"

    @property
    def is_numeric(self) -> bool:
        """Whether values of this kind take signs and zero padding."""
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)


class SelectorKind(StrEnum):
    """Discriminator for argument selectors."""

    IMPLICIT = "implicit"
    POSITIONAL = "positional"
    NAMED = "named"


class CountKind(StrEnum):
    """Discriminator for width and precision counts."""

    LITERAL = "literal"
    INDIRECT = "indirect"


class SegmentKind(StrEnum):
    """Discriminator for template segments."""

    LITERAL = "literal"
    PLACEHOLDER = "placeholder"
