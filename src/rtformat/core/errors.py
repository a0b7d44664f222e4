"""Exceptions raised by the runtime formatter.

Every failure of a formatting call is reported as a ``FormatError`` subclass.
Errors are terminal for the call: no partial output is returned.
"""

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rtformat.template.enums import Conversion
    from rtformat.template.enums import ValueKind
    from rtformat.template.types import ArgumentSelector


class ErrorKind(StrEnum):
    """Discriminator for formatting failures."""

    UNTERMINATED_PLACEHOLDER = "unterminated_placeholder"
    UNMATCHED_CLOSING_BRACE = "unmatched_closing_brace"
    INVALID_FORMAT_SYNTAX = "invalid_format_syntax"
    MISSING_ARGUMENT = "missing_argument"
    IMPLICIT_ARGUMENT_EXHAUSTED = "implicit_argument_exhausted"
    UNSUPPORTED_CONVERSION = "unsupported_conversion"
    INVALID_COUNT = "invalid_count"
    UNUSED_ARGUMENT = "unused_argument"


class FormatError(Exception):
    """Base exception for runtime formatting errors.

    Attributes:
        kind: Which failure occurred.
        offset: Character index into the template of the failing placeholder's
            opening brace (or of the offending brace for tokenizer errors).
            None when the error is not tied to a single placeholder.

    """

    kind: ErrorKind

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        """Initialize with a message and template offset."""
        self.message = message
        self.offset = offset
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message, prefixed with the offset when known."""
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset {self.offset})"


class UnterminatedPlaceholderError(FormatError):
    """Raised when a '{' has no matching '}'."""

    kind = ErrorKind.UNTERMINATED_PLACEHOLDER

    def __init__(self, *, offset: int) -> None:
        """Initialize with the offset of the opening brace."""
        super().__init__("Unterminated placeholder", offset=offset)


class UnmatchedClosingBraceError(FormatError):
    """Raised when an unescaped '}' appears outside a placeholder."""

    kind = ErrorKind.UNMATCHED_CLOSING_BRACE

    def __init__(self, *, offset: int) -> None:
        """Initialize with the offset of the stray brace."""
        super().__init__("Unmatched closing brace", offset=offset)


class InvalidFormatSyntaxError(FormatError):
    """Raised when a placeholder body does not match the directive grammar.

    Attributes:
        position: Character index inside the placeholder body where parsing
            stopped.
        body: The placeholder body text.

    """

    kind = ErrorKind.INVALID_FORMAT_SYNTAX

    def __init__(
        self, detail: str, *, body: str, position: int, offset: int | None = None
    ) -> None:
        """Initialize with the failing body and position within it."""
        self.body = body
        self.position = position
        super().__init__(
            f"Invalid format syntax in {{{body}}} at position {position}: {detail}",
            offset=offset,
        )


class MissingArgumentError(FormatError, KeyError):
    """Raised when a positional index is out of range or a name is unbound."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(
        self, selector: "ArgumentSelector", *, offset: int | None = None
    ) -> None:
        """Initialize with the selector that could not be resolved."""
        self.selector = selector
        super().__init__(f"Missing argument {selector.describe()}", offset=offset)


class ImplicitArgumentExhaustedError(FormatError):
    """Raised when an implicit argument is requested after all were consumed."""

    kind = ErrorKind.IMPLICIT_ARGUMENT_EXHAUSTED

    def __init__(
        self,
        selector: "ArgumentSelector",
        *,
        consumed: int,
        offset: int | None = None,
    ) -> None:
        """Initialize with the selector and how many arguments were consumed."""
        self.selector = selector
        self.consumed = consumed
        super().__init__(
            f"No positional argument left for implicit placeholder "
            f"({consumed} already consumed)",
            offset=offset,
        )


class UnsupportedConversionError(FormatError):
    """Raised when a value does not support the requested conversion."""

    kind = ErrorKind.UNSUPPORTED_CONVERSION

    def __init__(
        self,
        conversion: "Conversion",
        value_kind: "ValueKind",
        *,
        offset: int | None = None,
    ) -> None:
        """Initialize with the conversion and the kind of value it failed on."""
        self.conversion = conversion
        self.value_kind = value_kind
        super().__init__(
            f"Conversion {conversion.label} is not supported by "
            f"{value_kind.value} value",
            offset=offset,
        )


class InvalidCountError(FormatError):
    """Raised when a width or precision is not a usable count.

    Attributes:
        selector: Selector of the count argument, or None for a count written
            in the template.
        value: The offending value.

    """

    kind = ErrorKind.INVALID_COUNT

    def __init__(
        self,
        selector: "ArgumentSelector | None",
        value: object,
        reason: str,
        *,
        offset: int | None = None,
    ) -> None:
        """Initialize with the count selector, its value and the reason."""
        self.selector = selector
        self.value = value
        source = "literal count"
        if selector is not None:
            source = f"argument {selector.describe()}"
        super().__init__(
            f"Invalid count {value!r} from {source}: {reason}", offset=offset
        )


class UnusedArgumentError(FormatError):
    """Raised in strict mode when arguments are supplied but never used."""

    kind = ErrorKind.UNUSED_ARGUMENT

    def __init__(self, positions: list[int], names: list[str]) -> None:
        """Initialize with the unused positional indices and names."""
        self.positions = positions
        self.names = names
        parts = []
        if positions:
            parts.append(f"positions: {', '.join(str(p) for p in positions)}")
        if names:
            parts.append(f"names: {', '.join(names)}")
        super().__init__(f"Unused arguments ({'; '.join(parts)})")
