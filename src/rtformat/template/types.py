"""Structured models for parsed templates.

A template is an ordered sequence of literal and placeholder segments. Each
placeholder carries a ``FormatSpec`` describing which argument to format and
how. All models are frozen and render back to template text with ``str()``.
"""

from typing import Annotated
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from rtformat.template.enums import Align
from rtformat.template.enums import Conversion
from rtformat.template.enums import CountKind
from rtformat.template.enums import SegmentKind
from rtformat.template.enums import SelectorKind
from rtformat.template.enums import Sign


class ImplicitSelector(BaseModel):
    """Consume the next unused positional argument."""

    model_config = {"frozen": True}

    kind: Literal[SelectorKind.IMPLICIT] = SelectorKind.IMPLICIT

    def describe(self) -> str:
        """Describe the selector for error messages."""
        return "<next>"

    def __str__(self) -> str:
        """Return the selector as written in a template."""
        return ""


class PositionalSelector(BaseModel):
    """Select a positional argument by index."""

    model_config = {"frozen": True}

    kind: Literal[SelectorKind.POSITIONAL] = SelectorKind.POSITIONAL
    index: int = Field(ge=0)

    def describe(self) -> str:
        """Describe the selector for error messages."""
        return f"#{self.index}"

    def __str__(self) -> str:
        """Return the selector as written in a template."""
        return str(self.index)


class NamedSelector(BaseModel):
    """Select an argument from the name table."""

    model_config = {"frozen": True}

    kind: Literal[SelectorKind.NAMED] = SelectorKind.NAMED
    name: str = Field(min_length=1)

    def describe(self) -> str:
        """Describe the selector for error messages."""
        return f"'{self.name}'"

    def __str__(self) -> str:
        """Return the selector as written in a template."""
        return self.name


ArgumentSelector = Annotated[
    ImplicitSelector | PositionalSelector | NamedSelector,
    Field(discriminator="kind"),
]


class LiteralCount(BaseModel):
    """A width or precision written directly in the template."""

    model_config = {"frozen": True}

    kind: Literal[CountKind.LITERAL] = CountKind.LITERAL
    value: int = Field(ge=0)

    def __str__(self) -> str:
        """Return the count as written in a template."""
        return str(self.value)


class IndirectCount(BaseModel):
    """A width or precision supplied by another argument.

    An implicit selector is only produced by the ``.*`` precision form.
    """

    model_config = {"frozen": True}

    kind: Literal[CountKind.INDIRECT] = CountKind.INDIRECT
    selector: ArgumentSelector

    def __str__(self) -> str:
        """Return the count as written in a template."""
        if isinstance(self.selector, ImplicitSelector):
            return "*"
        return f"{self.selector}$"


Count = Annotated[LiteralCount | IndirectCount, Field(discriminator="kind")]


class FormatSpec(BaseModel):
    """Parsed form of one placeholder.

    Attributes:
        value: Selector of the argument to format.
        align: Explicit alignment, or None for the type-dependent default
            (numbers right, everything else left).
        sign: Forced sign display for non-negative numbers.
        alternate: Base prefixes and pretty debug output.
        zero_pad: Pad numbers with zeros between sign and digits.
        width: Minimum width of the rendered placeholder.
        precision: Fraction digits for floats, maximum length for text.
        conversion: Which rendering to use.

    """

    model_config = {"frozen": True}

    value: ArgumentSelector = Field(default_factory=ImplicitSelector)
    align: Align | None = None
    sign: Sign | None = None
    alternate: bool = False
    zero_pad: bool = False
    width: Count | None = None
    precision: Count | None = None
    conversion: Conversion = Conversion.DISPLAY

    def indirect_selectors(self) -> list[ArgumentSelector]:
        """Return count selectors in resolution order (width, then precision)."""
        return [
            count.selector
            for count in (self.width, self.precision)
            if isinstance(count, IndirectCount)
        ]

    def placeholder(self) -> str:
        """Render the complete placeholder, braces included."""
        directives = str(self)
        if directives:
            return f"{{{self.value}:{directives}}}"
        return f"{{{self.value}}}"

    def __str__(self) -> str:
        """Render the directive text that follows ':' in a placeholder."""
        parts = [
            self.align.value if self.align else "",
            self.sign.value if self.sign else "",
            "#" if self.alternate else "",
            "0" if self.zero_pad else "",
            str(self.width) if self.width is not None else "",
            f".{self.precision}" if self.precision is not None else "",
            self.conversion.value,
        ]
        return "".join(parts)


class LiteralSegment(BaseModel):
    """A run of literal text, with escapes already decoded."""

    model_config = {"frozen": True}

    kind: Literal[SegmentKind.LITERAL] = SegmentKind.LITERAL
    text: str

    def __str__(self) -> str:
        """Return the text with braces re-escaped."""
        return self.text.replace("{", "{{").replace("}", "}}")


class PlaceholderSegment(BaseModel):
    """A placeholder and the offset of its opening brace in the template."""

    model_config = {"frozen": True}

    kind: Literal[SegmentKind.PLACEHOLDER] = SegmentKind.PLACEHOLDER
    spec: FormatSpec
    offset: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        """Return the placeholder as written in a template."""
        return self.spec.placeholder()


Segment = Annotated[
    LiteralSegment | PlaceholderSegment, Field(discriminator="kind")
]


class Template(BaseModel):
    """An immutable, parsed template."""

    model_config = {"frozen": True}

    segments: tuple[Segment, ...] = ()

    @property
    def placeholders(self) -> list[PlaceholderSegment]:
        """Placeholder segments in template order."""
        return [s for s in self.segments if isinstance(s, PlaceholderSegment)]

    def argument_names(self) -> set[str]:
        """Names referenced by any placeholder, as value or count."""
        names = set()
        for placeholder in self.placeholders:
            spec = placeholder.spec
            for selector in [*spec.indirect_selectors(), spec.value]:
                if isinstance(selector, NamedSelector):
                    names.add(selector.name)
        return names

    def __str__(self) -> str:
        """Re-emit the template in canonical form."""
        return "".join(str(segment) for segment in self.segments)
