"""Formatting calls: bind a template to runtime arguments, then render.

A call runs in two phases. Binding walks the placeholders left to right and
resolves every selector to a concrete value or count; for each placeholder the
width is resolved first, then the precision, then the value, so ``{:.*}``
takes its precision from the argument before its value. Rendering then turns
each bound placeholder into padded text. Nothing is cached between calls.
"""

from collections.abc import Mapping
from collections.abc import Sequence
import hashlib
import logging
import time
from typing import NamedTuple

from opentelemetry import trace

from rtformat.core.config import FormatConfig
from rtformat.core.errors import FormatError
from rtformat.core.errors import UnsupportedConversionError
from rtformat.core.errors import UnusedArgumentError
from rtformat.render.assembler import write_padded
from rtformat.render.renderer import render_value
from rtformat.render.resolver import ArgumentResolver
from rtformat.render.resolver import Arguments
from rtformat.render.values import BoundValue
from rtformat.template.tokenizer import tokenize
from rtformat.template.types import FormatSpec
from rtformat.template.types import LiteralSegment
from rtformat.template.types import Template

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class BoundPlaceholder(NamedTuple):
    """A placeholder with all of its selectors resolved."""

    spec: FormatSpec
    value: BoundValue
    width: int | None
    precision: int | None
    offset: int


class ParsedFormat:
    """A template bound to one argument list, ready to render.

    ``str()`` renders it.
    """

    def __init__(
        self, template: Template, pieces: list[str | BoundPlaceholder]
    ) -> None:
        """Initialize with the template and its bound pieces."""
        self.template = template
        self.pieces = pieces

    def render(self) -> str:
        """Render every piece into a single string.

        Returns:
            The formatted text

        Raises:
            UnsupportedConversionError: When a value cannot be rendered with its
                placeholder's conversion

        """
        buffer: list[str] = []
        for piece in self.pieces:
            if isinstance(piece, str):
                buffer.append(piece)
                continue
            rendered = render_value(
                piece.value, piece.spec, piece.precision, offset=piece.offset
            )
            write_padded(
                buffer, rendered, piece.width, piece.spec.align, piece.spec.zero_pad
            )
        return "".join(buffer)

    def __str__(self) -> str:
        """Render the bound template."""
        return self.render()


class RuntimeFormatter:
    """Format templates supplied at runtime against runtime arguments."""

    def __init__(self, config: FormatConfig | None = None) -> None:
        """Initialize the formatter.

        Args:
            config: Optional configuration; defaults to FormatConfig()

        """
        self.config = config or FormatConfig()

    def parse(self, template: str | Template) -> Template:
        """Parse template text, passing an already parsed Template through."""
        if isinstance(template, Template):
            return template
        return tokenize(template)

    def bind(
        self,
        template: str | Template,
        args: Sequence[object] = (),
        kwargs: Mapping[str, object] | None = None,
    ) -> ParsedFormat:
        """Resolve every placeholder of a template against the arguments.

        Args:
            template: Template text or parsed Template
            args: Positional arguments
            kwargs: Name table

        Returns:
            The bound template

        Raises:
            FormatError: On any syntax, resolution or capability failure

        """
        parsed = self.parse(template)
        resolver = ArgumentResolver(
            Arguments(args, kwargs), max_count=self.config.max_count
        )
        pieces: list[str | BoundPlaceholder] = []
        for segment in parsed.segments:
            if isinstance(segment, LiteralSegment):
                pieces.append(segment.text)
                continue
            spec, offset = segment.spec, segment.offset
            width = resolver.resolve_count(spec.width, offset=offset)
            precision = resolver.resolve_count(spec.precision, offset=offset)
            value = resolver.resolve(spec.value, offset=offset)
            if not value.supports(spec.conversion.capability):
                raise UnsupportedConversionError(
                    spec.conversion, value.kind, offset=offset
                )
            pieces.append(BoundPlaceholder(spec, value, width, precision, offset))

        if self.config.require_all_arguments:
            positions = resolver.unused_positions()
            names = resolver.unused_names()
            if positions or names:
                raise UnusedArgumentError(positions, names)
        return ParsedFormat(parsed, pieces)

    def vformat(
        self,
        template: str | Template,
        args: Sequence[object] = (),
        kwargs: Mapping[str, object] | None = None,
    ) -> str:
        """Format a template with a positional list and a name table.

        Args:
            template: Template text or parsed Template
            args: Positional arguments
            kwargs: Name table

        Returns:
            The formatted text

        Raises:
            TypeError: When template is neither str nor Template
            FormatError: On any syntax, resolution or capability failure

        """
        if not self.config.trace_calls:
            return self.bind(template, args, kwargs).render()

        with tracer.start_as_current_span("rtformat.format") as span:
            start_time = time.perf_counter()
            span.set_attribute("rtformat.template_hash", _hash_template(template))
            span.set_attribute("rtformat.positional_count", len(args))
            span.set_attribute("rtformat.named_count", len(kwargs) if kwargs else 0)
            try:
                bound = self.bind(template, args, kwargs)
                span.set_attribute(
                    "rtformat.placeholder_count", len(bound.template.placeholders)
                )
                result = bound.render()
            except FormatError as e:
                span.set_attribute("rtformat.error_kind", e.kind.value)
                logger.debug("Formatting failed: %s", e)
                raise

            render_ms = (time.perf_counter() - start_time) * 1000
            span.set_attribute("rtformat.render_ms", render_ms)
            span.set_attribute("rtformat.result_length", len(result))
            logger.debug("Formatted %d characters in %.3f ms", len(result), render_ms)
            return result

    def format(
        self, template: str | Template, /, *args: object, **kwargs: object
    ) -> str:
        """Format a template with positional and keyword arguments."""
        return self.vformat(template, args, kwargs)


def _hash_template(template: object) -> str:
    """Generate hash of template for telemetry."""
    template_str = str(template)[:500]
    return hashlib.sha256(template_str.encode()).hexdigest()[:16]


_default_formatter = RuntimeFormatter()


def vformat(
    template: str | Template,
    args: Sequence[object] = (),
    kwargs: Mapping[str, object] | None = None,
) -> str:
    """Format a template with the default formatter.

    Args:
        template: Template text or parsed Template
        args: Positional arguments
        kwargs: Name table

    Returns:
        The formatted text

    """
    return _default_formatter.vformat(template, args, kwargs)


def format_string(template: str | Template, /, *args: object, **kwargs: object) -> str:
    """Format a template with the default formatter, taking arguments inline."""
    return _default_formatter.vformat(template, args, kwargs)
