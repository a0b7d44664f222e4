"""Template tokenizer splitting text into literal and placeholder segments."""

import logging
import re

from rtformat.core.errors import UnmatchedClosingBraceError
from rtformat.core.errors import UnterminatedPlaceholderError
from rtformat.template.grammar import parse_placeholder
from rtformat.template.types import LiteralSegment
from rtformat.template.types import PlaceholderSegment
from rtformat.template.types import Segment
from rtformat.template.types import Template

logger = logging.getLogger(__name__)

_BRACE = re.compile(r"[{}]")


def tokenize(template: object) -> Template:
    """Split a template into segments.

    ``{{`` and ``}}`` decode to literal braces and never open a placeholder.

    Args:
        template: Template text

    Returns:
        Parsed Template

    Raises:
        TypeError: When template is not a str
        UnterminatedPlaceholderError: When a '{' has no matching '}'
        UnmatchedClosingBraceError: When a stray '}' appears outside a placeholder
        InvalidFormatSyntaxError: When a placeholder body is malformed

    """
    if not isinstance(template, str):
        msg = f"Template must be str, got {type(template).__name__}"
        raise TypeError(msg)

    segments: list[Segment] = []
    literal: list[str] = []
    pos = 0
    while pos < len(template):
        match = _BRACE.search(template, pos)
        if match is None:
            literal.append(template[pos:])
            break

        brace = match.start()
        literal.append(template[pos:brace])
        if template.startswith(match.group() * 2, brace):
            literal.append(match.group())
            pos = brace + 2
            continue
        if match.group() == "}":
            raise UnmatchedClosingBraceError(offset=brace)

        close = template.find("}", brace + 1)
        if close == -1:
            raise UnterminatedPlaceholderError(offset=brace)
        _flush(segments, literal)
        spec = parse_placeholder(template[brace + 1 : close], offset=brace)
        segments.append(PlaceholderSegment(spec=spec, offset=brace))
        pos = close + 1

    _flush(segments, literal)
    logger.debug(
        "Tokenized template into %d segments (%d placeholders)",
        len(segments),
        sum(isinstance(s, PlaceholderSegment) for s in segments),
    )
    return Template(segments=tuple(segments))


def _flush(segments: list[Segment], literal: list[str]) -> None:
    """Move accumulated literal text into a single segment."""
    text = "".join(literal)
    literal.clear()
    if text:
        segments.append(LiteralSegment(text=text))
