"""Template parsing for rtformat: directive grammar, tokenizer and models."""

from rtformat.template.enums import Align
from rtformat.template.enums import Capability
from rtformat.template.enums import Conversion
from rtformat.template.enums import Sign
from rtformat.template.enums import ValueKind
from rtformat.template.grammar import parse_format_spec
from rtformat.template.grammar import parse_placeholder
from rtformat.template.tokenizer import tokenize
from rtformat.template.types import ArgumentSelector
from rtformat.template.types import Count
from rtformat.template.types import FormatSpec
from rtformat.template.types import ImplicitSelector
from rtformat.template.types import IndirectCount
from rtformat.template.types import LiteralCount
from rtformat.template.types import LiteralSegment
from rtformat.template.types import NamedSelector
from rtformat.template.types import PlaceholderSegment
from rtformat.template.types import PositionalSelector
from rtformat.template.types import Segment
from rtformat.template.types import Template

__all__ = [
    "Align",
    "ArgumentSelector",
    "Capability",
    "Conversion",
    "Count",
    "FormatSpec",
    "ImplicitSelector",
    "IndirectCount",
    "LiteralCount",
    "LiteralSegment",
    "NamedSelector",
    "PlaceholderSegment",
    "PositionalSelector",
    "Segment",
    "Sign",
    "Template",
    "ValueKind",
    "parse_format_spec",
    "parse_placeholder",
    "tokenize",
]
