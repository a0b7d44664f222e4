"""rtformat - format templates and arguments supplied at runtime.

Templates use the brace directive grammar of compiled formatting macros:
argument selection by position, name or implicit order; alignment; forced
sign; alternate form; zero padding; literal or indirect width and precision;
and display, debug, binary, octal, hex and exponential conversions. Padding
always uses spaces, or zeros for zero-padded numbers.
"""

from rtformat.core import ErrorKind
from rtformat.core import FormatConfig
from rtformat.core import FormatError
from rtformat.core import ImplicitArgumentExhaustedError
from rtformat.core import InvalidCountError
from rtformat.core import InvalidFormatSyntaxError
from rtformat.core import MissingArgumentError
from rtformat.core import UnmatchedClosingBraceError
from rtformat.core import UnsupportedConversionError
from rtformat.core import UnterminatedPlaceholderError
from rtformat.core import UnusedArgumentError
from rtformat.engine import ParsedFormat
from rtformat.engine import RuntimeFormatter
from rtformat.engine import format_string
from rtformat.engine import vformat
from rtformat.project_info import ProjectInfo
from rtformat.project_info import get_project_info
from rtformat.render import Arguments
from rtformat.render import BoundValue
from rtformat.render import FormattableValue
from rtformat.render import bind
from rtformat.template import Align
from rtformat.template import Capability
from rtformat.template import Conversion
from rtformat.template import FormatSpec
from rtformat.template import ImplicitSelector
from rtformat.template import IndirectCount
from rtformat.template import LiteralCount
from rtformat.template import NamedSelector
from rtformat.template import PositionalSelector
from rtformat.template import Sign
from rtformat.template import Template
from rtformat.template import ValueKind
from rtformat.template import parse_format_spec
from rtformat.template import tokenize

__all__ = [
    "Align",
    "Arguments",
    "BoundValue",
    "Capability",
    "Conversion",
    "ErrorKind",
    "FormatConfig",
    "FormatError",
    "FormatSpec",
    "FormattableValue",
    "ImplicitArgumentExhaustedError",
    "ImplicitSelector",
    "IndirectCount",
    "InvalidCountError",
    "InvalidFormatSyntaxError",
    "LiteralCount",
    "MissingArgumentError",
    "NamedSelector",
    "ParsedFormat",
    "PositionalSelector",
    "ProjectInfo",
    "RuntimeFormatter",
    "Sign",
    "Template",
    "UnmatchedClosingBraceError",
    "UnsupportedConversionError",
    "UnterminatedPlaceholderError",
    "UnusedArgumentError",
    "ValueKind",
    "bind",
    "format_string",
    "get_project_info",
    "parse_format_spec",
    "tokenize",
    "vformat",
]
__version__ = get_project_info().version
