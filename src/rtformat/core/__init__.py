"""Core functionality for rtformat.

This module contains the error taxonomy and configuration shared by all
components.
"""

from rtformat.core.config import FormatConfig
from rtformat.core.errors import ErrorKind
from rtformat.core.errors import FormatError
from rtformat.core.errors import ImplicitArgumentExhaustedError
from rtformat.core.errors import InvalidCountError
from rtformat.core.errors import InvalidFormatSyntaxError
from rtformat.core.errors import MissingArgumentError
from rtformat.core.errors import UnmatchedClosingBraceError
from rtformat.core.errors import UnsupportedConversionError
from rtformat.core.errors import UnterminatedPlaceholderError
from rtformat.core.errors import UnusedArgumentError

__all__ = [
    "ErrorKind",
    "FormatConfig",
    "FormatError",
    "ImplicitArgumentExhaustedError",
    "InvalidCountError",
    "InvalidFormatSyntaxError",
    "MissingArgumentError",
    "UnmatchedClosingBraceError",
    "UnsupportedConversionError",
    "UnterminatedPlaceholderError",
    "UnusedArgumentError",
]
