"""Recursive-descent parser for placeholder bodies.

Grammar of the text between ``{`` and ``}``::

    placeholder := [argument] [':' format_spec]
    argument    := identifier | integer
    format_spec := [align] [sign] ['#'] ['0'] [width] ['.' precision] [type]
    align       := '<' | '^' | '>'
    sign        := '+'
    width       := integer | argument '$'
    precision   := integer | '*' | argument '$'
    type        := 'b' | 'o' | 'x' | 'X' | 'e' | 'E' | '?'

Parsing never looks at argument values; selectors are resolved later.
"""

from rtformat.core.errors import InvalidFormatSyntaxError
from rtformat.template.enums import Align
from rtformat.template.enums import Conversion
from rtformat.template.enums import Sign
from rtformat.template.types import ArgumentSelector
from rtformat.template.types import Count
from rtformat.template.types import FormatSpec
from rtformat.template.types import ImplicitSelector
from rtformat.template.types import IndirectCount
from rtformat.template.types import LiteralCount
from rtformat.template.types import NamedSelector
from rtformat.template.types import PositionalSelector

_DIGITS = frozenset("0123456789")
_ALIGN_TOKENS = {a.value: a for a in Align}
_TYPE_TOKENS = {c.value: c for c in Conversion if c.value}


def _is_identifier_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_identifier_char(ch: str) -> bool:
    return ch == "_" or ch.isalnum()


class _Cursor:
    """Position within a placeholder body."""

    def __init__(self, body: str, offset: int | None) -> None:
        self.body = body
        self.pos = 0
        self.offset = offset

    def at_end(self) -> bool:
        return self.pos >= len(self.body)

    def peek(self) -> str:
        return self.body[self.pos] if self.pos < len(self.body) else ""

    def eat(self, token: str) -> bool:
        if self.body.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def take_while(self, predicate) -> str:
        start = self.pos
        while self.pos < len(self.body) and predicate(self.body[self.pos]):
            self.pos += 1
        return self.body[start : self.pos]

    def error(self, detail: str) -> InvalidFormatSyntaxError:
        return InvalidFormatSyntaxError(
            detail, body=self.body, position=self.pos, offset=self.offset
        )


def parse_placeholder(body: str, *, offset: int | None = None) -> FormatSpec:
    """Parse the text between a placeholder's braces.

    Args:
        body: Placeholder body, braces excluded
        offset: Template offset of the opening brace, reported in errors

    Returns:
        The parsed FormatSpec

    Raises:
        InvalidFormatSyntaxError: When the body does not match the grammar

    """
    cursor = _Cursor(body, offset)
    value = _parse_argument(cursor) or ImplicitSelector()
    if cursor.at_end():
        return FormatSpec(value=value)
    if not cursor.eat(":"):
        raise cursor.error("expected ':' or '}' after argument")
    return _parse_format_spec(cursor, value)


def parse_format_spec(text: str) -> FormatSpec:
    """Parse a standalone directive string, the part after ':'.

    Args:
        text: Directive text such as ``>+#08.3x``

    Returns:
        FormatSpec with an implicit value selector

    Raises:
        InvalidFormatSyntaxError: When the text does not match the grammar

    """
    return _parse_format_spec(_Cursor(text, None), ImplicitSelector())


def _parse_argument(cursor: _Cursor) -> ArgumentSelector | None:
    ch = cursor.peek()
    if ch in _DIGITS:
        return PositionalSelector(index=int(cursor.take_while(_DIGITS.__contains__)))
    if ch and _is_identifier_start(ch):
        return NamedSelector(name=cursor.take_while(_is_identifier_char))
    return None


def _parse_format_spec(cursor: _Cursor, value: ArgumentSelector) -> FormatSpec:
    align = _ALIGN_TOKENS.get(cursor.peek()) if not cursor.at_end() else None
    if align is not None:
        cursor.pos += 1
    sign = Sign.PLUS if cursor.eat("+") else None
    alternate = cursor.eat("#")
    # '0$' is an indirect width naming argument 0, not the zero flag.
    zero_pad = not cursor.body.startswith("0$", cursor.pos) and cursor.eat("0")
    width = _parse_width(cursor)
    precision = _parse_precision(cursor) if cursor.eat(".") else None
    conversion = _TYPE_TOKENS.get(cursor.peek(), Conversion.DISPLAY)
    if conversion is not Conversion.DISPLAY:
        cursor.pos += 1
    if not cursor.at_end():
        raise cursor.error(f"unexpected {cursor.peek()!r}")
    return FormatSpec(
        value=value,
        align=align,
        sign=sign,
        alternate=alternate,
        zero_pad=zero_pad,
        width=width,
        precision=precision,
        conversion=conversion,
    )


def _parse_width(cursor: _Cursor) -> Count | None:
    start = cursor.pos
    selector = _parse_argument(cursor)
    if selector is None:
        return None
    if cursor.eat("$"):
        return IndirectCount(selector=selector)
    if isinstance(selector, PositionalSelector):
        return LiteralCount(value=selector.index)
    # A bare identifier here is the type token, e.g. the 'x' in '{:x}'.
    cursor.pos = start
    return None


def _parse_precision(cursor: _Cursor) -> Count:
    if cursor.eat("*"):
        return IndirectCount(selector=ImplicitSelector())
    selector = _parse_argument(cursor)
    if selector is None:
        raise cursor.error("expected precision after '.'")
    if cursor.eat("$"):
        return IndirectCount(selector=selector)
    if isinstance(selector, PositionalSelector):
        return LiteralCount(value=selector.index)
    raise cursor.error("expected '$' after precision argument name")
