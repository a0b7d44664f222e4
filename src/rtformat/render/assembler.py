"""Width, alignment and zero-padding of rendered values."""

from rtformat.render.renderer import RenderedValue
from rtformat.template.enums import Align


def pad(
    rendered: RenderedValue,
    width: int | None,
    align: Align | None,
    zero_pad: bool,
) -> str:
    """Return the rendered text padded to at least ``width`` characters.

    Zero padding on a numeric value goes between the sign (and base prefix) and
    the digits, and overrides any alignment. Infinities and NaN are never zero
    padded; they get spaces like any other number. Otherwise spaces are placed by
    alignment; the default is right for numbers and left for everything else.
    Center alignment puts the odd extra space on the right.

    Args:
        rendered: Unpadded rendering
        width: Minimum width, or None
        align: Explicit alignment, or None for the default
        zero_pad: Whether the zero flag was given

    Returns:
        The padded text

    """
    text = rendered.text
    if width is None or len(text) >= width:
        return text

    fill = width - len(text)
    if zero_pad and rendered.numeric and rendered.finite:
        return f"{rendered.sign}{rendered.prefix}{'0' * fill}{rendered.body}"

    if align is None:
        align = Align.RIGHT if rendered.numeric else Align.LEFT
    match align:
        case Align.LEFT:
            return text + " " * fill
        case Align.RIGHT:
            return " " * fill + text
    before = fill // 2
    return " " * before + text + " " * (fill - before)


def write_padded(
    buffer: list[str],
    rendered: RenderedValue,
    width: int | None,
    align: Align | None,
    zero_pad: bool,
) -> None:
    """Append the padded rendering to an output buffer."""
    buffer.append(pad(rendered, width, align, zero_pad))
