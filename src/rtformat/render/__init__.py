"""Argument resolution and rendering for rtformat."""

from rtformat.render.assembler import pad
from rtformat.render.renderer import RenderedValue
from rtformat.render.renderer import render_value
from rtformat.render.resolver import ArgumentResolver
from rtformat.render.resolver import Arguments
from rtformat.render.values import BoundValue
from rtformat.render.values import FormattableValue
from rtformat.render.values import bind
from rtformat.render.values import classify

__all__ = [
    "ArgumentResolver",
    "Arguments",
    "BoundValue",
    "FormattableValue",
    "RenderedValue",
    "bind",
    "classify",
    "pad",
    "render_value",
]
