"""Stroke-width transducer — `stroke-width` attributes and `stroke-width:` declarations."""

from __future__ import annotations

from restyle.engine.registry import transducer
from restyle.svg.css import rewrite_declaration
from restyle.svg.tokenizer import Token
from restyle.svg.transducer import RewritePolicy, transduce
from restyle.svg.writer import set_attributes

STROKE_WIDTH = b"stroke-width"


@transducer(id="stroke-width", order=1, target="stroke_width", description="Set stroke-width everywhere")
class StrokeWidthPolicy(RewritePolicy):
    needles = (STROKE_WIDTH,)

    def rewrite_element(self, token: Token, new_value: str) -> Token:
        return set_attributes(token, lambda name: name == STROKE_WIDTH, new_value)

    def rewrite_css(self, text: str, new_value: str) -> str:
        return rewrite_declaration(text, "stroke-width", new_value)


def update_stroke_width_bytes(data: bytes, new_value: str) -> bytes:
    """Set every stroke-width in the document to `new_value`."""
    return transduce(data, StrokeWidthPolicy(), new_value).data
