"""Colour transducer — `stroke` attributes and `stroke:` declarations.

Only the exact name `stroke` is matched; `stroke-width`, `stroke-dasharray` and
friends are left alone.
"""

from __future__ import annotations

from restyle.engine.registry import transducer
from restyle.svg.css import rewrite_declaration
from restyle.svg.tokenizer import Token
from restyle.svg.transducer import RewritePolicy, transduce
from restyle.svg.writer import set_attributes

STROKE = b"stroke"


@transducer(id="colour", order=2, target="stroke_colour", description="Set stroke colour everywhere")
class ColourPolicy(RewritePolicy):
    needles = (STROKE,)

    def rewrite_element(self, token: Token, new_value: str) -> Token:
        return set_attributes(token, lambda name: name == STROKE, new_value)

    def rewrite_css(self, text: str, new_value: str) -> str:
        return rewrite_declaration(text, "stroke", new_value)


def update_colour_bytes(data: bytes, new_value: str) -> bytes:
    """Set every stroke colour in the document to `new_value`."""
    return transduce(data, ColourPolicy(), new_value).data
