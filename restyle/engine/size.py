"""Size transducer — root `svg` width/height and `width:`/`height:` declarations.

Attributes are only touched on elements named exactly `svg`; nested elements
keep their own width/height. Declarations are rewritten in any text node.

The root open tag has two behaviours:

- default: existing width/height are replaced in place, exactly like the
  self-closing form. Nothing is added when the root has neither.
- `duplicate_root_attributes=True`: every original attribute gets a fresh
  `height`/`width` pair inserted ahead of it and is itself kept unchanged. This
  yields duplicate attributes and grows on every run; it exists for output
  compatibility with earlier batches.

A self-closing `<svg/>` root always only has its existing width/height replaced.
"""

from __future__ import annotations

from restyle.engine.config import PipelineConfig
from restyle.engine.registry import transducer
from restyle.svg.css import rewrite_declaration
from restyle.svg.tokenizer import Token, TokenKind
from restyle.svg.transducer import RewritePolicy, transduce
from restyle.svg.writer import insert_before_attributes, set_attributes

ROOT_TAG = b"svg"
WIDTH = b"width"
HEIGHT = b"height"
_SIZE_NAMES = (WIDTH, HEIGHT)


@transducer(id="size", order=0, target="size", description="Set root width/height")
class SizePolicy(RewritePolicy):
    needles = (WIDTH, HEIGHT)

    def __init__(self, duplicate_root_attributes: bool = False) -> None:
        self.duplicate_root_attributes = duplicate_root_attributes

    def configure(self, config: PipelineConfig) -> RewritePolicy:
        return SizePolicy(duplicate_root_attributes=config.duplicate_root_attributes)

    def rewrite_element(self, token: Token, new_value: str) -> Token:
        if token.name != ROOT_TAG:
            return token

        if token.kind is TokenKind.START and self.duplicate_root_attributes:
            return insert_before_attributes(token, [(HEIGHT, new_value), (WIDTH, new_value)])

        return set_attributes(token, lambda name: name in _SIZE_NAMES, new_value)

    def rewrite_css(self, text: str, new_value: str) -> str:
        text = rewrite_declaration(text, "width", new_value)
        return rewrite_declaration(text, "height", new_value)


def update_size_bytes(data: bytes, new_value: str, *, duplicate_root_attributes: bool = False) -> bytes:
    """Set the root element size (and size declarations) to `new_value`."""
    policy = SizePolicy(duplicate_root_attributes=duplicate_root_attributes)
    return transduce(data, policy, new_value).data
