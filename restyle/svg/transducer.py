"""Generic token transducer — one pass of tokenize → rewrite → reserialize.

A RewritePolicy decides what happens to element and text tokens; everything
else is written back verbatim. The pass never looks at more than one token at
a time, so output token count always equals input token count.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO

from restyle.svg.css import unescape_text
from restyle.svg.tokenizer import Token, TokenKind, TokenReader
from restyle.svg.writer import TokenWriter

if TYPE_CHECKING:
    from restyle.engine.config import PipelineConfig

logger = logging.getLogger(__name__)


class RewritePolicy:
    """Base policy: passes every token through unchanged.

    Subclasses set `needles` (raw byte substrings that gate text rewriting) and
    override `rewrite_element` / `rewrite_css`.
    """

    id: str = ""
    needles: tuple[bytes, ...] = ()

    def configure(self, config: PipelineConfig) -> RewritePolicy:
        """Return the policy to use for a pipeline run with `config`."""
        return self

    def rewrite_element(self, token: Token, new_value: str) -> Token:
        return token

    def rewrite_css(self, text: str, new_value: str) -> str:
        return text

    def rewrite_text(self, token: Token, new_value: str) -> Token:
        if not any(needle in token.raw for needle in self.needles):
            return token
        try:
            text = unescape_text(token.raw)
            # Unescaped text is emitted as already-escaped character data
            raw = self.rewrite_css(text, new_value).encode("utf-8")
        except (ValueError, OverflowError) as e:
            # UnicodeEncodeError (lone surrogate references) is a ValueError too
            logger.debug("%s: leaving text at byte %d as-is (%s)", self.id, token.offset, e)
            return token
        return Token(kind=TokenKind.TEXT, raw=raw, offset=token.offset)

    def apply(self, token: Token, new_value: str) -> Token:
        if token.is_element:
            return self.rewrite_element(token, new_value)
        if token.kind is TokenKind.TEXT:
            return self.rewrite_text(token, new_value)
        return token


@dataclass
class RewriteResult:
    data: bytes
    tokens: int = 0
    truncated_at: int | None = None

    @property
    def truncated(self) -> bool:
        return self.truncated_at is not None


def transduce(
    data: bytes,
    policy: RewritePolicy,
    new_value: str,
    sink: BinaryIO | None = None,
) -> RewriteResult:
    """Run one policy over a document.

    Malformed input ends the pass early; the bytes written so far are returned
    and `truncated_at` holds the offset where tokenizing stopped. Sink failures
    propagate as SerializationError.
    """
    reader = TokenReader(data)
    out = sink if sink is not None else io.BytesIO()
    writer = TokenWriter(out)

    for token in reader:
        writer.write(policy.apply(token, new_value))

    if reader.truncated_at is not None:
        logger.debug(
            "%s: input truncated at byte %d of %d", policy.id, reader.truncated_at, len(data)
        )

    result = out.getvalue() if isinstance(out, io.BytesIO) else b""
    return RewriteResult(data=result, tokens=writer.tokens_written, truncated_at=reader.truncated_at)
