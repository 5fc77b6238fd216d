"""Token writer + element rebuilding helpers.

Tokens are serialized from their raw bytes. Rewritten element tokens are rebuilt
by splicing the source bytes at attribute offsets, so everything a policy does
not touch (whitespace, quote style, other attributes) stays byte-identical.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import BinaryIO
from xml.sax.saxutils import escape

from restyle.svg.tokenizer import Token, parse_attributes

_ATTR_ENTITIES = {'"': "&quot;", "'": "&apos;"}


class SerializationError(OSError):
    """The output sink refused a token."""


class TokenWriter:
    """Writes tokens to a binary sink, wrapping sink failures in SerializationError."""

    def __init__(self, sink: BinaryIO) -> None:
        self._sink = sink
        self.tokens_written = 0

    def write(self, token: Token) -> None:
        try:
            self._sink.write(token.raw)
        except OSError as e:
            raise SerializationError(
                f"failed to write token at byte {token.offset}: {e}"
            ) from e
        self.tokens_written += 1


def escape_attr(value: str) -> bytes:
    """Escape a target value for use inside a quoted attribute."""
    return escape(value, _ATTR_ENTITIES).encode("utf-8")


def format_attr(name: bytes, value: str) -> bytes:
    return name + b'="' + escape_attr(value) + b'"'


def _rebuild(token: Token, raw: bytes) -> Token:
    """Return `token` with new raw bytes and re-parsed attribute offsets."""
    if raw == token.raw:
        return token
    name_end = 1 + len(token.name)
    body_end = len(raw) - (2 if raw.endswith(b"/>") else 1)
    return replace(token, raw=raw, attributes=parse_attributes(raw, name_end, body_end))


def set_attributes(token: Token, match: Callable[[bytes], bool], new_value: str) -> Token:
    """Replace the value of every attribute whose name satisfies `match`, in place."""
    raw = token.raw
    escaped = escape_attr(new_value)
    # Splice back to front so earlier offsets stay valid
    for attr in reversed(token.attributes):
        if not match(attr.name):
            continue
        start, end = attr.value_span
        raw = raw[:start] + escaped + raw[end:]
    return _rebuild(token, raw)


def insert_before_attributes(
    token: Token, pairs_per_attribute: Iterable[tuple[bytes, str]]
) -> Token:
    """Insert the given attribute pairs ahead of every existing attribute."""
    pairs = list(pairs_per_attribute)
    if not pairs or not token.attributes:
        return token
    inserted = b"".join(format_attr(name, value) + b" " for name, value in pairs)
    raw = token.raw
    for attr in reversed(token.attributes):
        start = attr.span[0]
        raw = raw[:start] + inserted + raw[start:]
    return _rebuild(token, raw)

