"""Lexical SVG tokenizer — splits raw document bytes into tokens without building a tree.

Every token keeps the exact source bytes it was cut from, so a writer that emits
`token.raw` reproduces the input byte-for-byte. Element tokens additionally carry
their tag name and attributes with spans relative to the token, which lets a
rewrite policy splice a single attribute value without touching anything else.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

# Tag body: quoted values may contain '>' so they are consumed as a unit
_TAG_RE = re.compile(rb"""<([^\s/>!?"'=<]+)((?:"[^"]*"|'[^']*'|[^>"'])*)>""")
_END_TAG_RE = re.compile(rb"</([^\s/>!?\"'=<]+)\s*>")
_ATTR_RE = re.compile(rb"""([^\s=/>"']+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

# (opening, terminator) for markup that is copied verbatim
_VERBATIM_MARKUP = (
    (b"<!--", b"-->"),
    (b"<![CDATA[", b"]]>"),
    (b"<?", b"?>"),
)


class TokenKind(enum.Enum):
    START = "start"
    EMPTY = "empty"
    END = "end"
    TEXT = "text"
    OTHER = "other"


class TokenizeError(ValueError):
    """Raised when the input cannot be split into tokens at `offset`."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at byte {offset}")
        self.offset = offset


@dataclass(frozen=True)
class Attribute:
    """One `name="value"` pair inside a tag.

    `span` covers the whole pair and `value_span` the value between the quotes,
    both relative to the start of the owning token.
    """

    name: bytes
    value: bytes
    quote: bytes
    span: tuple[int, int]
    value_span: tuple[int, int]


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    raw: bytes
    offset: int
    name: bytes = b""
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    @property
    def is_element(self) -> bool:
        return self.kind in (TokenKind.START, TokenKind.EMPTY)


def parse_attributes(raw: bytes, start: int, end: int) -> tuple[Attribute, ...]:
    """Extract quoted attributes from raw[start:end].

    Valueless or unquoted attributes are not reported; they stay in the raw
    bytes untouched.
    """
    attrs: list[Attribute] = []
    for m in _ATTR_RE.finditer(raw, start, end):
        if m.group(2) is not None:
            value, group = m.group(2), 2
        else:
            value, group = m.group(3), 3
        attrs.append(
            Attribute(
                name=m.group(1),
                value=value,
                quote=raw[m.start(group) - 1 : m.start(group)],
                span=(m.start(), m.end()),
                value_span=(m.start(group), m.end(group)),
            )
        )
    return tuple(attrs)


class TokenReader:
    """Pull tokenizer over an in-memory byte buffer.

    `read_token()` returns the next token or None at end of stream and raises
    TokenizeError on malformed input. Iterating the reader is the best-effort
    variant: a parse error ends the sequence and is recorded in `truncated_at`.
    """

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0
        self._open: list[bytes] = []
        self.truncated_at: int | None = None

    def read_token(self) -> Token | None:
        data, pos = self._data, self._pos
        if pos >= len(data):
            return None

        if data[pos : pos + 1] != b"<":
            end = data.find(b"<", pos)
            if end < 0:
                end = len(data)
            return self._emit(TokenKind.TEXT, pos, end)

        for opening, terminator in _VERBATIM_MARKUP:
            if data.startswith(opening, pos):
                close = data.find(terminator, pos + len(opening))
                if close < 0:
                    raise TokenizeError(f"unterminated {opening.decode()!r}", pos)
                return self._emit(TokenKind.OTHER, pos, close + len(terminator))

        if data.startswith(b"<!", pos):
            return self._emit(TokenKind.OTHER, pos, self._doctype_end(pos))

        if data.startswith(b"</", pos):
            m = _END_TAG_RE.match(data, pos)
            if m is None:
                raise TokenizeError("malformed end tag", pos)
            name = m.group(1)
            if not self._open:
                raise TokenizeError(f"unexpected end tag </{name.decode(errors='replace')}>", pos)
            expected = self._open.pop()
            if expected != name:
                raise TokenizeError(
                    f"end tag </{name.decode(errors='replace')}> does not match "
                    f"<{expected.decode(errors='replace')}>",
                    pos,
                )
            return self._emit(TokenKind.END, pos, m.end(), name=name)

        m = _TAG_RE.match(data, pos)
        if m is None:
            raise TokenizeError("malformed or unterminated tag", pos)
        name = m.group(1)
        body_end = m.end(2)
        if data[body_end - 1 : body_end] == b"/":
            kind = TokenKind.EMPTY
            body_end -= 1
        else:
            kind = TokenKind.START
            self._open.append(name)
        raw = data[pos : m.end()]
        attrs = parse_attributes(raw, m.start(2) - pos, body_end - pos)
        self._pos = m.end()
        return Token(kind=kind, raw=raw, offset=pos, name=name, attributes=attrs)

    def tokens(self) -> Iterator[Token]:
        while True:
            try:
                token = self.read_token()
            except TokenizeError as e:
                logger.debug("Tokenizer stopped: %s", e)
                self.truncated_at = e.offset
                return
            if token is None:
                return
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def _emit(self, kind: TokenKind, start: int, end: int, name: bytes = b"") -> Token:
        self._pos = end
        return Token(kind=kind, raw=self._data[start:end], offset=start, name=name)

    def _doctype_end(self, pos: int) -> int:
        """End offset of a <!DOCTYPE ...> declaration, internal subset included."""
        data = self._data
        close = data.find(b">", pos)
        bracket = data.find(b"[", pos)
        if 0 <= bracket < close:
            subset_end = data.find(b"]", bracket)
            if subset_end < 0:
                raise TokenizeError("unterminated DOCTYPE internal subset", pos)
            close = data.find(b">", subset_end)
        if close < 0:
            raise TokenizeError("unterminated declaration", pos)
        return close + 1
