"""Literal CSS declaration rewriting for style text nodes."""

from __future__ import annotations

import functools
import re

_ENTITY_RE = re.compile(r"&(#x[0-9a-fA-F]+|#[0-9]+|[A-Za-z][A-Za-z0-9]*);")
_PREDEFINED_ENTITIES = {"lt": "<", "gt": ">", "amp": "&", "apos": "'", "quot": '"'}


@functools.lru_cache(maxsize=32)
def _declaration_re(property_name: str) -> re.Pattern[str]:
    return re.compile(rf"({re.escape(property_name)}\s*:\s*)([^;]+)")


def rewrite_declaration(text: str, property_name: str, new_value: str) -> str:
    """Replace the value of every `property_name: value` declaration in text.

    Matching is literal and case-sensitive; the value runs up to the next `;`
    or the end of the text. `new_value` is inserted as-is.
    """
    return _declaration_re(property_name).sub(lambda m: m.group(1) + new_value, text)


def unescape_text(raw: bytes) -> str:
    """Decode XML character data, resolving the predefined and numeric entities.

    Raises ValueError for undecodable bytes or unknown named entities.
    """
    text = raw.decode("utf-8")

    def _resolve(m: re.Match[str]) -> str:
        ref = m.group(1)
        if ref.startswith("#x"):
            return chr(int(ref[2:], 16))
        if ref.startswith("#"):
            return chr(int(ref[1:]))
        try:
            return _PREDEFINED_ENTITIES[ref]
        except KeyError:
            raise ValueError(f"unknown entity &{ref};") from None

    return _ENTITY_RE.sub(_resolve, text)
