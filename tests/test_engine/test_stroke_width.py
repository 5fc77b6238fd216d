"""Tests for the stroke-width transducer."""

from __future__ import annotations

from restyle.engine.stroke_width import update_stroke_width_bytes
from tests.conftest import CIRCLE_SVG, PLAIN_SVG, SMILEY_SVG, STYLED_SVG


def test_only_stroke_width_attribute_changes():
    out = update_stroke_width_bytes(b'<rect stroke="red" stroke-width="2"/>', "5")
    assert out == b'<rect stroke="red" stroke-width="5"/>'


def test_root_attribute():
    expected = CIRCLE_SVG.replace(b'stroke-width="2"', b'stroke-width="1"')
    assert update_stroke_width_bytes(CIRCLE_SVG, "1") == expected


def test_nested_elements():
    data = b'<svg><g stroke-width="3"><path stroke-width="4"/></g></svg>'
    assert update_stroke_width_bytes(data, "1") == b'<svg><g stroke-width="1"><path stroke-width="1"/></g></svg>'


def test_css_text():
    out = update_stroke_width_bytes(STYLED_SVG, "1")
    assert out == STYLED_SVG.replace(b"stroke-width:3", b"stroke-width:1")


def test_width_declarations_are_not_touched():
    data = b"<style>.a{width:3px;stroke:red}</style>"
    assert update_stroke_width_bytes(data, "1") == data


def test_pass_through(smiley_svg):
    assert update_stroke_width_bytes(PLAIN_SVG, "1") == PLAIN_SVG
    assert update_stroke_width_bytes(smiley_svg, "2") == SMILEY_SVG


def test_idempotent():
    once = update_stroke_width_bytes(SMILEY_SVG, "1.5")
    assert update_stroke_width_bytes(once, "1.5") == once
