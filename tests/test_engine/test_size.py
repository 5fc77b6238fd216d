"""Tests for the size transducer."""

from __future__ import annotations

from restyle.engine.size import update_size_bytes
from restyle.svg.tokenizer import TokenReader
from tests.conftest import CIRCLE_SVG, FILLED_RECT_SVG, PLAIN_SVG


def _root_attr_names(data: bytes) -> list[bytes]:
    root = next(t for t in TokenReader(data) if t.name == b"svg")
    return [a.name for a in root.attributes]


class TestRootScope:
    def test_only_root_changes(self):
        data = b'<svg width="10" height="10"><rect width="5"/></svg>'
        assert update_size_bytes(data, "256") == b'<svg width="256" height="256"><rect width="5"/></svg>'

    def test_icon(self):
        expected = CIRCLE_SVG.replace(b'width="24" height="24"', b'width="256" height="256"')
        assert update_size_bytes(CIRCLE_SVG, "256") == expected

    def test_self_closing_root(self):
        assert update_size_bytes(b'<svg width="1" x="2" height="3"/>', "8") == b'<svg width="8" x="2" height="8"/>'

    def test_non_svg_elements_untouched(self):
        data = b'<g width="1" height="2"/>'
        assert update_size_bytes(data, "8") == data

    def test_nested_rect_untouched(self):
        assert update_size_bytes(FILLED_RECT_SVG, "64") == FILLED_RECT_SVG

    def test_root_without_size_is_left_alone(self):
        assert update_size_bytes(PLAIN_SVG, "256") == PLAIN_SVG

    def test_idempotent(self):
        once = update_size_bytes(CIRCLE_SVG, "48")
        assert update_size_bytes(once, "48") == once


class TestLegacyDuplication:
    def test_pair_inserted_ahead_of_every_attribute(self):
        data = b'<svg width="10" height="10"><rect width="5"/></svg>'
        out = update_size_bytes(data, "256", duplicate_root_attributes=True)
        assert out == (
            b'<svg height="256" width="256" width="10" height="256" width="256" height="10">'
            b'<rect width="5"/></svg>'
        )

    def test_grows_on_every_run(self):
        once = update_size_bytes(CIRCLE_SVG, "256", duplicate_root_attributes=True)
        twice = update_size_bytes(once, "256", duplicate_root_attributes=True)
        original = len(_root_attr_names(CIRCLE_SVG))
        assert len(_root_attr_names(once)) == 3 * original
        assert len(_root_attr_names(twice)) == 9 * original
        assert twice != once

    def test_root_without_attributes(self):
        data = b"<svg><g/></svg>"
        assert update_size_bytes(data, "256", duplicate_root_attributes=True) == data

    def test_self_closing_root_is_not_duplicated(self):
        data = b'<svg width="1" height="1"/>'
        assert update_size_bytes(data, "2", duplicate_root_attributes=True) == b'<svg width="2" height="2"/>'


class TestCssText:
    def test_width_and_height_in_one_text_node(self):
        data = b"<svg><style>.a{width:3px;height:4px;}</style></svg>"
        assert update_size_bytes(data, "256") == b"<svg><style>.a{width:256;height:256;}</style></svg>"

    def test_any_text_node(self):
        data = b"<svg><g><text>height: tall</text></g></svg>"
        assert update_size_bytes(data, "1") == b"<svg><g><text>height: 1</text></g></svg>"

    def test_literal_match_inside_stroke_width(self):
        data = b"<svg><style>.a{stroke-width:2}</style></svg>"
        assert update_size_bytes(data, "9") == b"<svg><style>.a{stroke-width:9</style></svg>"
