"""Shared test fixtures."""

from __future__ import annotations

import pytest


CIRCLE_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

# Stroke styling in a <style> block instead of attributes
STYLED_SVG = b'''<?xml version="1.0" encoding="UTF-8"?>
<!-- exported icon -->
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <style>.a{stroke:red;stroke-width:3;fill:none}</style>
  <rect class="a" x="2" y="2" width="20" height="20"/>
</svg>'''

# No width, height, stroke or stroke-width anywhere
PLAIN_SVG = b'''<?xml version="1.0"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg xmlns="http://www.w3.org/2000/svg"
     viewBox='0 0 100 100'>
  <!-- a comment -->
  <g   fill="#4ECDC4" >
    <circle cx="50" cy="50" r="20"/>
    <text x="1" y="2">a &amp; b</text>
  </g>
</svg>
'''

FILLED_RECT_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
  <circle cx="50" cy="50" r="20" fill="#FF6B6B"/>
</svg>'''


@pytest.fixture
def circle_svg() -> bytes:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> bytes:
    return SMILEY_SVG


@pytest.fixture
def styled_svg() -> bytes:
    return STYLED_SVG


@pytest.fixture
def plain_svg() -> bytes:
    return PLAIN_SVG
