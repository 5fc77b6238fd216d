"""SVG restyling: root size, stroke-width and stroke colour rewriting."""

__version__ = "0.1.0"
