"""Fingerprint rendering and terminal presentation."""

from .display import hex_digest, print_fingerprint, style_fingerprint
from .fingerprint import (
    COLOR_SCHEMES,
    GLYPHS,
    ColorScheme,
    Fingerprint,
    glyph_for_nibble,
    render,
    scheme_index,
)

__all__ = [
    "COLOR_SCHEMES",
    "GLYPHS",
    "ColorScheme",
    "Fingerprint",
    "glyph_for_nibble",
    "hex_digest",
    "print_fingerprint",
    "render",
    "scheme_index",
    "style_fingerprint",
]
