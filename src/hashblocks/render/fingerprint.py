"""Deterministic digest to block-glyph fingerprint rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

# Nibble -> 2x2 quadrant pattern, from blank to full block.
GLYPHS: Tuple[str, ...] = (
    " ", "▗", "▖", "▘", "▝", "▐", "▞", "▄",
    "▚", "▌", "▀", "▜", "▙", "▛", "▟", "█",
)


@dataclass(frozen=True)
class ColorScheme:
    fg_r: int
    fg_g: int
    fg_b: int
    bg_r: int
    bg_g: int
    bg_b: int

    def __post_init__(self) -> None:
        for channel in (self.fg_r, self.fg_g, self.fg_b, self.bg_r, self.bg_g, self.bg_b):
            if not 0 <= channel <= 255:
                raise ValueError("color channels must be between 0 and 255")

    @property
    def foreground(self) -> RGB:
        return (self.fg_r, self.fg_g, self.fg_b)

    @property
    def background(self) -> RGB:
        return (self.bg_r, self.bg_g, self.bg_b)


COLOR_SCHEMES: Tuple[ColorScheme, ...] = (
    ColorScheme(32, 0, 224, 223, 255, 31),
    ColorScheme(254, 24, 0, 254, 255, 0),
    ColorScheme(0, 240, 240, 255, 15, 15),
    ColorScheme(32, 0, 224, 0, 255, 255),
    ColorScheme(124, 31, 248, 248, 124, 31),
    ColorScheme(32, 128, 32, 223, 127, 223),
    ColorScheme(248, 0, 0, 0, 248, 0),
    ColorScheme(192, 16, 192, 192, 192, 192),
    ColorScheme(127, 254, 127, 128, 1, 128),
    ColorScheme(240, 64, 160, 15, 0, 160),
    ColorScheme(192, 248, 0, 248, 64, 192),
    ColorScheme(0, 128, 240, 255, 0, 0),
    ColorScheme(248, 93, 0, 64, 93, 93),
    ColorScheme(64, 0, 0, 0, 191, 191),
    ColorScheme(128, 24, 0, 0, 128, 255),
    ColorScheme(64, 208, 0, 64, 64, 255),
)


@dataclass(frozen=True)
class Fingerprint:
    """Glyph row plus the color scheme it is drawn in."""

    glyphs: str
    scheme: ColorScheme
    scheme_index: int

    def __len__(self) -> int:
        return len(self.glyphs)


def glyph_for_nibble(nibble: int) -> str:
    if not 0 <= nibble <= 0xF:
        raise ValueError(f"nibble out of range: {nibble}")
    return GLYPHS[nibble]


def scheme_index(digest: bytes) -> int:
    """Index into :data:`COLOR_SCHEMES`: the byte sum modulo 16."""

    return sum(digest) % len(COLOR_SCHEMES)


def render(digest: bytes) -> Fingerprint:
    """Render ``digest`` as two glyphs per byte, high nibble first.

    Pure function of the digest bytes.  An empty digest gives an empty glyph
    row drawn in scheme 0.
    """

    glyphs = "".join(GLYPHS[b >> 4] + GLYPHS[b & 0x0F] for b in bytes(digest))
    index = scheme_index(digest)
    return Fingerprint(glyphs=glyphs, scheme=COLOR_SCHEMES[index], scheme_index=index)


__all__ = [
    "COLOR_SCHEMES",
    "ColorScheme",
    "Fingerprint",
    "GLYPHS",
    "glyph_for_nibble",
    "render",
    "scheme_index",
]
