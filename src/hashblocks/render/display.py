"""Terminal output for rendered fingerprints."""

from __future__ import annotations

from typing import Optional

import typer

from .fingerprint import Fingerprint


def hex_digest(digest: bytes) -> str:
    return bytes(digest).hex()


def style_fingerprint(fingerprint: Fingerprint) -> str:
    """Wrap the glyph row in 24-bit foreground/background color codes."""

    return typer.style(
        fingerprint.glyphs,
        fg=fingerprint.scheme.foreground,
        bg=fingerprint.scheme.background,
    )


def print_fingerprint(
    fingerprint: Fingerprint,
    digest: bytes,
    *,
    show_code: bool = False,
    color: Optional[bool] = None,
) -> None:
    typer.echo(style_fingerprint(fingerprint), color=color)
    if show_code:
        typer.echo(hex_digest(digest))


__all__ = ["hex_digest", "print_fingerprint", "style_fingerprint"]
