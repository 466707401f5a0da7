"""Rasterization utilities — poster SVG to PNG for print previews."""

from __future__ import annotations

# 2x the CSS pixel size gives a crisp preview on receipt printers
_DEFAULT_SCALE = 2.0


def svg_to_png(svg_text: str, scale: float = _DEFAULT_SCALE) -> bytes:
    """Render SVG markup to PNG bytes."""
    # cairosvg needs the native cairo library; import only when rendering
    import cairosvg

    return cairosvg.svg2png(bytestring=svg_text.encode("utf-8"), scale=scale)
