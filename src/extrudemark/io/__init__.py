"""Outline sources and SVG output for extrudemark.

This module handles reading glyph outlines (fonttools or built-in block
letters) and writing rendered documents (svgwrite). It keeps both libraries
out of the layout core.

Key responsibilities:
- Load TTF/OTF fonts and convert glyphs to path commands
- Provide advance widths and kerning
- Render layout results to SVG and save them

Key classes:
- FontOutlineProvider: fonttools-backed outline source
- BlockOutlineProvider: Built-in block letters
- SvgRenderer: Build SVG documents
- SvgWriter: Save SVG documents
"""

from extrudemark.io.outlines import (
    BlockOutlineProvider,
    FontOutlineProvider,
    OutlineProvider,
    open_outline_provider,
)
from extrudemark.io.writer import SvgRenderer, SvgWriter

__all__ = [
    "BlockOutlineProvider",
    "FontOutlineProvider",
    "OutlineProvider",
    "SvgRenderer",
    "SvgWriter",
    "open_outline_provider",
]
