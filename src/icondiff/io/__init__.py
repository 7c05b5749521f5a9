"""Font I/O layer for icondiff.

This module handles reading icon fonts with fonttools and rendering icons.
It provides a clean abstraction layer between font libraries and the
comparison engine.

Key responsibilities:
- Load TTF/OTF fonts and validate required tables
- Extract variation axes and icon identifiers
- Canonicalize design-space locations
- Render icons as SVG outlines (fonttools) or PNG images (FreeType)

Key classes:
- IconFont: Load fonts, enumerate icons, render them
- RasterRenderer: FreeType-backed PNG rendering
"""

from icondiff.io.raster import RasterRenderer
from icondiff.io.reader import IconFont
from icondiff.io.svg import draw_svg

__all__ = [
    "IconFont",
    "RasterRenderer",
    "draw_svg",
]
