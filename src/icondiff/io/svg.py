"""SVG outline rendering.

Icons are drawn from the glyph set instanced at a location, flipped to SVG's
y-down coordinate system and scaled so one em spans the requested size.
"""

from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from icondiff.domain import Location

SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}" '
    'height="{size}" width="{size}"><path d="{path}"/></svg>'
)


def draw_svg(font: TTFont, glyph_name: str, location: Location, size: int) -> str:
    """Draw one glyph as an SVG document.

    Args:
        font: Loaded font
        glyph_name: Glyph to draw
        location: Design-space location; empty for the default instance
        size: Width and height of the SVG viewBox

    Returns:
        SVG document with a single path element
    """
    if location.coords:
        glyph_set = font.getGlyphSet(location=location.normalized(), normalized=True)
    else:
        glyph_set = font.getGlyphSet()

    scale = size / font["head"].unitsPerEm
    svg_pen = SVGPathPen(glyph_set)
    pen = TransformPen(svg_pen, (scale, 0, 0, -scale, 0, size))
    glyph_set[glyph_name].draw(pen)

    return SVG_TEMPLATE.format(size=size, path=svg_pen.getCommands())
