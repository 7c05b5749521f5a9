"""Raster rendering with FreeType.

Glyphs are rasterized by freetype-py at the requested pixel size and
composited onto a square canvas with Pillow, then PNG encoded. Equal inputs
produce byte-identical output.
"""

from io import BytesIO

import freetype
from PIL import Image, ImageColor

from icondiff.domain import Location


class RasterRenderer:
    """Renders glyphs of one font binary to PNG bytes.

    The FreeType face is created once and reused across draws.
    """

    def __init__(self, font_data: bytes) -> None:
        self._face = freetype.Face(BytesIO(font_data))

    def draw(
        self,
        glyph_index: int,
        size: int,
        scale: float,
        foreground: str,
        background: str,
        location: Location | None = None,
    ) -> bytes:
        """Render a glyph.

        Args:
            glyph_index: Glyph to draw
            size: Em size in pixels before scaling
            scale: Multiplier applied to size
            foreground: Glyph colour (any Pillow colour string)
            background: Canvas colour
            location: Design-space location; None or empty for the default

        Returns:
            PNG-encoded square image of round(size * scale) pixels
        """
        face = self._face
        pixels = max(1, round(size * scale))

        if location is not None and location.coords:
            face.set_var_blend_coords(list(location.normalized().values()))

        face.set_pixel_sizes(0, pixels)
        face.load_glyph(glyph_index, freetype.FT_LOAD_RENDER | freetype.FT_LOAD_NO_BITMAP)
        slot = face.glyph
        bitmap = slot.bitmap

        canvas = Image.new("RGB", (pixels, pixels), ImageColor.getrgb(background))
        width, rows, pitch = bitmap.width, bitmap.rows, bitmap.pitch
        if width and rows:
            buffer = bytes(bitmap.buffer)
            coverage = b"".join(buffer[y * pitch : y * pitch + width] for y in range(rows))
            mask = Image.frombytes("L", (width, rows), coverage)
            baseline = pixels * face.ascender // face.units_per_EM
            x = slot.bitmap_left
            y = baseline - slot.bitmap_top
            canvas.paste(ImageColor.getrgb(foreground), (x, y, x + width, y + rows), mask)

        out = BytesIO()
        canvas.save(out, format="PNG")
        return out.getvalue()
