"""Font reader for variable icon fonts.

This module provides the IconFont class, which extracts what the diff needs
from a font binary: variation axes, the icon set, units per em, canonical
design-space locations and renderings of individual icons.
"""

from collections import defaultdict
from collections.abc import Mapping
from io import BytesIO
from pathlib import Path

from fontTools.misc.fixedTools import floatToFixed
from fontTools.ttLib import TTFont, TTLibError
from fontTools.ttLib.tables import otTables
from fontTools.varLib.models import normalizeLocation, piecewiseLinearMap

from icondiff.domain import Axis, IconIdentifier, Location
from icondiff.domain.axis import F2DOT14_BITS
from icondiff.exceptions import FontLoadError, GlyphNotFoundError, MissingTableError
from icondiff.io.raster import RasterRenderer
from icondiff.io.svg import draw_svg

REQUIRED_TABLES = ("head", "cmap")

# Ligature substitution, and the Extension lookup that may wrap one
LIGATURE_LOOKUP = 4
EXTENSION_LOOKUP = 7

PRIVATE_USE_RANGES = (
    (0xE000, 0xF8FF),
    (0xF0000, 0xFFFFD),
    (0x100000, 0x10FFFD),
)


def is_private_use(codepoint: int) -> bool:
    """Check whether a codepoint lies in a Private Use Area."""
    return any(low <= codepoint <= high for low, high in PRIVATE_USE_RANGES)


class IconFont:
    """A loaded icon font.

    Icons are identified by their ligature names (the text that shapes to
    the icon glyph) and the codepoints mapped to the icon glyph. Glyphs
    reachable only through a Private Use Area codepoint are icons named
    after their glyph.

    Example:
        with IconFont(Path("icons.ttf")) as font:
            for axis in font.axes():
                print(axis.tag, axis.min, axis.max)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._label = str(font_path)
        self._data: bytes | None = None
        self._font: TTFont | None = None
        self._glyph_by_name: dict[str, str] | None = None
        self._raster: RasterRenderer | None = None

    @classmethod
    def from_bytes(cls, data: bytes, label: str = "<memory>") -> "IconFont":
        """Create and load a font from an in-memory binary."""
        icon_font = cls(Path(label))
        icon_font._data = data
        icon_font.load()
        return icon_font

    def load(self) -> None:
        """Load and validate the font binary.

        Raises:
            FontLoadError: If the file cannot be read or parsed
            MissingTableError: If a required table is absent
        """
        if self._data is None:
            try:
                self._data = self._font_path.read_bytes()
            except OSError as e:
                raise FontLoadError(self._label, str(e)) from e

        try:
            self._font = TTFont(BytesIO(self._data))
        except (TTLibError, AssertionError, ValueError) as e:
            raise FontLoadError(self._label, str(e)) from e

        for tag in REQUIRED_TABLES:
            if tag not in self._font:
                raise MissingTableError(self._label, tag)

    @property
    def font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def label(self) -> str:
        return self._label

    @property
    def data(self) -> bytes:
        """The raw font binary."""
        if self._data is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._data

    @property
    def units_per_em(self) -> int:
        return self.font["head"].unitsPerEm

    def axes(self) -> list[Axis]:
        """Variation axes in fvar order; empty for static fonts."""
        if "fvar" not in self.font:
            return []
        return [
            Axis(
                tag=axis.axisTag,
                min=int(axis.minValue),
                default=int(axis.defaultValue),
                max=int(axis.maxValue),
            )
            for axis in self.font["fvar"].axes
        ]

    def location(self, user: Mapping[str, float]) -> Location:
        """Canonicalize user-space coordinates.

        Coordinates are normalized against the fvar ranges, mapped through
        avar when present and quantized to F2Dot14. Axes missing from user
        take their default.

        Args:
            user: User-space value per axis tag

        Returns:
            Location whose equality is independent of float noise in user
        """
        if "fvar" not in self.font:
            return Location(coords=())

        fvar_axes = self.font["fvar"].axes
        triples = {
            axis.axisTag: (axis.minValue, axis.defaultValue, axis.maxValue)
            for axis in fvar_axes
        }
        full = {
            axis.axisTag: float(user.get(axis.axisTag, axis.defaultValue)) for axis in fvar_axes
        }
        normalized = normalizeLocation(full, triples)

        if "avar" in self.font:
            for tag, mapping in self.font["avar"].segments.items():
                if mapping and tag in normalized:
                    normalized[tag] = piecewiseLinearMap(normalized[tag], mapping)

        return Location(
            coords=tuple(
                (axis.axisTag, floatToFixed(normalized[axis.axisTag], F2DOT14_BITS))
                for axis in fvar_axes
            ),
            user=tuple((axis.axisTag, full[axis.axisTag]) for axis in fvar_axes),
        )

    def _ligature_names(self) -> dict[str, set[str]]:
        """Ligature strings per target glyph, from GSUB."""
        names: dict[str, set[str]] = defaultdict(set)
        if "GSUB" not in self.font:
            return names
        gsub = self.font["GSUB"].table
        if gsub.LookupList is None:
            return names

        char_for_glyph: dict[str, str] = {}
        for codepoint, glyph_name in sorted(self.font.getBestCmap().items()):
            char_for_glyph.setdefault(glyph_name, chr(codepoint))

        for lookup in gsub.LookupList.Lookup:
            for subtable in lookup.SubTable:
                if lookup.LookupType == EXTENSION_LOOKUP:
                    if subtable.ExtensionLookupType != LIGATURE_LOOKUP:
                        continue
                    subtable = subtable.ExtSubTable
                elif lookup.LookupType != LIGATURE_LOOKUP:
                    continue
                if not isinstance(subtable, otTables.LigatureSubst):
                    continue
                for first, ligatures in subtable.ligatures.items():
                    for ligature in ligatures:
                        sequence = [first, *ligature.Component]
                        if all(g in char_for_glyph for g in sequence):
                            text = "".join(char_for_glyph[g] for g in sequence)
                            names[ligature.LigGlyph].add(text)
        return names

    def icons(self) -> set[IconIdentifier]:
        """Every icon the font defines, without glyph indices."""
        codepoints: dict[str, set[int]] = defaultdict(set)
        for codepoint, glyph_name in self.font.getBestCmap().items():
            codepoints[glyph_name].add(codepoint)

        names = self._ligature_names()
        for glyph_name, glyph_codepoints in codepoints.items():
            if glyph_name not in names and any(is_private_use(cp) for cp in glyph_codepoints):
                names[glyph_name].add(glyph_name)

        self._glyph_by_name = {}
        icons = set()
        for glyph_name, icon_names in names.items():
            for icon_name in icon_names:
                self._glyph_by_name.setdefault(icon_name, glyph_name)
            icons.add(IconIdentifier.create(icon_names, codepoints.get(glyph_name, ())))
        return icons

    def glyph_for(self, icon_name: str) -> str:
        """Glyph name drawn for an icon name.

        Raises:
            GlyphNotFoundError: If no icon has that name
        """
        if self._glyph_by_name is None:
            self.icons()
        try:
            return self._glyph_by_name[icon_name]
        except KeyError:
            raise GlyphNotFoundError(icon_name) from None

    def draw_svg(self, icon_name: str, location: Location, size: int) -> str:
        """Render an icon as an SVG document."""
        return draw_svg(self.font, self.glyph_for(icon_name), location, size)

    def draw_png(
        self,
        icon_name: str,
        location: Location,
        size: int,
        scale: float = 1.0,
        foreground: str = "#000000",
        background: str = "#ffffff",
    ) -> bytes:
        """Render an icon as a PNG image."""
        if self._raster is None:
            self._raster = RasterRenderer(self.data)
        glyph_index = self.font.getGlyphID(self.glyph_for(icon_name))
        return self._raster.draw(glyph_index, size, scale, foreground, background, location)

    def close(self) -> None:
        """Close the font and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
        self._raster = None

    def __enter__(self) -> "IconFont":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
